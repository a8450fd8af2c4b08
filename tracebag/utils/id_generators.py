"""Identifier generators for trace, span and parent ids."""

import uuid


class IdGenerator:
    """Produces opaque identifiers. Propagation only relies on ``str()`` of the result."""

    def generate(self):
        raise NotImplementedError


class RandomUUIDGenerator(IdGenerator):
    """Random (version 4) UUIDs."""

    def generate(self) -> uuid.UUID:
        return uuid.uuid4()
