"""Immutable trace identity plus baggage, as carried across process boundaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional


def _as_id(value: Any) -> str:
    # Id generators hand out opaque objects (e.g. uuid.UUID); the wire carries str()
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class SpanContext:
    """
    Trace, span and parent identifiers with a read-only baggage mapping.

    Instances never change after construction. ``add_baggage`` returns a new
    context, so a context handed to another thread stays as it was.
    """

    trace_id: str
    span_id: str
    parent_id: str
    baggage: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "trace_id", _as_id(self.trace_id))
        object.__setattr__(self, "span_id", _as_id(self.span_id))
        object.__setattr__(self, "parent_id", _as_id(self.parent_id))
        object.__setattr__(self, "baggage", MappingProxyType(dict(self.baggage)))

    def add_baggage(self, key: str, value: str) -> "SpanContext":
        """Return a copy of this context with ``key`` set to ``value``."""
        return self.with_baggage({key: value})

    def with_baggage(self, items: Mapping[str, str]) -> "SpanContext":
        """Return a copy of this context with ``items`` merged into its baggage."""
        merged = dict(self.baggage)
        merged.update(items)
        return SpanContext(self.trace_id, self.span_id, self.parent_id, merged)

    def get_baggage_item(self, key: str) -> Optional[str]:
        return self.baggage.get(key)

    def is_valid(self) -> bool:
        return bool(self.trace_id and self.span_id and self.parent_id)
