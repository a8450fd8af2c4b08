"""Trace-context codec for string key/value carriers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from tracebag.propagation.carrier import CarrierT, Getter, Setter, default_getter, default_setter, iter_carrier
from tracebag.propagation.codex import PLAIN_CODEX, Codex
from tracebag.tracer.span_context import SpanContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyConvention:
    """Carrier field names. Case-sensitive; part of the interoperability contract."""

    trace_id_key: str = "Trace-ID"
    span_id_key: str = "Span-ID"
    parent_id_key: str = "Parent-ID"
    baggage_prefix: str = "Baggage-"


DEFAULT_KEY_CONVENTION = KeyConvention()


class TextMapCodec:
    """
    Writes a ``SpanContext`` into a carrier and reads it back.

    Every key and value goes through ``codex``: ``PlainCodex`` for
    ``Format.TEXT_MAP``, ``UrlCodex`` for ``Format.HTTP_HEADERS``.
    """

    def __init__(self, codex: Codex = PLAIN_CODEX, keys: KeyConvention = DEFAULT_KEY_CONVENTION) -> None:
        self.codex = codex
        self.keys = keys

    def inject(self, context: SpanContext, carrier: CarrierT, setter: Setter = default_setter) -> None:
        """
        Write the three identifiers and one field per baggage item.

        The carrier gains ``3 + len(context.baggage)`` entries. Everything is
        encoded before the first write, so an encoding failure leaves the
        carrier untouched.
        """
        encode = self.codex.encode
        keys = self.keys

        fields = [
            (keys.trace_id_key, encode(context.trace_id)),
            (keys.span_id_key, encode(context.span_id)),
            (keys.parent_id_key, encode(context.parent_id)),
        ]
        fields.extend(
            (keys.baggage_prefix + encode(key), encode(value))
            for key, value in context.baggage.items()
        )

        for key, value in fields:
            setter.set(carrier, key, value)

    def extract(self, carrier: CarrierT, getter: Getter = default_getter) -> Optional[SpanContext]:
        """
        Read a ``SpanContext`` from the carrier.

        Returns None unless all three identifiers are present. Keys that are
        neither identifiers nor baggage are ignored.
        """
        decode = self.codex.decode
        keys = self.keys

        trace_id: Optional[str] = None
        span_id: Optional[str] = None
        parent_id: Optional[str] = None
        baggage: Dict[str, str] = {}

        for raw_key, raw_value in iter_carrier(carrier, getter):
            key = decode(raw_key)
            if key == keys.trace_id_key:
                trace_id = decode(raw_value)
            elif key == keys.span_id_key:
                span_id = decode(raw_value)
            elif key == keys.parent_id_key:
                parent_id = decode(raw_value)
            elif key.startswith(keys.baggage_prefix):
                baggage[key[len(keys.baggage_prefix):]] = decode(raw_value)

        if not (trace_id and span_id and parent_id):
            missing = [
                name
                for name, value in (
                    (keys.trace_id_key, trace_id),
                    (keys.span_id_key, span_id),
                    (keys.parent_id_key, parent_id),
                )
                if not value
            ]
            logger.debug("No trace context in carrier, missing %s", ", ".join(missing))
            return None

        return SpanContext(trace_id, span_id, parent_id, baggage)
