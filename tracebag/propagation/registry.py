"""Format registry: maps each supported ``Format`` to its codec."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from tracebag.errors import InvalidFormatError
from tracebag.propagation.carrier import CarrierT, Getter, Setter, default_getter, default_setter
from tracebag.propagation.codex import PLAIN_CODEX, URL_CODEX
from tracebag.propagation.format import Format
from tracebag.propagation.text_map import TextMapCodec
from tracebag.tracer.span_context import SpanContext

logger = logging.getLogger(__name__)

_DEFAULT_CODECS = {
    Format.TEXT_MAP: TextMapCodec(PLAIN_CODEX),
    Format.HTTP_HEADERS: TextMapCodec(URL_CODEX),
}


class PropagationRegistry:
    """
    Dispatches inject/extract calls to the codec registered for a format.

    The format-to-codec mapping is fixed at construction and read-only
    afterwards, so one registry can be shared between threads.
    """

    def __init__(self, codecs: Mapping[Format, TextMapCodec]) -> None:
        for fmt in codecs:
            if not isinstance(fmt, Format):
                raise InvalidFormatError(
                    "Only built-in formats can be registered",
                    {"format": repr(fmt)},
                )
        self._codecs: Mapping[Format, TextMapCodec] = MappingProxyType(dict(codecs))

    @classmethod
    def default(cls) -> "PropagationRegistry":
        """Registry with a codec for every ``Format`` member."""
        return cls(_DEFAULT_CODECS)

    @classmethod
    def for_formats(cls, formats: Iterable[Format]) -> "PropagationRegistry":
        """Registry restricted to ``formats``, using the default codec for each."""
        codecs = {}
        for fmt in formats:
            if not isinstance(fmt, Format):
                raise InvalidFormatError("Unknown carrier format", {"format": repr(fmt), "reason": "unknown"})
            codecs[fmt] = _DEFAULT_CODECS[fmt]
        return cls(codecs)

    @property
    def formats(self) -> frozenset:
        return frozenset(self._codecs)

    def codec_for(self, format: Any) -> TextMapCodec:
        """
        Return the codec for ``format``.

        Raises:
            InvalidFormatError: ``format`` is not a ``Format`` member, or is
                one this registry was built without.
        """
        if not isinstance(format, Format):
            logger.warning("Rejected unknown carrier format %r", format)
            raise InvalidFormatError("Unknown carrier format", {"format": repr(format), "reason": "unknown"})

        codec = self._codecs.get(format)
        if codec is None:
            logger.warning("Rejected unsupported carrier format %s", format.value)
            raise InvalidFormatError("Unsupported carrier format", {"format": format.value, "reason": "unsupported"})
        return codec

    def inject(
        self,
        context: SpanContext,
        format: Any,
        carrier: CarrierT,
        setter: Setter = default_setter,
    ) -> None:
        codec = self.codec_for(format)
        codec.inject(context, carrier, setter)
        logger.debug(
            "Injected trace_id=%s into %s carrier (%d baggage items)",
            context.trace_id,
            format.value,
            len(context.baggage),
        )

    def extract(
        self,
        format: Any,
        carrier: CarrierT,
        getter: Getter = default_getter,
    ) -> Optional[SpanContext]:
        codec = self.codec_for(format)
        context = codec.extract(carrier, getter)
        if context is not None:
            logger.debug(
                "Extracted trace_id=%s from %s carrier (%d baggage items)",
                context.trace_id,
                format.value,
                len(context.baggage),
            )
        return context
