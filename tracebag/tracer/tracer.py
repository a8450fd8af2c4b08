"""Tracer facade exposing inject/extract over the format registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from tracebag.propagation.carrier import CarrierT, Getter, Setter, default_getter, default_setter
from tracebag.propagation.registry import PropagationRegistry
from tracebag.tracer.span_context import SpanContext

if TYPE_CHECKING:
    from tracebag.config import TracerConfig

logger = logging.getLogger(__name__)


class Tracer:
    """
    Entry point for propagating trace context across process boundaries.

    Span creation and reporting live elsewhere; this object only moves
    ``SpanContext`` values in and out of carriers.
    """

    def __init__(self, service_name: str, registry: Optional[PropagationRegistry] = None):
        """
        Initialize tracer.
        
        Args:
            service_name: Name of the service this tracer reports for
            registry: Format registry; defaults to one supporting every format
        """
        self.service_name = service_name
        self._registry = registry or PropagationRegistry.default()

    @classmethod
    def from_config(cls, config: "TracerConfig") -> "Tracer":
        """
        Build a tracer from a validated configuration.
        
        Only the formats listed in ``config.formats`` are accepted by the
        resulting tracer.

        ``config.debug`` switches the process-wide ``tracebag`` logger to
        DEBUG. The level is only ever made more verbose, never less: it stays
        in effect for every tracer in the process until the application
        resets it.
        """
        if config.debug:
            package_logger = logging.getLogger("tracebag")
            if package_logger.getEffectiveLevel() > logging.DEBUG:
                package_logger.setLevel(logging.DEBUG)
        registry = PropagationRegistry.for_formats(config.formats)
        logger.debug(
            "Tracer for %s supports formats: %s",
            config.service_name,
            ", ".join(sorted(fmt.value for fmt in registry.formats)),
        )
        return cls(config.service_name, registry)

    @property
    def registry(self) -> PropagationRegistry:
        return self._registry

    def inject(
        self,
        span_context: SpanContext,
        format: Any,
        carrier: CarrierT,
        setter: Setter = default_setter,
    ) -> None:
        """
        Write ``span_context`` into ``carrier`` using the given format.
        
        Raises:
            InvalidFormatError: if ``format`` is not supported; nothing is written
        """
        self._registry.inject(span_context, format, carrier, setter)

    def extract(
        self,
        format: Any,
        carrier: CarrierT,
        getter: Getter = default_getter,
    ) -> Optional[SpanContext]:
        """
        Read a ``SpanContext`` from ``carrier``.
        
        Returns:
            The extracted context, or None if any identifier is missing
        
        Raises:
            InvalidFormatError: if ``format`` is not supported
        """
        return self._registry.extract(format, carrier, getter)
