"""Tracebag: trace-context and baggage propagation over text carriers."""

from __future__ import annotations

from typing import Optional

from tracebag.errors import ConfigError, InvalidFormatError, TracebagError
from tracebag.tracer import SpanContext, Tracer
from tracebag.propagation import Format, PropagationRegistry
from tracebag.config import TracerConfig, load_config

__version__ = "0.1.0"


def get_tracer(service_name: Optional[str] = None) -> Tracer:
    """
    Build a tracer from ``load_config()``.
    
    Args:
        service_name: Overrides the configured service name
    """
    return Tracer.from_config(load_config(service_name=service_name))


__all__ = [
    "__version__",
    "Format",
    "SpanContext",
    "Tracer",
    "PropagationRegistry",
    "TracerConfig",
    "load_config",
    "get_tracer",
    "TracebagError",
    "InvalidFormatError",
    "ConfigError",
]
