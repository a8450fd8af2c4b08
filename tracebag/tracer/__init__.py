"""Tracer components for the propagation layer."""

from tracebag.tracer.span_context import SpanContext
from tracebag.tracer.tracer import Tracer

__all__ = [
    "SpanContext",
    "Tracer",
]
