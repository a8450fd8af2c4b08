"""
Carrier access using OpenTelemetry's text map getter/setter protocol.

The propagation layer never touches a carrier directly. Reads go through a
``Getter`` (``keys`` + ``get``) and writes through a ``Setter`` (``set``), so
any header container can be used by supplying a matching pair. Plain
``dict`` carriers work with the defaults.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from opentelemetry.propagators.textmap import (
    CarrierT,
    Getter,
    Setter,
    default_getter,
    default_setter,
)

__all__ = [
    "CarrierT",
    "Getter",
    "Setter",
    "default_getter",
    "default_setter",
    "iter_carrier",
]


def _first(values) -> Optional[str]:
    if values is None:
        return None
    if isinstance(values, str):
        return values
    for value in values:
        return value
    return None


def iter_carrier(carrier: CarrierT, getter: Getter = default_getter) -> Iterator[Tuple[str, str]]:
    """
    Yield every (key, value) pair the carrier exposes.

    OpenTelemetry getters return a list per key; only the first value is used.
    Keys without a value are skipped.
    """
    for key in getter.keys(carrier):
        value = _first(getter.get(carrier, key))
        if value is not None:
            yield key, value
