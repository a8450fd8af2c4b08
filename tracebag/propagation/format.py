"""Carrier formats understood by the propagation layer."""

from enum import Enum


class Format(Enum):
    """
    Closed set of wire formats.

    Pass a member to ``Tracer.inject()`` / ``Tracer.extract()``::

        tracer.inject(span_context, Format.HTTP_HEADERS, headers)

    Anything that is not a member of this enum is rejected with
    ``InvalidFormatError``.
    """

    TEXT_MAP = "text_map"
    """Plain string-to-string carrier. Keys and values are written verbatim."""

    HTTP_HEADERS = "http_headers"
    """Header-safe carrier. Keys and values are form-style percent encoded."""
