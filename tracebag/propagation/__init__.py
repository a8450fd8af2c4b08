"""Propagation formats, codecs and the format registry."""

from tracebag.propagation.carrier import Getter, Setter, default_getter, default_setter
from tracebag.propagation.codex import PLAIN_CODEX, URL_CODEX, Codex, PlainCodex, UrlCodex
from tracebag.propagation.format import Format
from tracebag.propagation.registry import PropagationRegistry
from tracebag.propagation.text_map import DEFAULT_KEY_CONVENTION, KeyConvention, TextMapCodec

__all__ = [
    "Format",
    "Codex",
    "PlainCodex",
    "UrlCodex",
    "PLAIN_CODEX",
    "URL_CODEX",
    "KeyConvention",
    "DEFAULT_KEY_CONVENTION",
    "TextMapCodec",
    "PropagationRegistry",
    "Getter",
    "Setter",
    "default_getter",
    "default_setter",
]
