"""Escaping rules applied to keys and values as they cross the wire."""

from __future__ import annotations

from urllib.parse import quote_plus, unquote_plus


class Codex:
    """Base interface: encode before writing to a carrier, decode after reading."""

    def encode(self, value: str) -> str:
        raise NotImplementedError

    def decode(self, value: str) -> str:
        raise NotImplementedError


class PlainCodex(Codex):
    """Pass keys and values through untouched."""

    def encode(self, value: str) -> str:
        return value

    def decode(self, value: str) -> str:
        return value


class UrlCodex(Codex):
    """
    Form-style percent encoding (``application/x-www-form-urlencoded``).

    Letters, digits and ``-_.*`` are kept, space becomes ``+`` and every other
    UTF-8 byte becomes ``%XX`` with uppercase hex digits.
    """

    # quote_plus always keeps "~" unescaped; the form encoding escapes it
    _SAFE = "*"

    def encode(self, value: str) -> str:
        return quote_plus(value, safe=self._SAFE, encoding="utf-8").replace("~", "%7E")

    def decode(self, value: str) -> str:
        return unquote_plus(value, encoding="utf-8")


PLAIN_CODEX = PlainCodex()
URL_CODEX = UrlCodex()
