"""Payload match expressions used to select which dialogs are stored."""

from __future__ import annotations

import re


class InvalidExpression(ValueError):
    """Raised when a match expression cannot be compiled."""


class MatchExpression:
    """A regular expression that captured payloads are checked against."""

    def __init__(self, expr: str | None, insensitive: bool = False, invert: bool = False) -> None:
        self.expr = expr
        self.insensitive = bool(insensitive)
        self.invert = bool(invert)
        self._regex = None
        if expr is None:
            return
        flags = re.DOTALL
        if self.insensitive:
            flags |= re.IGNORECASE
        try:
            self._regex = re.compile(expr, flags)
        except re.error as exc:
            raise InvalidExpression(f"Unable to parse expression {expr}") from exc

    def matches(self, payload: str | bytes) -> bool:
        """Return True if the payload should be kept.

        Without an expression everything matches; with ``invert`` the
        result of the search is reversed.
        """
        if self._regex is None:
            return True
        if isinstance(payload, (bytes, bytearray)):
            payload = bytes(payload).decode("latin-1")
        found = self._regex.search(payload) is not None
        return found != self.invert