"""Content errors raised by the domain layer.

Both kinds describe bad *data*. Caller misuse (for example handing
``unescape`` something shorter than a pair of quotes) raises the
built-in ``ValueError`` instead and is never converted by the service layer.
"""

from __future__ import annotations


class ArgumentError(Exception):
    """Base class for recoverable content errors."""


class ValidationError(ArgumentError):
    """A code point falls inside one of the restricted XML ranges."""

    def __init__(self, code_point: int, low: int, high: int) -> None:
        self.code_point = code_point
        self.low = low
        self.high = high
        super().__init__(
            f"Character #{code_point:02X} is in restricted XML range "
            f"#{low:02X}-#{high:02X}, "
            "see http://www.w3.org/TR/2004/REC-xml11-20040204/#charsets"
        )


class ParseError(ArgumentError):
    """An escape sequence inside a quoted literal is malformed."""

    def __init__(self, message: str, *, symbol: str | None = None) -> None:
        self.symbol = symbol
        super().__init__(message)
