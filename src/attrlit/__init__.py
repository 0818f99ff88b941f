"""attrlit — escape, validate and unescape XML attribute literals."""

from __future__ import annotations

from attrlit.domain.arg import ArgumentValue
from attrlit.domain.charset import check_code_point, check_text, find_illegal, is_legal
from attrlit.domain.errors import ArgumentError, ParseError, ValidationError
from attrlit.domain.escape import escape, unescape

__version__ = "0.1.0"

__all__ = [
    "ArgumentError",
    "ArgumentValue",
    "ParseError",
    "ValidationError",
    "__version__",
    "check_code_point",
    "check_text",
    "escape",
    "find_illegal",
    "is_legal",
    "unescape",
]
