"""Escaping and unescaping of double-quoted attribute literals.

``escape`` never fails: it assumes its input already passed
:func:`attrlit.domain.charset.check_text`. ``unescape`` is its inverse and
reports malformed or illegal escape sequences through the domain errors.
"""

from __future__ import annotations

from attrlit.domain.charset import check_code_point
from attrlit.domain.entities import CHAR_ENTITIES, ENTITY_CHARS
from attrlit.domain.errors import ParseError

QUOTE = '"'


def escape(text: str) -> str:
    """Replace control characters and markup-significant characters with entities.

    Examples:
        >>> escape("a<b")
        'a&lt;b'
        >>> escape("line\\nbreak")
        'line&#10;break'
    """
    parts: list[str] = []
    for char in text:
        if char < " ":
            parts.append(f"&#{ord(char)};")
        else:
            parts.append(CHAR_ENTITIES.get(char, char))
    return "".join(parts)


def quote(text: str) -> str:
    """Escape *text* and wrap it in double quotes."""
    return f"{QUOTE}{escape(text)}{QUOTE}"


def resolve_symbol(symbol: str) -> str:
    """Resolve the text between ``&`` and ``;`` to a single character."""
    if symbol.startswith("#"):
        digits = symbol[1:]
        if not digits.isdecimal() or not digits.isascii():
            raise ParseError(f"malformed numeric escape &{symbol};", symbol=symbol)
        code_point = int(digits)
        if code_point > 0x10FFFF:
            raise ParseError(f"numeric escape out of range &{symbol};", symbol=symbol)
        return chr(check_code_point(code_point))
    char = ENTITY_CHARS.get(symbol)
    if char is None:
        raise ParseError(f"unknown escape symbol &{symbol};", symbol=symbol)
    return char


def unescape(literal: str) -> str:
    """Recover the raw text from a quoted literal produced by :func:`quote`.

    The first and last characters are taken as delimiters and dropped
    without inspection. The terminating ``;`` of an entity is searched
    for in the whole input, so an entity may swallow the closing delimiter.

    Raises:
        ValueError: *literal* is shorter than two characters.
        ParseError: an entity is unterminated or unknown.
        ValidationError: a numeric entity names a restricted code point.
    """
    if len(literal) < 2:
        raise ValueError("internal error, a quoted literal can't be shorter than 2 chars")
    output: list[str] = []
    idx = 1
    end = len(literal) - 1
    while idx < end:
        char = literal[idx]
        if char == "&":
            stop = literal.find(";", idx + 1)
            if stop == -1:
                raise ParseError("reached end of input while parsing an escape sequence")
            output.append(resolve_symbol(literal[idx + 1 : stop]))
            idx = stop + 1
        else:
            output.append(char)
            idx += 1
    return "".join(output)
