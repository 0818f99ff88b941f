"""Character legality rules for attribute values.

XML 1.1 allows most control characters only as character references and
forbids a handful outright. A value is legal when none of its code points
falls inside ``RESTRICTED_RANGES``.

INVARIANT: the same table guards construction and numeric-escape resolution.
"""

from __future__ import annotations

from dataclasses import dataclass

from attrlit.domain.errors import ValidationError

# Inclusive (low, high) pairs.
RESTRICTED_RANGES: tuple[tuple[int, int], ...] = (
    (0x00, 0x08),
    (0x0B, 0x0C),
    (0x0E, 0x1F),
    (0x7F, 0x84),
    (0x86, 0x9F),
)


@dataclass(frozen=True)
class Violation:
    """One restricted character found in a text."""

    index: int
    code_point: int
    low: int
    high: int

    def as_dict(self) -> dict[str, int | str]:
        return {
            "index": self.index,
            "code_point": f"#{self.code_point:02X}",
            "range": f"#{self.low:02X}-#{self.high:02X}",
        }


def restricted_range(code_point: int) -> tuple[int, int] | None:
    """Return the restricted range containing *code_point*, or None."""
    for low, high in RESTRICTED_RANGES:
        if low <= code_point <= high:
            return low, high
    return None


def check_code_point(code_point: int) -> int:
    """Return *code_point* unchanged, or raise ValidationError if it is restricted."""
    hit = restricted_range(code_point)
    if hit is not None:
        raise ValidationError(code_point, *hit)
    return code_point


def check_text(text: str) -> str:
    """Validate every character of *text*; stops at the first offender."""
    for char in text:
        check_code_point(ord(char))
    return text


def is_legal(text: str) -> bool:
    """Whether *text* contains no restricted code points.

    Examples:
        >>> is_legal("tab\\tis fine")
        True
        >>> is_legal("bell\\x07")
        False
    """
    return all(restricted_range(ord(char)) is None for char in text)


def find_illegal(text: str) -> list[Violation]:
    """Collect every restricted character in *text*, in order."""
    found: list[Violation] = []
    for index, char in enumerate(text):
        hit = restricted_range(ord(char))
        if hit is not None:
            found.append(Violation(index, ord(char), *hit))
    return found
