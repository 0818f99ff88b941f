"""ArgumentValue — a validated, immutable attribute value.

INVARIANT: an ArgumentValue never holds a restricted code point.
The check runs once in ``__post_init__``; the dataclass is frozen
afterwards, so instances are safe to share between threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from attrlit.domain.charset import check_text
from attrlit.domain.escape import quote, unescape


@dataclass(frozen=True)
class ArgumentValue:
    """One raw string, rendered on demand as an escaped, quoted literal.

    Equality and hashing use ``raw`` only.

    Examples:
        >>> ArgumentValue("<a>").render()
        '"&lt;a&gt;"'
    """

    raw: str

    def __post_init__(self) -> None:
        check_text(self.raw)

    def render(self) -> str:
        """The quoted literal; never fails."""
        return quote(self.raw)

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def from_literal(cls, literal: str) -> Self:
        """Parse a quoted literal back into a value."""
        return cls(unescape(literal))
