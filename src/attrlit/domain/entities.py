"""Named entities understood by the escaper and the unescaper."""

from __future__ import annotations

ENTITY_CHARS: dict[str, str] = {
    "apos": "'",
    "quot": '"',
    "lt": "<",
    "gt": ">",
    "amp": "&",
}

CHAR_ENTITIES: dict[str, str] = {char: f"&{name};" for name, char in ENTITY_CHARS.items()}
