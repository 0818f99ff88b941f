"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). ``--quiet`` prints only the payload a shell pipeline wants:
the literal for ``render``, the raw text for ``unescape``.

Human output is rendered into an in-memory Rich console, so callers always
get a ``str``; Rich drops colour codes when no terminal is attached.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from attrlit.services.result import ServiceResult

STYLES = Theme(
    {
        "attrlit.ok": "bold green",
        "attrlit.error": "bold red",
        "attrlit.op": "bold cyan",
        "attrlit.key": "dim",
        "attrlit.literal": "bold blue",
        "attrlit.code": "magenta",
    }
)

# Field printed alone in quiet mode, per op.
_QUIET_FIELDS: dict[str, str] = {
    "render": "literal",
    "unescape": "raw",
}


@dataclass(frozen=True)
class OutputSettings:
    """Output switches derived from global CLI flags and [output] config."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int = 120
    color: bool = True


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result)

    buffer = StringIO()
    console = Console(
        file=buffer,
        theme=STYLES,
        no_color=not settings.color,
        highlight=False,
        width=settings.width,
    )
    if result.ok:
        _render_ok(result, console)
    else:
        _render_error(result, console, verbose=settings.verbose)
    return buffer.getvalue().rstrip("\n")


def _format_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    key = _QUIET_FIELDS.get(result.op)
    if key is not None and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


def _render_ok(result: ServiceResult, console: Console) -> None:
    label = Text("OK", style="attrlit.ok")
    op = Text(f"  {result.op}", style="attrlit.op")
    console.print(label, op)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="attrlit.error")
    op = Text(f"  {result.op}", style="attrlit.op")
    code = Text(f" [{err.code}]", style="attrlit.code") if err else Text("")
    console.print(label, op, code, Text(f" — {msg}"), sep="", soft_wrap=True)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {_plain(v)}", markup=False, emoji=False, soft_wrap=True)


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="attrlit.key")
    style = "attrlit.literal" if key == "literal" else ""
    console.print(k, Text(_plain(value), style=style), sep="", soft_wrap=True)


def _plain(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    if isinstance(value, str):
        # repr keeps control characters visible on a terminal
        return value if value.isprintable() else repr(value)
    return str(value)
