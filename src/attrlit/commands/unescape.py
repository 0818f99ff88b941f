"""Command: recover raw text from a quoted attribute literal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from attrlit.commands._base import examples_option

if TYPE_CHECKING:
    from attrlit.commands._context import AppContext


@click.command()
@examples_option(
    """\
  attrlit unescape '"Tom &amp; Jerry"'
  attrlit -q unescape '"&#65;&lt;"'"""
)
@click.argument("literal", required=False)
@click.pass_obj
def unescape(app: AppContext, literal: str | None) -> None:
    """Print the raw text of a quoted LITERAL (stdin if omitted)."""
    from attrlit.services.literal import unescape_literal

    value = app.read_value(literal)
    if len(value) < 2:
        raise click.BadParameter(
            "a quoted literal needs at least its two quotes", param_hint="LITERAL"
        )
    app.emit(unescape_literal(value))
