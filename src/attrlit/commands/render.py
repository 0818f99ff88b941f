"""Command: render raw text as an escaped, quoted attribute literal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from attrlit.commands._base import examples_option

if TYPE_CHECKING:
    from attrlit.commands._context import AppContext


@click.command()
@examples_option(
    """\
  attrlit render 'Tom & Jerry'
  attrlit -q render '<b>'
  printf 'a\\tb' | attrlit --json render"""
)
@click.argument("text", required=False)
@click.pass_obj
def render(app: AppContext, text: str | None) -> None:
    """Validate TEXT and print it as a quoted literal (stdin if omitted)."""
    from attrlit.services.literal import render_literal

    app.emit(render_literal(app.read_value(text)))
