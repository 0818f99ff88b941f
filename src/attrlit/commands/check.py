"""Command: report restricted characters in a value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from attrlit.commands._base import examples_option

if TYPE_CHECKING:
    from attrlit.commands._context import AppContext


@click.command()
@examples_option(
    """\
  attrlit check 'plain text'
  printf 'bell\\a' | attrlit -v check"""
)
@click.argument("text", required=False)
@click.pass_obj
def check(app: AppContext, text: str | None) -> None:
    """Check TEXT for characters XML forbids (stdin if omitted)."""
    from attrlit.services.literal import check_value

    app.emit(check_value(app.read_value(text)))
