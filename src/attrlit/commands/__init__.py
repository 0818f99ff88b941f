"""Subcommand modules for attrlit.

Provides register_commands() which uses deferred imports to keep
``attrlit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from attrlit.commands.check import check
    from attrlit.commands.render import render
    from attrlit.commands.unescape import unescape

    cli.add_command(render)
    cli.add_command(unescape)
    cli.add_command(check)
