"""Shared decorators for attrlit commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def examples_option(examples: str) -> Callable[[F], F]:
    """Add an eager ``--examples`` flag that prints *examples* and exits."""

    def _print(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print,
        help="Show usage examples and exit.",
    )
