"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides input resolution and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from attrlit.config.logging import configure_logging
from attrlit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from attrlit.config.settings import AttrlitSettings
    from attrlit.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: AttrlitSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def read_value(self, value: str | None) -> str:
        """Return *value*, or read it from stdin when the argument was omitted.

        One trailing newline is stripped from stdin unless
        ``[input] strip_newline`` is false.
        """
        if value is not None:
            return value
        text = click.get_text_stream("stdin").read()
        if self.settings.input.strip_newline and text.endswith("\n"):
            text = text[:-1]
            if text.endswith("\r"):
                text = text[:-1]
        return text

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
            color=self.settings.output.color,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
