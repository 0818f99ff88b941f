"""AttrlitSettings — global CLI flags plus ``attrlit.toml`` sections.

Precedence: CLI flags, then ``ATTRLIT_*`` env vars (nested keys use ``__``,
e.g. ``ATTRLIT_OUTPUT__WIDTH=80``), then ``attrlit.toml``, then the
defaults in :mod:`attrlit.config.models`.

The TOML file is ``--config`` when given, else ``$ATTRLIT_CONFIG``, else the
first ``attrlit.toml`` found walking up from the working directory.
"""

from __future__ import annotations

import os
import tomllib
from contextvars import ContextVar
from pathlib import Path

import click
import pydantic
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from attrlit.config.models import InputConfig, OutputConfig

CONFIG_FILENAME = "attrlit.toml"
CONFIG_ENV_VAR = "ATTRLIT_CONFIG"

# File picked by from_cli(), read by settings_customise_sources().
_active_toml: ContextVar[Path | None] = ContextVar("attrlit_active_toml", default=None)


def locate_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Resolve which ``attrlit.toml`` applies, or None."""
    chosen = explicit or os.environ.get(CONFIG_ENV_VAR)
    if chosen:
        path = Path(chosen)
        return path if path.is_file() else None
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class AttrlitSettings(BaseSettings):
    """Frozen settings object stored on the click context."""

    model_config = {
        "frozen": True,
        "env_prefix": "ATTRLIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    output: OutputConfig = Field(default_factory=OutputConfig)
    input: InputConfig = Field(default_factory=InputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_path = _active_toml.get()
        if toml_path is None:
            return init_settings, env_settings
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **flags: bool,
    ) -> AttrlitSettings:
        """Build settings for one invocation.

        Raises:
            click.ClickException: the TOML file does not parse, or a value
                in it (or in the environment) fails validation.
        """
        toml_path = locate_config(config_path, start)
        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        except pydantic.ValidationError as exc:
            where = toml_path or "environment"
            raise click.ClickException(f"Invalid configuration ({where}): {exc}") from exc
        finally:
            _active_toml.reset(token)
