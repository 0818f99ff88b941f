"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, attrlit.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, gt=0)
    color: bool = True


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    strip_newline: bool = True


class AttrlitConfig(BaseModel):
    """Root model for attrlit.toml."""

    model_config = {"frozen": True}

    output: OutputConfig = Field(default_factory=OutputConfig)
    input: InputConfig = Field(default_factory=InputConfig)
