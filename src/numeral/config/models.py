"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, the config file only contains
overrides. An empty file reproduces the library's built-in behavior.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from numeral.domain.bytesize import DEFAULT_MARGIN, DEFAULT_THRESHOLD


class EncodeConfig(BaseModel):
    """[encode] section."""

    model_config = {"frozen": True}

    strict: bool = True


class WordsConfig(BaseModel):
    """[words] section."""

    model_config = {"frozen": True}

    precision: int = Field(default=2, ge=0)


class SizesConfig(BaseModel):
    """[sizes] section."""

    model_config = {"frozen": True}

    threshold: float = Field(default=DEFAULT_THRESHOLD, gt=0)
    margin: float = Field(default=DEFAULT_MARGIN, ge=0, lt=0.5)
