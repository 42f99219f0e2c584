"""NumeralSettings: the knobs ConvertService reads, from every source.

Highest priority first:

  1. keyword arguments to :meth:`NumeralSettings.load`
  2. ``NUMERAL_*`` env vars (``NUMERAL_ENCODE__STRICT=false``)
  3. the TOML file given to ``load()`` or named by ``$NUMERAL_CONFIG``
  4. defaults in :mod:`numeral.config.models`

A config file only needs the sections it changes::

    [encode]
    strict = false

    [sizes]
    threshold = 0.9
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from numeral.config.models import EncodeConfig, SizesConfig, WordsConfig

CONFIG_ENV_VAR = "NUMERAL_CONFIG"


def resolve_config_path(config_path: str | Path | None = None) -> Path | None:
    """Pick the TOML file to read: *config_path*, else ``$NUMERAL_CONFIG``.

    Returns None when neither names an existing file.
    """
    candidate = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not candidate:
        return None
    path = Path(candidate)
    return path if path.is_file() else None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None:
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise ValueError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# pydantic-settings builds sources inside __init__, so load() hands the
# resolved path over through thread-local state.
_tls = threading.local()


class NumeralSettings(BaseSettings):
    """Merged settings for a ConvertService.

    Attributes:
        config_path: The TOML file that was read, or None.
        verbose: DEBUG logging for ``numeral.*`` loggers.
        log_json: JSON log lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NUMERAL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    verbose: bool = False
    log_json: bool = False

    encode: EncodeConfig = Field(default_factory=EncodeConfig)
    words: WordsConfig = Field(default_factory=WordsConfig)
    sizes: SizesConfig = Field(default_factory=SizesConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None))
        return (init_settings, env_settings, toml)

    @classmethod
    def load(cls, config_path: str | Path | None = None, **overrides: Any) -> NumeralSettings:
        """Build settings from *overrides*, env vars and the resolved TOML file.

        A *config_path* that is not an existing file is ignored.
        """
        toml_path = resolve_config_path(config_path)
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
