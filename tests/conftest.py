"""Shared pytest fixtures for numeral tests."""

from __future__ import annotations

import os

import pytest

from numeral.config.settings import NumeralSettings
from numeral.services.convert import ConvertService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``NUMERAL_*`` variables from the outer shell out of every test."""
    for key in list(os.environ):
        if key.startswith("NUMERAL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> NumeralSettings:
    """Settings with code defaults only."""
    return NumeralSettings.load()


@pytest.fixture
def service(settings: NumeralSettings) -> ConvertService:
    """ConvertService on default settings."""
    return ConvertService(settings)


@pytest.fixture
def permissive_service() -> ConvertService:
    """ConvertService that accepts single-symbol alphabets."""
    return ConvertService(NumeralSettings.load(encode={"strict": False}))
