"""Shared test fixtures."""
from datetime import datetime, timezone

import pytest

from datefmt import api
from datefmt.config import Settings
from datefmt.engine import DateFormatter
from datefmt.locales.registry import LocaleRegistry
from datefmt.patterns.registry import FormatterRegistry

FROZEN_NOW = datetime(2000, 1, 1, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def utc_settings():
    """Settings pinned to UTC so epoch and naive inputs are deterministic."""
    return Settings(default_language="en", timezone="UTC", pattern_cache_size=16)


@pytest.fixture
def frozen_clock():
    return lambda: FROZEN_NOW


@pytest.fixture
def formatter(utc_settings, frozen_clock):
    return DateFormatter(settings=utc_settings, clock=frozen_clock)


@pytest.fixture
def default_formatter(formatter):
    """Install *formatter* as the process-wide default for module-level API tests."""
    api.reset_default_formatter(formatter)
    yield formatter
    api.reset_default_formatter()


@pytest.fixture
def locale_registry():
    return LocaleRegistry()


@pytest.fixture
def formatter_registry():
    return FormatterRegistry()
