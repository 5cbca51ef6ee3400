"""Shared fixtures."""

import pytest

from line_builder.config import BuilderSettings, get_settings
from line_builder.context import Context, Mode


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("LINE_BUILDER_MODE", "LINE_BUILDER_STRICT_BOX_CONTENTS", "LINE_BUILDER_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return BuilderSettings()


@pytest.fixture
def ctx(settings):
    return Context(mode=Mode.STANDARD, settings=settings)


@pytest.fixture
def sdk_ctx(settings):
    return Context(mode=Mode.ALTERNATE, settings=settings)


def _all_keys(payload):
    """Every mapping key in a nested payload."""
    if isinstance(payload, dict):
        for key, value in payload.items():
            yield key
            yield from _all_keys(value)
    elif isinstance(payload, list):
        for item in payload:
            yield from _all_keys(item)


@pytest.fixture
def all_keys():
    return lambda payload: set(_all_keys(payload))
