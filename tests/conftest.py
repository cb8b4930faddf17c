"""Shared test fixtures for integration-catalog.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import dataclasses

import pytest

from integration_catalog.config import ChannelsConfig, Config, TelegramConfig


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "integration_catalog"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def default_config() -> Config:
    """A fresh configuration with nothing set up, pinned to Linux."""
    return Config(platform="linux")


@pytest.fixture()
def telegram_config(default_config: Config) -> Config:
    """``default_config`` plus valid Telegram credentials."""
    return dataclasses.replace(
        default_config,
        channels=ChannelsConfig(telegram=TelegramConfig(bot_token="123456:ABC-DEF")),
    )
