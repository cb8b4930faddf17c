"""Configuration snapshot and YAML loader.

Exports the ``Config`` dataclass tree and ``load_config``.
"""
from __future__ import annotations

from integration_catalog.config.config import (
    BrowserConfig,
    ChannelsConfig,
    Config,
    DiscordConfig,
    IMessageConfig,
    MatrixConfig,
    SlackConfig,
    TelegramConfig,
    WebhookConfig,
)
from integration_catalog.config.loader import config_from_dict, load_config

__all__ = [
    "Config",
    "ChannelsConfig",
    "BrowserConfig",
    "TelegramConfig",
    "DiscordConfig",
    "SlackConfig",
    "WebhookConfig",
    "IMessageConfig",
    "MatrixConfig",
    "config_from_dict",
    "load_config",
]
