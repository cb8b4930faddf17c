"""Quickstart: list, search and inspect integrations programmatically.

Run with::

    python examples/01_quickstart.py
"""
from __future__ import annotations

import dataclasses

import integration_catalog
from integration_catalog.config import ChannelsConfig, Config, TelegramConfig
from integration_catalog.errors import InvalidFilterError, UnknownIntegrationError

config = Config()

# Every chat provider, grouped and in catalog order
for group in integration_catalog.list_integrations(config, category="messaging"):
    print(group.category.label)
    for view in group.integrations:
        print(f"  {view.status.icon} {view.name} — {view.description}")

# Search is a case-insensitive substring match, sorted by name
for view in integration_catalog.search(config, "local"):
    print(f"{view.name} [{view.category.label}]")

# Status is recomputed from whatever configuration you pass in
configured = dataclasses.replace(
    config, channels=ChannelsConfig(telegram=TelegramConfig(bot_token="123:abc"))
)
print(integration_catalog.info(config, "telegram").status.label)
print(integration_catalog.info(configured, "telegram").status.label)

try:
    integration_catalog.list_integrations(config, category="bogus")
except InvalidFilterError as exc:
    print(exc)

try:
    integration_catalog.info(config, "tele")
except UnknownIntegrationError as exc:
    print(exc)
