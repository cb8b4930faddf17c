"""Load a YAML configuration and export query results as JSON and YAML.

Run with::

    python examples/02_config_and_export.py
"""
from __future__ import annotations

import tempfile
from pathlib import Path

from integration_catalog.config import load_config
from integration_catalog.query import QueryEngine, ResultSerializer

CONFIG_YAML = """\
default_provider: anthropic
channels:
  discord:
    bot_token: "discord-token"
  webhook:
    port: 9000
browser:
  enabled: true
"""

with tempfile.TemporaryDirectory() as tmp:
    path = Path(tmp) / "zeroclaw.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    config = load_config(path)

engine = QueryEngine(config)
serializer = ResultSerializer()

print("=== Active integrations (JSON) ===")
print(serializer.to_json(engine.list(status="active")))

print("=== Browser detail (YAML) ===")
print(serializer.to_yaml(engine.info("browser")))
