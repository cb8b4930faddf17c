"""Static setup hints shown by ``integrations info``."""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from integration_catalog.query.results import SetupHint
from integration_catalog.registry.models import IntegrationStatus

SETUP_HINTS: Mapping[str, SetupHint] = MappingProxyType({
    "Telegram": SetupHint(
        "Setup:",
        (
            "1. Message @BotFather on Telegram",
            "2. Create a bot and copy the token",
            "3. Run: zeroclaw onboard --channels-only",
            "4. Start: zeroclaw channel start",
        ),
    ),
    "Discord": SetupHint(
        "Setup:",
        (
            "1. Go to https://discord.com/developers/applications",
            "2. Create app → Bot → Copy token",
            "3. Enable MESSAGE CONTENT intent",
            "4. Run: zeroclaw onboard --channels-only",
        ),
    ),
    "Slack": SetupHint(
        "Setup:",
        (
            "1. Go to https://api.slack.com/apps",
            "2. Create app → Bot Token Scopes → Install",
            "3. Run: zeroclaw onboard --channels-only",
        ),
    ),
    "OpenRouter": SetupHint(
        "Setup:",
        (
            "1. Get API key at https://openrouter.ai/keys",
            "2. Run: zeroclaw onboard",
            "Access 200+ models with one key.",
        ),
    ),
    "Ollama": SetupHint(
        "Setup:",
        (
            "1. Install: brew install ollama",
            "2. Pull a model: ollama pull llama3",
            "3. Set provider to 'ollama' in config.toml",
        ),
    ),
    "iMessage": SetupHint(
        "Setup (macOS only):",
        (
            "Uses AppleScript bridge to send/receive iMessages.",
            "Requires Full Disk Access in System Settings → Privacy.",
        ),
    ),
    "GitHub": SetupHint(
        "Setup:",
        (
            "1. Create a personal access token at https://github.com/settings/tokens",
            '2. Add to config: [integrations.github] token = "ghp_..."',
        ),
    ),
    "Browser": SetupHint(
        "Built-in:",
        (
            "ZeroClaw can control Chrome/Chromium for web tasks.",
            "Uses headless browser automation.",
        ),
    ),
    "Cron": SetupHint(
        "Built-in:",
        (
            "Schedule tasks in ~/.zeroclaw/workspace/cron/",
            "Run: zeroclaw cron list",
        ),
    ),
    "Webhooks": SetupHint(
        "Built-in:",
        (
            "HTTP endpoint for external triggers.",
            "Run: zeroclaw gateway",
        ),
    ),
})

PLANNED_HINT = SetupHint(
    "",
    (
        "This integration is planned. Stay tuned!",
        "Track progress: https://github.com/theonlyhennygod/zeroclaw",
    ),
)


def setup_hint_for(name: str, status: IntegrationStatus) -> SetupHint | None:
    """Return the hint for the entry named *name* (exact catalog spelling).

    Entries without a specific hint get :data:`PLANNED_HINT` when they
    are coming soon and no hint otherwise.
    """
    hint = SETUP_HINTS.get(name)
    if hint is not None:
        return hint
    if status is IntegrationStatus.COMING_SOON:
        return PLANNED_HINT
    return None
