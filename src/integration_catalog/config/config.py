"""Configuration snapshot consumed by integration status evaluators.

Every dataclass here is frozen: a ``Config`` is handed to the query
layer by read-only reference and status evaluators never modify it.
Use :func:`dataclasses.replace` to derive an updated snapshot.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Channel sections
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TelegramConfig:
    """Telegram Bot API credentials."""

    bot_token: str
    allowed_users: tuple[str, ...] = ()


@dataclass(frozen=True)
class DiscordConfig:
    """Discord bot credentials."""

    bot_token: str
    guild_id: str | None = None


@dataclass(frozen=True)
class SlackConfig:
    """Slack app credentials."""

    bot_token: str
    channel_id: str | None = None


@dataclass(frozen=True)
class WebhookConfig:
    """Inbound HTTP webhook endpoint."""

    port: int = 8080
    secret: str | None = None


@dataclass(frozen=True)
class IMessageConfig:
    """macOS iMessage bridge."""

    allowed_contacts: tuple[str, ...] = ()


@dataclass(frozen=True)
class MatrixConfig:
    """Matrix homeserver credentials."""

    homeserver: str
    access_token: str
    room_id: str | None = None


@dataclass(frozen=True)
class ChannelsConfig:
    """Optional per-channel sections; ``None`` means the channel is not configured."""

    telegram: TelegramConfig | None = None
    discord: DiscordConfig | None = None
    slack: SlackConfig | None = None
    webhook: WebhookConfig | None = None
    imessage: IMessageConfig | None = None
    matrix: MatrixConfig | None = None


@dataclass(frozen=True)
class BrowserConfig:
    """Headless browser automation toggle."""

    enabled: bool = False


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Config:
    """Root configuration snapshot.

    Parameters
    ----------
    api_key:
        API key for the default provider, if any.
    default_provider:
        Key of the model provider in use, e.g. ``"openrouter"`` or
        ``"anthropic"``.
    channels:
        Chat channel sections.
    browser:
        Browser automation settings.
    platform:
        Host platform identifier in :data:`sys.platform` form.  Part of
        the snapshot so platform entries evaluate from configuration alone.
    """

    api_key: str | None = None
    default_provider: str | None = "openrouter"
    channels: ChannelsConfig = field(default_factory=ChannelsConfig)
    browser: BrowserConfig = field(default_factory=BrowserConfig)
    platform: str = sys.platform
