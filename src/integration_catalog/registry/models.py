"""Core types for the integration catalog.

``IntegrationCategory`` and ``IntegrationStatus`` are closed enums.
``IntegrationEntry`` is a frozen dataclass whose ``status_fn`` is a
plain function of a :class:`~integration_catalog.config.Config`, so an
entry's status is always recomputed from the snapshot it is given.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from integration_catalog.config import Config


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------


class IntegrationStatus(Enum):
    """Activation status of an integration under a given configuration.

    AVAILABLE
        Implemented but not configured.
    ACTIVE
        Configured and enabled.
    COMING_SOON
        Not yet implemented, whatever the configuration says.
    """

    AVAILABLE = auto()
    ACTIVE = auto()
    COMING_SOON = auto()

    @property
    def label(self) -> str:
        """Human-readable status name."""
        return _STATUS_LABELS[self]

    @property
    def icon(self) -> str:
        """Single-glyph marker used in listings."""
        return _STATUS_ICONS[self]

    @property
    def token(self) -> str:
        """Stable lowercase identifier used in filters and serialized output."""
        return _STATUS_TOKENS[self]


_STATUS_LABELS: dict[IntegrationStatus, str] = {
    IntegrationStatus.AVAILABLE: "Available",
    IntegrationStatus.ACTIVE: "Active",
    IntegrationStatus.COMING_SOON: "Coming Soon",
}

_STATUS_ICONS: dict[IntegrationStatus, str] = {
    IntegrationStatus.AVAILABLE: "⚪",
    IntegrationStatus.ACTIVE: "✅",
    IntegrationStatus.COMING_SOON: "🔜",
}

_STATUS_TOKENS: dict[IntegrationStatus, str] = {
    IntegrationStatus.AVAILABLE: "available",
    IntegrationStatus.ACTIVE: "active",
    IntegrationStatus.COMING_SOON: "coming-soon",
}


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------


class IntegrationCategory(Enum):
    """Fixed set of integration categories.

    Declaration order is the display order for grouped listings.
    """

    CHAT = auto()
    AI_MODEL = auto()
    PRODUCTIVITY = auto()
    MUSIC_AUDIO = auto()
    SMART_HOME = auto()
    TOOLS_AUTOMATION = auto()
    MEDIA_CREATIVE = auto()
    SOCIAL = auto()
    PLATFORM = auto()

    @property
    def label(self) -> str:
        """Section heading for this category."""
        return _CATEGORY_LABELS[self]

    @property
    def token(self) -> str:
        """Canonical filter token, e.g. ``"smart-home"``."""
        return _CATEGORY_TOKENS[self]

    @classmethod
    def all(cls) -> tuple["IntegrationCategory", ...]:
        """Return every category in declaration order."""
        return tuple(cls)


_CATEGORY_LABELS: dict[IntegrationCategory, str] = {
    IntegrationCategory.CHAT: "Chat Providers",
    IntegrationCategory.AI_MODEL: "AI Models",
    IntegrationCategory.PRODUCTIVITY: "Productivity",
    IntegrationCategory.MUSIC_AUDIO: "Music & Audio",
    IntegrationCategory.SMART_HOME: "Smart Home",
    IntegrationCategory.TOOLS_AUTOMATION: "Tools & Automation",
    IntegrationCategory.MEDIA_CREATIVE: "Media & Creative",
    IntegrationCategory.SOCIAL: "Social",
    IntegrationCategory.PLATFORM: "Platforms",
}

_CATEGORY_TOKENS: dict[IntegrationCategory, str] = {
    IntegrationCategory.CHAT: "chat",
    IntegrationCategory.AI_MODEL: "ai",
    IntegrationCategory.PRODUCTIVITY: "productivity",
    IntegrationCategory.MUSIC_AUDIO: "music",
    IntegrationCategory.SMART_HOME: "smart-home",
    IntegrationCategory.TOOLS_AUTOMATION: "tools",
    IntegrationCategory.MEDIA_CREATIVE: "media",
    IntegrationCategory.SOCIAL: "social",
    IntegrationCategory.PLATFORM: "platforms",
}


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------

StatusFn = Callable[[Config], IntegrationStatus]


@dataclass(frozen=True)
class IntegrationEntry:
    """A single catalog entry.

    Parameters
    ----------
    name:
        Display name, unique across the catalog ignoring case.
    description:
        One-line summary.
    category:
        The category this entry is listed under.
    status_fn:
        Pure function computing the entry's status from a ``Config``.
    """

    name: str
    description: str
    category: IntegrationCategory
    status_fn: StatusFn

    def status(self, config: Config) -> IntegrationStatus:
        """Evaluate this entry's status against *config*."""
        return self.status_fn(config)
