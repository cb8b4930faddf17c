"""Map free-form filter strings to canonical categories and statuses.

Input is lowercased and stripped of ``-`` and ``_`` before an exact
lookup in a fixed alias table, so ``"Smart-Home"``, ``"smart_home"``
and ``"SMARTHOME"`` all resolve to ``IntegrationCategory.SMART_HOME``.
There is no partial or fuzzy matching.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from integration_catalog.errors import InvalidFilterError
from integration_catalog.registry.models import IntegrationCategory, IntegrationStatus


def _alias_table(groups: dict[object, tuple[str, ...]]) -> Mapping[str, object]:
    table = {alias: value for value, aliases in groups.items() for alias in aliases}
    return MappingProxyType(table)


CATEGORY_ALIASES: Mapping[str, IntegrationCategory] = _alias_table(  # type: ignore[assignment]
    {
        IntegrationCategory.CHAT: ("chat", "chatproviders", "messaging"),
        IntegrationCategory.AI_MODEL: ("ai", "aimodels", "aimodel", "models", "llm", "llms"),
        IntegrationCategory.PRODUCTIVITY: ("productivity", "prod"),
        IntegrationCategory.MUSIC_AUDIO: ("music", "musicaudio", "audio"),
        IntegrationCategory.SMART_HOME: ("smarthome", "home", "iot"),
        IntegrationCategory.TOOLS_AUTOMATION: ("tools", "toolsautomation", "automation"),
        IntegrationCategory.MEDIA_CREATIVE: ("media", "mediacreative", "creative"),
        IntegrationCategory.SOCIAL: ("social",),
        IntegrationCategory.PLATFORM: ("platforms", "platform"),
    }
)

STATUS_ALIASES: Mapping[str, IntegrationStatus] = _alias_table(  # type: ignore[assignment]
    {
        IntegrationStatus.ACTIVE: ("active", "enabled", "on"),
        IntegrationStatus.AVAILABLE: ("available", "ready", "off"),
        IntegrationStatus.COMING_SOON: ("comingsoon", "soon", "planned", "todo"),
    }
)

VALID_CATEGORY_OPTIONS: tuple[str, ...] = tuple(c.token for c in IntegrationCategory.all())
VALID_STATUS_OPTIONS: tuple[str, ...] = ("active", "available", "coming-soon")


def normalize_token(value: str) -> str:
    """Lowercase *value* and drop every hyphen and underscore."""
    return value.lower().replace("-", "").replace("_", "")


def parse_category_filter(value: str) -> IntegrationCategory:
    """Resolve a category filter string.

    Parameters
    ----------
    value:
        User-supplied category, e.g. ``"ai"`` or ``"Smart-Home"``.

    Returns
    -------
    IntegrationCategory
        The canonical category.

    Raises
    ------
    InvalidFilterError
        If the normalized input is not a known alias.  The error keeps
        *value* as given and lists the nine canonical category tokens.
    """
    try:
        return CATEGORY_ALIASES[normalize_token(value)]
    except KeyError:
        raise InvalidFilterError("category", value, VALID_CATEGORY_OPTIONS) from None


def parse_status_filter(value: str) -> IntegrationStatus:
    """Resolve a status filter string such as ``"enabled"`` or ``"coming-soon"``.

    Raises
    ------
    InvalidFilterError
        If the normalized input is not a known alias.
    """
    try:
        return STATUS_ALIASES[normalize_token(value)]
    except KeyError:
        raise InvalidFilterError("status", value, VALID_STATUS_OPTIONS) from None
