"""Result types returned by the query engine.

All result objects are frozen dataclasses holding entries together
with the status evaluated for the configuration the query ran against.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from integration_catalog.registry.models import (
    IntegrationCategory,
    IntegrationEntry,
    IntegrationStatus,
)


@dataclass(frozen=True)
class IntegrationView:
    """An entry paired with its evaluated status."""

    entry: IntegrationEntry
    status: IntegrationStatus

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def description(self) -> str:
        return self.entry.description

    @property
    def category(self) -> IntegrationCategory:
        return self.entry.category


@dataclass(frozen=True)
class CategoryGroup:
    """Entries of one category, in catalog declaration order."""

    category: IntegrationCategory
    integrations: tuple[IntegrationView, ...]


@dataclass(frozen=True)
class ListResult:
    """Grouped listing, groups in category declaration order.

    Categories with no surviving entries are omitted.
    """

    groups: tuple[CategoryGroup, ...]

    @property
    def is_empty(self) -> bool:
        return not self.groups

    def __len__(self) -> int:
        """Total number of entries across all groups."""
        return sum(len(group.integrations) for group in self.groups)

    def __iter__(self) -> Iterator[CategoryGroup]:
        return iter(self.groups)


@dataclass(frozen=True)
class SearchResult:
    """Search matches sorted by name."""

    query: str
    matches: tuple[IntegrationView, ...]

    @property
    def is_empty(self) -> bool:
        return not self.matches

    def __len__(self) -> int:
        return len(self.matches)

    def __iter__(self) -> Iterator[IntegrationView]:
        return iter(self.matches)


@dataclass(frozen=True)
class SetupHint:
    """Instructional text shown by ``info``.

    Parameters
    ----------
    heading:
        Short heading, e.g. ``"Setup:"`` or ``"Built-in:"``.  Empty for
        the generic hint.
    lines:
        Body lines in display order.
    """

    heading: str
    lines: tuple[str, ...]


@dataclass(frozen=True)
class IntegrationDetail:
    """Single-entry detail returned by ``info``."""

    entry: IntegrationEntry
    status: IntegrationStatus
    setup_hint: SetupHint | None
