"""Catalog — the immutable, ordered set of known integrations.

Usage
-----
::

    from integration_catalog.registry import all_integrations, default_catalog

    entries = all_integrations()          # same tuple on every call
    telegram = default_catalog().find("TELEGRAM")
"""
from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Iterator

from integration_catalog.registry.models import IntegrationEntry

logger = logging.getLogger(__name__)


class Catalog:
    """Read-only, ordered collection of :class:`IntegrationEntry` objects.

    Parameters
    ----------
    entries:
        The entries in declaration order.

    Raises
    ------
    ValueError
        If *entries* is empty or two names collide case-insensitively.
        Info lookups must resolve to at most one entry, so a collision is
        rejected when the catalog is built rather than left to ordering.
    """

    def __init__(self, entries: Iterable[IntegrationEntry]) -> None:
        self._entries: tuple[IntegrationEntry, ...] = tuple(entries)
        if not self._entries:
            raise ValueError("A catalog must contain at least one integration.")

        by_name: dict[str, IntegrationEntry] = {}
        for entry in self._entries:
            key = entry.name.lower()
            if key in by_name:
                raise ValueError(
                    f"Integration {entry.name!r} collides with "
                    f"{by_name[key].name!r} under case-insensitive comparison."
                )
            by_name[key] = entry
        self._by_name = by_name

    @property
    def entries(self) -> tuple[IntegrationEntry, ...]:
        """All entries in declaration order."""
        return self._entries

    def find(self, name: str) -> IntegrationEntry | None:
        """Return the entry whose name equals *name* ignoring case, or ``None``."""
        return self._by_name.get(name.lower())

    def __iter__(self) -> Iterator[IntegrationEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        """Support ``"telegram" in catalog`` (case-insensitive)."""
        return isinstance(name, str) and name.lower() in self._by_name

    def __repr__(self) -> str:
        return f"Catalog(entries={len(self._entries)})"


@functools.lru_cache(maxsize=None)
def default_catalog() -> Catalog:
    """Return the process-wide catalog of built-in integrations.

    Built on first use and memoized for the lifetime of the process.
    """
    from integration_catalog.registry.builtin_integrations import BUILTIN_INTEGRATIONS

    catalog = Catalog(BUILTIN_INTEGRATIONS)
    logger.debug("Built integration catalog with %d entries", len(catalog))
    return catalog


def all_integrations() -> tuple[IntegrationEntry, ...]:
    """Return every built-in integration in declaration order.

    Repeated calls return the same tuple of the same entry objects.
    """
    return default_catalog().entries
