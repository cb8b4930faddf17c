"""integration-catalog — list, search and inspect the integrations zeroclaw supports.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import integration_catalog
    from integration_catalog.config import Config

    config = Config()

    # Every entry, grouped by category
    listing = integration_catalog.list_integrations(config)

    # Only AI model backends that are currently active
    active_models = integration_catalog.list_integrations(
        config, category="llm", status="enabled"
    )

    # Case-insensitive substring search, sorted by name
    matches = integration_catalog.search(config, "tele")

    # Detail and setup hint for one entry
    detail = integration_catalog.info(config, "telegram")

    integration_catalog.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from integration_catalog.config import Config
    from integration_catalog.query.results import IntegrationDetail, ListResult, SearchResult
    from integration_catalog.registry.models import IntegrationEntry


def all_integrations() -> tuple["IntegrationEntry", ...]:
    """Return every built-in integration in declaration order.

    Repeated calls return the same tuple.
    """
    from integration_catalog.registry.catalog import all_integrations as _all

    return _all()


def list_integrations(
    config: "Config", category: str | None = None, status: str | None = None
) -> "ListResult":
    """List integrations grouped by category.

    Parameters
    ----------
    config:
        Configuration snapshot used to evaluate statuses.
    category:
        Optional category filter, e.g. ``"ai"`` or ``"smart-home"``.
    status:
        Optional status filter, e.g. ``"active"`` or ``"coming-soon"``.

    Returns
    -------
    ListResult
        Groups in category order; possibly empty.

    Raises
    ------
    integration_catalog.errors.InvalidFilterError
        If a filter string is not a recognized alias.
    """
    from integration_catalog.query.engine import list_integrations as _list

    return _list(config, category=category, status=status)


def search(
    config: "Config",
    query: str,
    category: str | None = None,
    status: str | None = None,
) -> "SearchResult":
    """Search names and descriptions for *query* (case-insensitive substring).

    Raises
    ------
    integration_catalog.errors.InvalidFilterError
        If a filter string is not a recognized alias.
    """
    from integration_catalog.query.engine import search_integrations

    return search_integrations(config, query, category=category, status=status)


def info(config: "Config", name: str) -> "IntegrationDetail":
    """Look up one integration by name, ignoring case.

    Raises
    ------
    integration_catalog.errors.UnknownIntegrationError
        If no integration has that name.
    """
    from integration_catalog.query.engine import integration_info

    return integration_info(config, name)


__all__ = [
    "__version__",
    "all_integrations",
    "list_integrations",
    "search",
    "info",
]
