"""Query engine: list, search and info over the integration catalog.

All three operations are read-only.  Filters are normalized before the
catalog is touched, so an invalid filter fails the whole query and an
empty result is always a successful outcome.

Usage
-----
::

    from integration_catalog.config import Config
    from integration_catalog.query import QueryEngine

    engine = QueryEngine(Config())
    for group in engine.list(category="ai"):
        print(group.category.label, [view.name for view in group.integrations])

    matches = engine.search("tele")
    detail = engine.info("telegram")
"""
from __future__ import annotations

from integration_catalog.config import Config
from integration_catalog.errors import UnknownIntegrationError
from integration_catalog.filters.normalizer import parse_category_filter, parse_status_filter
from integration_catalog.query.hints import setup_hint_for
from integration_catalog.query.results import (
    CategoryGroup,
    IntegrationDetail,
    IntegrationView,
    ListResult,
    SearchResult,
)
from integration_catalog.registry.catalog import Catalog, default_catalog
from integration_catalog.registry.models import IntegrationCategory, IntegrationStatus


class QueryEngine:
    """Runs catalog queries against one configuration snapshot.

    Parameters
    ----------
    config:
        Configuration snapshot used to evaluate entry statuses.
    catalog:
        The catalog to query.  Defaults to the built-in catalog.
    """

    def __init__(self, config: Config, catalog: Catalog | None = None) -> None:
        self._config = config
        self._catalog = catalog if catalog is not None else default_catalog()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_filters(
        category: str | None, status: str | None
    ) -> tuple[IntegrationCategory | None, IntegrationStatus | None]:
        category_match = parse_category_filter(category) if category is not None else None
        status_match = parse_status_filter(status) if status is not None else None
        return category_match, status_match

    def _filtered(
        self,
        category_match: IntegrationCategory | None,
        status_match: IntegrationStatus | None,
        query: str | None = None,
    ) -> list[IntegrationView]:
        query_lower = query.lower() if query is not None else None
        views: list[IntegrationView] = []
        for entry in self._catalog:
            if query_lower is not None and not (
                query_lower in entry.name.lower()
                or query_lower in entry.description.lower()
            ):
                continue
            if category_match is not None and entry.category is not category_match:
                continue
            status = entry.status(self._config)
            if status_match is not None and status is not status_match:
                continue
            views.append(IntegrationView(entry=entry, status=status))
        return views

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list(self, category: str | None = None, status: str | None = None) -> ListResult:
        """List integrations grouped by category.

        Parameters
        ----------
        category:
            Optional category filter, any accepted alias.
        status:
            Optional status filter, any accepted alias.

        Returns
        -------
        ListResult
            Groups in category declaration order; entries within a group
            in catalog order.  Empty when nothing matches.

        Raises
        ------
        InvalidFilterError
            If either filter is not a recognized alias.
        """
        category_match, status_match = self._parse_filters(category, status)
        views = self._filtered(category_match, status_match)

        groups = []
        for cat in IntegrationCategory.all():
            members = tuple(view for view in views if view.category is cat)
            if members:
                groups.append(CategoryGroup(category=cat, integrations=members))
        return ListResult(groups=tuple(groups))

    def search(
        self, query: str, category: str | None = None, status: str | None = None
    ) -> SearchResult:
        """Find integrations whose name or description contains *query*.

        Matching is a case-insensitive substring test, so an empty query
        matches every entry.  Results are sorted by name (ordinal string
        order), unlike :meth:`list`, which keeps catalog order.

        Raises
        ------
        InvalidFilterError
            If either filter is not a recognized alias.
        """
        category_match, status_match = self._parse_filters(category, status)
        views = self._filtered(category_match, status_match, query=query)
        views.sort(key=lambda view: view.name)
        return SearchResult(query=query, matches=tuple(views))

    def info(self, name: str) -> IntegrationDetail:
        """Return details for the integration named *name* (case-insensitive, exact).

        Raises
        ------
        UnknownIntegrationError
            If no entry has that name.
        """
        entry = self._catalog.find(name)
        if entry is None:
            raise UnknownIntegrationError(name)
        status = entry.status(self._config)
        return IntegrationDetail(
            entry=entry, status=status, setup_hint=setup_hint_for(entry.name, status)
        )


def list_integrations(
    config: Config,
    category: str | None = None,
    status: str | None = None,
    catalog: Catalog | None = None,
) -> ListResult:
    """Convenience function: :meth:`QueryEngine.list` on a fresh engine."""
    return QueryEngine(config, catalog).list(category=category, status=status)


def search_integrations(
    config: Config,
    query: str,
    category: str | None = None,
    status: str | None = None,
    catalog: Catalog | None = None,
) -> SearchResult:
    """Convenience function: :meth:`QueryEngine.search` on a fresh engine."""
    return QueryEngine(config, catalog).search(query, category=category, status=status)


def integration_info(
    config: Config, name: str, catalog: Catalog | None = None
) -> IntegrationDetail:
    """Convenience function: :meth:`QueryEngine.info` on a fresh engine."""
    return QueryEngine(config, catalog).info(name)
