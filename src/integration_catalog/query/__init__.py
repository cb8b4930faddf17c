"""Query engine package.

Exports ``QueryEngine``, the module-level convenience functions, the
result types and ``ResultSerializer``.
"""
from __future__ import annotations

from integration_catalog.query.engine import (
    QueryEngine,
    integration_info,
    list_integrations,
    search_integrations,
)
from integration_catalog.query.hints import PLANNED_HINT, SETUP_HINTS, setup_hint_for
from integration_catalog.query.results import (
    CategoryGroup,
    IntegrationDetail,
    IntegrationView,
    ListResult,
    SearchResult,
    SetupHint,
)
from integration_catalog.query.serializer import ResultSerializer

__all__ = [
    "QueryEngine",
    "list_integrations",
    "search_integrations",
    "integration_info",
    "CategoryGroup",
    "IntegrationDetail",
    "IntegrationView",
    "ListResult",
    "SearchResult",
    "SetupHint",
    "SETUP_HINTS",
    "PLANNED_HINT",
    "setup_hint_for",
    "ResultSerializer",
]
