"""Serialization of query results to plain dicts, JSON and YAML.

Categories and statuses serialize as their canonical filter tokens
(``"smart-home"``, ``"coming-soon"``), so serialized output can be fed
straight back into ``--category`` / ``--status``.

Usage
-----
::

    from integration_catalog.query import QueryEngine, ResultSerializer

    result = QueryEngine(config).list(category="chat")
    print(ResultSerializer().to_json(result, indent=2))
"""
from __future__ import annotations

import json

import yaml

from integration_catalog.query.results import (
    CategoryGroup,
    IntegrationDetail,
    IntegrationView,
    ListResult,
    SearchResult,
    SetupHint,
)
from integration_catalog.registry.models import IntegrationCategory

QueryResult = ListResult | SearchResult | IntegrationDetail


class ResultSerializer:
    """Converts query results into JSON-compatible structures."""

    # ------------------------------------------------------------------
    # Serialization (result → dict)
    # ------------------------------------------------------------------

    def to_dict(self, result: QueryResult) -> dict[str, object]:
        """Serialize any query result to a JSON-compatible dict.

        Raises
        ------
        TypeError
            If *result* is not a query result type.
        """
        if isinstance(result, ListResult):
            return {
                "kind": "list",
                "total": len(result),
                "groups": [self._group_to_dict(g) for g in result.groups],
            }
        if isinstance(result, SearchResult):
            return {
                "kind": "search",
                "query": result.query,
                "total": len(result),
                "matches": [self._view_to_dict(v, with_category=True) for v in result.matches],
            }
        if isinstance(result, IntegrationDetail):
            return {
                "kind": "info",
                "name": result.entry.name,
                "description": result.entry.description,
                "category": self._category_to_dict(result.entry.category),
                "status": result.status.token,
                "setup_hint": self._hint_to_dict(result.setup_hint),
            }
        raise TypeError(f"Cannot serialize {type(result).__name__!r}")

    def _category_to_dict(self, category: IntegrationCategory) -> dict[str, str]:
        return {"id": category.token, "label": category.label}

    def _view_to_dict(self, view: IntegrationView, with_category: bool = False) -> dict[str, object]:
        data: dict[str, object] = {
            "name": view.name,
            "description": view.description,
            "status": view.status.token,
        }
        if with_category:
            data["category"] = self._category_to_dict(view.category)
        return data

    def _group_to_dict(self, group: CategoryGroup) -> dict[str, object]:
        return {
            "category": self._category_to_dict(group.category),
            "integrations": [self._view_to_dict(v) for v in group.integrations],
        }

    def _hint_to_dict(self, hint: SetupHint | None) -> dict[str, object] | None:
        if hint is None:
            return None
        return {"heading": hint.heading, "lines": list(hint.lines)}

    # ------------------------------------------------------------------
    # Text formats
    # ------------------------------------------------------------------

    def to_json(self, result: QueryResult, indent: int | None = 2) -> str:
        """Serialize *result* to a JSON string (non-ASCII kept verbatim)."""
        return json.dumps(self.to_dict(result), indent=indent, ensure_ascii=False)

    def to_yaml(self, result: QueryResult) -> str:
        """Serialize *result* to a YAML string, preserving key order."""
        return yaml.safe_dump(
            self.to_dict(result), sort_keys=False, allow_unicode=True
        )
