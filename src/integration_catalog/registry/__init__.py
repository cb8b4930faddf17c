"""Integration registry package.

Exports the catalog types and the memoized built-in catalog.
"""
from __future__ import annotations

from integration_catalog.registry.catalog import Catalog, all_integrations, default_catalog
from integration_catalog.registry.models import (
    IntegrationCategory,
    IntegrationEntry,
    IntegrationStatus,
    StatusFn,
)

__all__ = [
    "Catalog",
    "IntegrationCategory",
    "IntegrationEntry",
    "IntegrationStatus",
    "StatusFn",
    "all_integrations",
    "default_catalog",
]
