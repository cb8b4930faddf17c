"""Filter normalization for category and status arguments."""
from __future__ import annotations

from integration_catalog.filters.normalizer import (
    CATEGORY_ALIASES,
    STATUS_ALIASES,
    VALID_CATEGORY_OPTIONS,
    VALID_STATUS_OPTIONS,
    normalize_token,
    parse_category_filter,
    parse_status_filter,
)

__all__ = [
    "CATEGORY_ALIASES",
    "STATUS_ALIASES",
    "VALID_CATEGORY_OPTIONS",
    "VALID_STATUS_OPTIONS",
    "normalize_token",
    "parse_category_filter",
    "parse_status_filter",
]
