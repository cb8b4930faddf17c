"""Error types for integration-catalog.

Query operations raise these to their immediate caller; the CLI is the
only layer that turns them into user-facing messages and exit codes.
An empty result set is never an error.
"""
from __future__ import annotations


class IntegrationCatalogError(Exception):
    """Base class for all errors raised by integration-catalog."""


class InvalidFilterError(IntegrationCatalogError, ValueError):
    """Raised when a category or status filter string matches no alias.

    Parameters
    ----------
    kind:
        Which filter failed, ``"category"`` or ``"status"``.
    input:
        The filter string exactly as the user supplied it.
    valid_options:
        Canonical option tokens to show the user.
    """

    def __init__(self, kind: str, input: str, valid_options: tuple[str, ...]) -> None:  # noqa: A002
        self.kind = kind
        self.input = input
        self.valid_options = valid_options
        super().__init__(
            f"Unknown {kind}: '{input}'. Valid options: {', '.join(valid_options)}"
        )


class UnknownIntegrationError(IntegrationCatalogError, LookupError):
    """Raised by an info lookup when no entry name matches case-insensitively."""

    def __init__(self, input: str) -> None:  # noqa: A002
        self.input = input
        super().__init__(
            f"Unknown integration: {input}. Check README for supported integrations "
            "or run `zeroclaw onboard --interactive` to configure channels/providers."
        )


class ConfigError(IntegrationCatalogError, ValueError):
    """Raised when a configuration file cannot be read or has an invalid shape."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        prefix = f"{path}: " if path else ""
        super().__init__(f"{prefix}{message}")
