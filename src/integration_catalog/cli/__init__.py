"""CLI package.

The ``cli`` sub-package contains the Click application and the text
rendering of query results. It is the only layer that prints or maps
errors to exit codes.
"""
from __future__ import annotations
