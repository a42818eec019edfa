"""menu.errors — Exceptions raised by the button framework.

Only contract violations are exceptions.  A guard refusing a toggle and
a scheduler refusing a task are normal outcomes and never raise.
"""

from __future__ import annotations


class MenuError(Exception):
    """Base class for menu framework errors."""


class ConstructionError(MenuError, ValueError):
    """A required collaborator was missing or invalid at construction."""
