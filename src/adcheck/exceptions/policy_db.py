"""Policy database exceptions."""

from __future__ import annotations

from adcheck.exceptions.base import AdcheckError


class PolicyDatabaseError(AdcheckError, ValueError):
    """Raised when a policy database file cannot be loaded or has the wrong shape."""
