"""Input-file exceptions."""

from __future__ import annotations

from adcheck.exceptions.base import AdcheckError


class ViolationInputError(AdcheckError, ValueError):
    """Raised when a violations input file cannot be read as JSON records."""
