"""Configuration-related exceptions."""

from __future__ import annotations

from adcheck.exceptions.base import AdcheckError


class ConfigError(AdcheckError, ValueError):
    """Raised when scoring configuration is invalid."""
