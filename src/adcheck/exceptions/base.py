"""Base exception for adcheck."""

from __future__ import annotations


class AdcheckError(Exception):
    """Base class for all adcheck errors."""
