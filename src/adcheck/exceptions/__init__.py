"""Shared exception hierarchy for adcheck."""

from __future__ import annotations

from .base import AdcheckError
from .config import ConfigError
from .input import ViolationInputError
from .policy_db import PolicyDatabaseError

__all__ = [
    "AdcheckError",
    "ConfigError",
    "PolicyDatabaseError",
    "ViolationInputError",
]
