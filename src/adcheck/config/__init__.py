"""Configuration loading, validation, and normalization for adcheck."""

from __future__ import annotations

from adcheck.config.loader import load_config
from adcheck.config.model import AdcheckConfig
from adcheck.config.validator import validate_config_file

__all__ = [
    "AdcheckConfig",
    "load_config",
    "validate_config_file",
]
