"""Shared type aliases for adcheck."""

from .common import JsonObject, JsonScalar, JsonValue, Severity, Status
from .policy import PlatformProfile, PolicyTables

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "PlatformProfile",
    "PolicyTables",
    "Severity",
    "Status",
]
