"""Config data model for adcheck scoring."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from adcheck.constants.platforms import DEFAULT_PLATFORM_KEY
from adcheck.engine.policy import DEFAULT_POLICY_TABLES
from adcheck.types import PlatformProfile, PolicyTables


@dataclass(frozen=True)
class AdcheckConfig:
    """Resolved scoring config.

    ``platforms`` and ``category_risk`` hold only the entries from the config
    file; ``policy_tables`` layers them over the bundled tables.
    """

    platforms: Mapping[str, PlatformProfile] = field(default_factory=lambda: MappingProxyType({}))
    category_risk: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    ignore_default_tables: bool = False
    policy_db: Path | None = None

    @property
    def policy_tables(self) -> PolicyTables:
        """Immutable tables to inject into the scoring engine."""
        base_platforms: dict[str, PlatformProfile] = {}
        base_risk: dict[str, float] = {}
        if not self.ignore_default_tables:
            base_platforms.update(DEFAULT_POLICY_TABLES.platforms)
            base_risk.update(DEFAULT_POLICY_TABLES.category_risk)

        overrides = dict(self.platforms)
        default_profile = overrides.pop(DEFAULT_PLATFORM_KEY, DEFAULT_POLICY_TABLES.default_profile)
        return PolicyTables(
            default_profile=default_profile,
            platforms={**base_platforms, **overrides},
            category_risk={**base_risk, **self.category_risk},
        )
