"""Immutable weighting tables injected into the scoring engine."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar

from adcheck.constants.categories import NEUTRAL_CATEGORY_RISK
from adcheck.constants.scoring import NEUTRAL_MULTIPLIER


V = TypeVar("V")


def _frozen_mapping(values: Mapping[str, V] | None = None) -> Mapping[str, V]:
    return MappingProxyType(dict(values or {}))


def _weight(value: object, name: str) -> float:
    """Return ``value`` as a float, rejecting anything but a finite non-negative number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 <= value <= sys.float_info.max:
        raise ValueError(f"{name} must be a finite non-negative number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class PlatformProfile:
    """Per-platform penalty weighting."""

    display_name: str
    strictness: float = 1.0
    severity_multipliers: Mapping[str, float] = field(default_factory=_frozen_mapping)
    prohibited_categories: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "strictness", _weight(self.strictness, "strictness"))
        object.__setattr__(
            self,
            "severity_multipliers",
            _frozen_mapping(
                {
                    severity: _weight(value, f"severity multiplier {severity!r}")
                    for severity, value in self.severity_multipliers.items()
                }
            ),
        )
        object.__setattr__(
            self,
            "prohibited_categories",
            tuple(category.strip().lower() for category in self.prohibited_categories if category.strip()),
        )

    def severity_multiplier(self, severity: str) -> float:
        """Return the multiplier for ``severity``, neutral when the key is absent."""
        return self.severity_multipliers.get(severity, NEUTRAL_MULTIPLIER)


@dataclass(frozen=True)
class PolicyTables:
    """Platform profiles and category risk weights, keyed by lower-cased name."""

    default_profile: PlatformProfile
    platforms: Mapping[str, PlatformProfile] = field(default_factory=_frozen_mapping)
    category_risk: Mapping[str, float] = field(default_factory=_frozen_mapping)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "platforms",
            _frozen_mapping({name.strip().lower(): profile for name, profile in self.platforms.items()}),
        )
        object.__setattr__(
            self,
            "category_risk",
            _frozen_mapping(
                {
                    name.strip().lower(): _weight(risk, f"category risk {name!r}")
                    for name, risk in self.category_risk.items()
                }
            ),
        )

    def platform(self, key: str) -> PlatformProfile:
        """Return the profile for a normalized key, or the default profile."""
        return self.platforms.get(key, self.default_profile)

    def risk(self, key: str) -> float:
        """Return the risk multiplier for a normalized key, or neutral risk."""
        return self.category_risk.get(key, NEUTRAL_CATEGORY_RISK)
