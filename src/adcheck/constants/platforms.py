"""Bundled per-platform weighting profiles."""

from __future__ import annotations

DEFAULT_PLATFORM_KEY: str = "default"

# Raw profile definitions keyed by lower-cased platform name.
PLATFORM_PROFILES: dict[str, dict[str, object]] = {
    "meta": {
        "display_name": "Meta (Facebook/Instagram)",
        "strictness": 1.5,
        "severity_multipliers": {"critical": 1.8, "warning": 1.3, "info": 1.0},
        "prohibited_categories": (
            "before/after imagery",
            "nudity",
            "body shaming",
            "unrealistic outcomes",
        ),
    },
    "tiktok": {
        "display_name": "TikTok",
        "strictness": 1.4,
        "severity_multipliers": {"critical": 1.6, "warning": 1.3, "info": 1.0},
        "prohibited_categories": (
            "before/after imagery",
            "nudity",
            "sensitive content",
        ),
    },
    "google": {
        "display_name": "Google Ads",
        "strictness": 1.2,
        "severity_multipliers": {"critical": 1.4, "warning": 1.2, "info": 1.0},
        "prohibited_categories": ("misleading claims", "unverified medical claims"),
    },
    "youtube": {
        "display_name": "YouTube",
        "strictness": 1.1,
        "severity_multipliers": {"critical": 1.3, "warning": 1.1, "info": 1.0},
        "prohibited_categories": ("misleading health claims",),
    },
}

DEFAULT_PLATFORM_PROFILE: dict[str, object] = {
    "display_name": "General Platform",
    "strictness": 1.0,
    "severity_multipliers": {"critical": 1.0, "warning": 1.0, "info": 1.0},
    "prohibited_categories": (),
}
