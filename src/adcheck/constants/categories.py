"""Bundled product-category risk multipliers."""

from __future__ import annotations

NEUTRAL_CATEGORY_RISK: float = 1.0

CATEGORY_RISK_WEIGHTS: dict[str, float] = {
    "weight loss": 1.5,
    "otc drugs": 1.4,
    "food/dietary supplements": 1.3,
    "alcohol": 1.3,
    "milk code products": 1.4,
    "cosmetics": 1.1,
    "consumer electronics": 1.0,
    "airline promo fares": 1.0,
}
