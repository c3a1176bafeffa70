"""Advertising policy compliance scoring for regulated product categories."""

from __future__ import annotations

__version__ = "0.1.0"
