"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "ADCHECK"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ ADCHECK",
    "     // ad copy policy pre-flight",
)
REPORT_TITLE: str = "Compliance summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} compliance scorer"))
