"""Human-readable stdout reporter for compliance reports."""

from __future__ import annotations

from adcheck.constants.branding import ASCII_LOGO_LINES, REPORT_TITLE
from adcheck.constants.reporting import (
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    SEVERITY_COLORS,
    STATUS_COLORS,
)
from adcheck.constants.scoring import SEVERITY_RANK
from adcheck.model import ComplianceReport, Violation


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_score(score: int, threshold: int) -> str:
    if score >= threshold:
        return _colorize(str(score), ANSI_GREEN)
    if score > 0:
        return _colorize(str(score), ANSI_YELLOW)
    return _colorize(str(score), ANSI_RED)


def sorted_violations(violations: tuple[Violation, ...]) -> list[Violation]:
    """Most severe first, then by id."""
    return sorted(violations, key=lambda v: (-SEVERITY_RANK.get(v.severity, 0), v.id))


class StdoutReporter:
    """Formats a compliance report as terminal output."""

    def __init__(self, report: ComplianceReport, *, color: bool = True) -> None:
        self._report = report
        self._color = color

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        return "\n".join((self._render_header(), self._render_violations()))

    def _render_header(self) -> str:
        r = self._report
        meta = r.scoring
        sep = "  " + "─" * 38

        score_str = _color_score(r.compliance_score, meta.pass_threshold) if self._color else str(r.compliance_score)
        status_str = r.status.upper()
        if self._color:
            status_str = _colorize(status_str, STATUS_COLORS[r.status])

        return "\n".join(
            [
                "",
                f"  {ASCII_LOGO_LINES[0]}",
                f"  {ASCII_LOGO_LINES[1]}",
                f"  {REPORT_TITLE}",
                sep,
                "",
                f"  Score       {score_str} / 100 ({status_str})",
                f"  Threshold   {meta.pass_threshold}",
                f"  Platform    {meta.platform} (strictness {meta.platform_strictness:g})",
                f"  Category    {r.product_category or '-'} (risk {meta.category_risk:g})",
                f"  Penalty     {meta.weighted_penalties}",
                f"  Violations  {len(r.violations)}",
                "",
            ]
        )

    def _render_violations(self) -> str:
        if not self._report.violations:
            return "  No violations detected."

        lines: list[str] = []
        for violation in sorted_violations(self._report.violations):
            severity = violation.severity.upper()
            if self._color:
                severity = _colorize(severity, SEVERITY_COLORS.get(violation.severity, ""))
            lines.append(f"  [{severity}] {violation.id}  {violation.category} ({violation.confidence:.0%})")
            if violation.offending_text:
                lines.append(f"      \"{violation.offending_text}\"")
            lines.append(f"      {violation.explanation}")
            fix = f"Fix: {violation.suggested_fix}"
            lines.append(f"      {_colorize(fix, ANSI_DIM) if self._color else fix}")
        return "\n".join(lines)
