"""Human-readable stdout reporter for health evaluations."""

from __future__ import annotations

from healthgrade.constants.branding import ASCII_LOGO_LINES
from healthgrade.constants.reporting import ANSI_RESET, EVALUATION_TITLE, SEVERITY_COLORS
from healthgrade.model import HealthEvaluation, Severity, severity_rank


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats an evaluation as a table of checks followed by the overall status."""

    def __init__(
        self,
        evaluation: HealthEvaluation,
        *,
        color: bool = True,
        fail_on: Severity | None = None,
    ) -> None:
        self._evaluation = evaluation
        self._color = color
        self._fail_on = fail_on

    def render(self) -> str:
        lines = [*ASCII_LOGO_LINES, "", EVALUATION_TITLE, ""]
        lines.extend(self._render_checks())
        if self._evaluation.discarded:
            lines.append("")
            lines.append(f"Ignored entries: {', '.join(self._evaluation.discarded)}")
        lines.append("")
        lines.append(f"Overall: {self._severity(self._evaluation.overall)}")
        if self._fail_on is not None:
            verdict = "FAIL" if self._evaluation.overall >= self._fail_on else "PASS"
            lines.append(f"Threshold: {self._fail_on.value} -> {verdict}")
        return "\n".join(lines)

    def _render_checks(self) -> list[str]:
        checks = sorted(
            self._evaluation.checks,
            key=lambda check: (-severity_rank(check.effective), check.name),
        )
        if not checks:
            return ["No usable health checks."]

        w_name = max(len("Check"), *(len(check.name) for check in checks))
        w_sev = max(len(severity.value) for severity in Severity)
        header = f"{'Check':<{w_name}}  {'Healthy':<7}  {'Severity':<{w_sev}}  Effective"
        rows = [header, "-" * len(header)]
        for check in checks:
            reported = check.severity.value if check.severity is not None else "-"
            effective = self._severity(check.effective, width=w_sev)
            marker = "  (invalid combination)" if check.anomalous else ""
            rows.append(
                f"{check.name:<{w_name}}  {str(check.healthy).lower():<7}  {reported:<{w_sev}}  {effective}{marker}"
            )
        return rows

    def _severity(self, severity: Severity, width: int = 0) -> str:
        text = f"{severity.value:<{width}}" if width else severity.value
        color = SEVERITY_COLORS.get(severity.value, "")
        return _colorize(text, color) if self._color and color else text
