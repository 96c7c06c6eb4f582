import re
from typing import List, Tuple

from pranalyzer.core.schema.analysis import AnalysisResult, AnalysisStatus

REPORT_HEADING = "## 🔍 PR Analysis Report"
REPORT_FOOTER = "*Generated by PR Analyzer Agent*"
ALL_PASSED_MESSAGE = "✅ All checks passed! Great PR!"

_STATUS_LINE = re.compile(r"^\*\*Status:\*\* (?P<status>[A-Z]+)$", re.MULTILINE)
_SCORE_LINE = re.compile(r"^\*\*Score:\*\* (?P<score>\d+)/100$", re.MULTILINE)


def format_comment(result: AnalysisResult) -> str:
    lines: List[str] = [
        REPORT_HEADING,
        "",
        f"**Status:** {result.status.value.upper()}",
        f"**Score:** {result.score}/100",
        "",
    ]

    if result.violations:
        lines.append("### ❌ Violations")
        lines.extend(f"- {violation}" for violation in result.violations)
        lines.append("")

    if result.suggestions:
        lines.append("### ⚠️ Suggestions")
        lines.extend(f"- {suggestion}" for suggestion in result.suggestions)
        lines.append("")

    if not result.violations and not result.suggestions:
        lines.append(ALL_PASSED_MESSAGE)

    lines.extend(["", "---", REPORT_FOOTER])
    return "\n".join(lines)


def parse_comment(body: str) -> Tuple[AnalysisStatus, int]:
    """Recover the status and score from a body produced by ``format_comment``."""
    status_match = _STATUS_LINE.search(body)
    score_match = _SCORE_LINE.search(body)
    if status_match is None or score_match is None:
        raise ValueError("Comment body is not a PR analysis report")
    status = AnalysisStatus(status_match.group("status").lower())
    return status, int(score_match.group("score"))
