from typing import List

from pranalyzer.core.checks.base import BaseCheck
from pranalyzer.core.rules import RuleConfiguration
from pranalyzer.core.schema.analysis import CheckResult
from pranalyzer.core.schema.pr import PRSnapshot

SOURCE_EXTENSIONS = (".js", ".ts")
DEBUG_PRINT_MARKER = "console.log"

DEBUG_PRINT_PENALTY = 5
LONG_LINE_PENALTY = 2


class CodeQualityCheck(BaseCheck):
    category = "code_quality"

    def run(self, snapshot: PRSnapshot, rules: RuleConfiguration) -> CheckResult:
        options = rules.code_quality
        suggestions: List[str] = []
        delta = 0

        for file in snapshot.files:
            if not file.name.endswith(SOURCE_EXTENSIONS) or not file.patch:
                continue

            if DEBUG_PRINT_MARKER in file.patch and options.avoid_console_logs_in_production:
                suggestions.append(
                    f"Remove console.log statements in production code ({file.name})"
                )
                delta -= DEBUG_PRINT_PENALTY

            line_number = _first_long_line(file.patch, options.max_line_length)
            if line_number is not None:
                suggestions.append(
                    f"Line {line_number} in {file.name} exceeds max length "
                    f"of {options.max_line_length}"
                )
                delta -= LONG_LINE_PENALTY

        return self._make_result(suggestions=suggestions, score_delta=delta)


def _first_long_line(patch: str, max_length: int) -> int | None:
    for index, line in enumerate(patch.split("\n"), start=1):
        if len(line) > max_length:
            return index
    return None
