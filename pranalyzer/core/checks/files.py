from typing import List

from pranalyzer.core.checks.base import BaseCheck
from pranalyzer.core.rules import RuleConfiguration
from pranalyzer.core.schema.analysis import CheckResult
from pranalyzer.core.schema.pr import PRSnapshot

LARGE_FILE_CHANGES = 500

TOO_MANY_FILES_PENALTY = 10
LARGE_FILE_PENALTY = 5


class FilesCheck(BaseCheck):
    category = "performance"

    def run(self, snapshot: PRSnapshot, rules: RuleConfiguration) -> CheckResult:
        max_files = rules.commits.max_files_per_commit
        violations: List[str] = []
        suggestions: List[str] = []
        delta = 0

        file_count = len(snapshot.files)
        if file_count > max_files:
            violations.append(f"PR has {file_count} files (max {max_files})")
            delta -= TOO_MANY_FILES_PENALTY

        for file in snapshot.files:
            if file.changes > LARGE_FILE_CHANGES:
                suggestions.append(
                    f"Large file change detected: {file.name} ({file.changes} changes). "
                    "Consider breaking into smaller commits."
                )
                delta -= LARGE_FILE_PENALTY

        return self._make_result(
            violations=violations,
            suggestions=suggestions,
            score_delta=delta,
        )
