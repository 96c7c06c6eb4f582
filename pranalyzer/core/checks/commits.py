import re
from typing import List

from pranalyzer.core.checks.base import BaseCheck
from pranalyzer.core.rules import RuleConfiguration
from pranalyzer.core.schema.analysis import CheckResult
from pranalyzer.core.schema.pr import PRSnapshot

CONVENTIONAL_COMMIT_PATTERN = re.compile(
    r"^(feat|fix|docs|style|refactor|perf|test|chore|ci)(\(.+\))?!?: .+"
)
QUOTED_MESSAGE_LIMIT = 50

NON_CONVENTIONAL_PENALTY = 5
SHORT_MESSAGE_PENALTY = 3


def is_conventional_commit(message: str) -> bool:
    return CONVENTIONAL_COMMIT_PATTERN.match(message) is not None


class CommitsCheck(BaseCheck):
    category = "commits"

    def run(self, snapshot: PRSnapshot, rules: RuleConfiguration) -> CheckResult:
        options = rules.commits
        violations: List[str] = []
        suggestions: List[str] = []
        delta = 0

        for commit in snapshot.commits:
            message = commit.message
            if options.require_conventional_commits and not is_conventional_commit(message):
                violations.append(
                    f'Commit "{message[:QUOTED_MESSAGE_LIMIT]}..." does not follow '
                    "conventional commit format"
                )
                delta -= NON_CONVENTIONAL_PENALTY

            if len(message) < options.commit_message_min_length:
                suggestions.append(
                    f'Commit message too short: "{message}" '
                    f"(min {options.commit_message_min_length} chars)"
                )
                delta -= SHORT_MESSAGE_PENALTY

        return self._make_result(
            violations=violations,
            suggestions=suggestions,
            score_delta=delta,
        )
