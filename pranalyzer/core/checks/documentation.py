from typing import List

from pranalyzer.core.checks.base import BaseCheck
from pranalyzer.core.rules import RuleConfiguration
from pranalyzer.core.schema.analysis import CheckResult
from pranalyzer.core.schema.pr import PRSnapshot

MIN_DESCRIPTION_LENGTH = 20
# A description at least this long suppresses the README and CHANGELOG hints.
DETAILED_DESCRIPTION_LENGTH = 100

SHORT_DESCRIPTION_PENALTY = 10
MISSING_README_PENALTY = 5
MISSING_CHANGELOG_PENALTY = 3


class DocumentationCheck(BaseCheck):
    category = "documentation"

    def run(self, snapshot: PRSnapshot, rules: RuleConfiguration) -> CheckResult:
        options = rules.documentation
        description = snapshot.description or ""
        names = [file.name.lower() for file in snapshot.files]
        violations: List[str] = []
        suggestions: List[str] = []
        delta = 0

        if len(description) < MIN_DESCRIPTION_LENGTH:
            violations.append("PR description is too short or missing")
            delta -= SHORT_DESCRIPTION_PENALTY

        # Skipped for a PR without changed files.
        brief = bool(names) and len(description) < DETAILED_DESCRIPTION_LENGTH

        touches_readme = any("readme" in name for name in names)
        if not touches_readme and brief and options.require_readme_update:
            suggestions.append("Consider updating README.md for significant changes")
            delta -= MISSING_README_PENALTY

        touches_changelog = any(
            "changelog" in name or "change log" in name for name in names
        )
        if not touches_changelog and brief and options.require_changelog_entry:
            suggestions.append("Consider adding an entry to CHANGELOG")
            delta -= MISSING_CHANGELOG_PENALTY

        return self._make_result(
            violations=violations,
            suggestions=suggestions,
            score_delta=delta,
        )
