import re
from typing import List

from pranalyzer.core.checks.base import BaseCheck
from pranalyzer.core.rules import RuleConfiguration
from pranalyzer.core.schema.analysis import CheckResult
from pranalyzer.core.schema.pr import PRSnapshot

SECRET_PATTERNS = (
    re.compile(r"(['\"]?)(password|passwd|pwd)(['\"]?\s*[:=])", re.IGNORECASE),
    re.compile(r"(['\"]?)(api[_-]?key|apikey)(['\"]?\s*[:=])", re.IGNORECASE),
    re.compile(r"(['\"]?)(secret)(['\"]?\s*[:=])", re.IGNORECASE),
    re.compile(r"(['\"]?)(token)(['\"]?\s*[:=])", re.IGNORECASE),
    re.compile(r"(['\"]?)(auth)(['\"]?\s*[:=])", re.IGNORECASE),
)
API_KEY_PATTERN = re.compile(r"api[_-]?key|apikey|secret[_-]?key", re.IGNORECASE)
EXEMPT_NAME_MARKERS = (".example", ".template")

HARDCODED_SECRET_PENALTY = 15
API_KEY_PENALTY = 10


def contains_secret_pattern(patch: str) -> bool:
    return any(pattern.search(patch) for pattern in SECRET_PATTERNS)


class SecurityCheck(BaseCheck):
    category = "security"

    def run(self, snapshot: PRSnapshot, rules: RuleConfiguration) -> CheckResult:
        options = rules.security
        violations: List[str] = []
        suggestions: List[str] = []
        delta = 0

        for file in snapshot.files:
            if not file.patch or any(marker in file.name for marker in EXEMPT_NAME_MARKERS):
                continue

            if options.no_hardcoded_secrets and contains_secret_pattern(file.patch):
                violations.append(
                    f"Potential hardcoded secret detected in {file.name}. "
                    "Use environment variables instead."
                )
                delta -= HARDCODED_SECRET_PENALTY

            # Not gated by the toggle; may fire on the same text as above.
            if API_KEY_PATTERN.search(file.patch):
                suggestions.append(
                    f"Possible API key or secret in {file.name}. Ensure it's not hardcoded."
                )
                delta -= API_KEY_PENALTY

        return self._make_result(
            violations=violations,
            suggestions=suggestions,
            score_delta=delta,
        )
