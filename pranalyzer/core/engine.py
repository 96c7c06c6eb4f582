from types import MappingProxyType
from typing import Iterable, List, Sequence

from pranalyzer.core.checks import (
    BaseCheck,
    CodeQualityCheck,
    CommitsCheck,
    DocumentationCheck,
    FilesCheck,
    SecurityCheck,
)
from pranalyzer.core.rules import DEFAULT_RULES, RuleConfiguration
from pranalyzer.core.schema.analysis import (
    AnalysisResult,
    AnalysisStatus,
    CheckResult,
)
from pranalyzer.core.schema.pr import PRSnapshot

INITIAL_SCORE = 100
MIN_SCORE = 0
MAX_SCORE = 100

DEFAULT_CHECKS: Sequence[BaseCheck] = (
    CodeQualityCheck(),
    CommitsCheck(),
    FilesCheck(),
    DocumentationCheck(),
    SecurityCheck(),
)


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def derive_status(violations: Sequence[str], suggestions: Sequence[str]) -> AnalysisStatus:
    if violations:
        return AnalysisStatus.FAIL
    if suggestions:
        return AnalysisStatus.WARNING
    return AnalysisStatus.PASS


def merge_results(results: Iterable[CheckResult]) -> AnalysisResult:
    """Fold per-category results into the final verdict.

    Lists are concatenated in the order the results arrive and the deltas are
    summed onto the initial score. The score is clamped once, after every
    delta has been applied.
    """
    violations: List[str] = []
    suggestions: List[str] = []
    score = INITIAL_SCORE
    category_scores: dict[str, int] = {}
    for result in results:
        violations.extend(result.violations)
        suggestions.extend(result.suggestions)
        score += result.score_delta
        category_scores[result.category] = (
            category_scores.get(result.category, INITIAL_SCORE) + result.score_delta
        )
    return AnalysisResult(
        status=derive_status(violations, suggestions),
        violations=tuple(violations),
        suggestions=tuple(suggestions),
        score=clamp_score(score),
        categories=MappingProxyType(
            {name: clamp_score(value) for name, value in category_scores.items()}
        ),
    )


class AnalysisEngine:
    def __init__(self, checks: Sequence[BaseCheck] = DEFAULT_CHECKS) -> None:
        self._checks = tuple(checks)

    def analyze(
        self,
        snapshot: PRSnapshot,
        rules: RuleConfiguration = DEFAULT_RULES,
    ) -> AnalysisResult:
        return merge_results(check.run(snapshot, rules) for check in self._checks)


_default_engine = AnalysisEngine()


def analyze(
    snapshot: PRSnapshot,
    rules: RuleConfiguration = DEFAULT_RULES,
) -> AnalysisResult:
    return _default_engine.analyze(snapshot, rules)
