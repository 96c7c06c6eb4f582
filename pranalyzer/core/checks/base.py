from abc import ABC, abstractmethod
from typing import Iterable

from pranalyzer.core.rules import RuleConfiguration
from pranalyzer.core.schema.analysis import CheckResult
from pranalyzer.core.schema.pr import PRSnapshot


class BaseCheck(ABC):
    """One category of heuristics over a PR snapshot.

    Checks are pure: they read the snapshot and the rules and report what they
    found as a ``CheckResult``. They never raise on missing optional data.
    """

    category: str = ""

    @abstractmethod
    def run(self, snapshot: PRSnapshot, rules: RuleConfiguration) -> CheckResult:
        ...

    def _make_result(
        self,
        *,
        violations: Iterable[str] = (),
        suggestions: Iterable[str] = (),
        score_delta: int = 0,
    ) -> CheckResult:
        return CheckResult(
            category=self.category,
            violations=tuple(violations),
            suggestions=tuple(suggestions),
            score_delta=score_delta,
        )
