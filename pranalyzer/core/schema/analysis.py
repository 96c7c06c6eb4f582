from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Tuple


class AnalysisStatus(Enum):
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


@dataclass(frozen=True, slots=True)
class CheckResult:
    category: str
    violations: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()
    score_delta: int = 0


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    status: AnalysisStatus
    violations: Tuple[str, ...]
    suggestions: Tuple[str, ...]
    score: int
    categories: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "violations": list(self.violations),
            "suggestions": list(self.suggestions),
            "score": self.score,
            "categories": dict(self.categories),
        }


@dataclass(frozen=True, slots=True)
class PRAnalysis:
    pr_number: int
    owner: str
    repo: str
    analysis: AnalysisResult
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "pr_number": self.pr_number,
            "owner": self.owner,
            "repo": self.repo,
            "analysis": self.analysis.to_dict(),
            "timestamp": self.timestamp.isoformat(),
        }
