from pranalyzer.core.schema.analysis import (
    AnalysisResult,
    AnalysisStatus,
    CheckResult,
    PRAnalysis,
)
from pranalyzer.core.schema.pr import (
    CommitInfo,
    FileChange,
    PRDetails,
    PRSnapshot,
)

__all__ = [
    "FileChange",
    "CommitInfo",
    "PRDetails",
    "PRSnapshot",
    "AnalysisStatus",
    "CheckResult",
    "AnalysisResult",
    "PRAnalysis",
]
