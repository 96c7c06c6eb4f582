from pranalyzer.core.checks.base import BaseCheck
from pranalyzer.core.checks.code_quality import CodeQualityCheck
from pranalyzer.core.checks.commits import CommitsCheck, is_conventional_commit
from pranalyzer.core.checks.documentation import DocumentationCheck
from pranalyzer.core.checks.files import FilesCheck
from pranalyzer.core.checks.security import SecurityCheck, contains_secret_pattern

__all__ = [
    "BaseCheck",
    "CodeQualityCheck",
    "CommitsCheck",
    "FilesCheck",
    "DocumentationCheck",
    "SecurityCheck",
    "is_conventional_commit",
    "contains_secret_pattern",
]
