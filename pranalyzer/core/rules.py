import json
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping

from pranalyzer.core.exceptions import RuleConfigurationError


@dataclass(frozen=True, slots=True)
class CodeQualityRules:
    max_line_length: int = 100
    min_function_documentation: bool = True
    require_type_annotations: bool = True
    avoid_console_logs_in_production: bool = True
    max_complexity: int = 10
    require_tests: bool = True


@dataclass(frozen=True, slots=True)
class TestingRules:
    min_coverage_percentage: int = 80
    require_tests_for_new_features: bool = True
    require_tests_for_bug_fixes: bool = True
    test_file_pattern: str = "*.test.ts|*.spec.ts"


@dataclass(frozen=True, slots=True)
class CommitRules:
    # Also used as the PR-wide file count limit.
    max_files_per_commit: int = 20
    require_conventional_commits: bool = True
    commit_message_min_length: int = 10
    max_commit_message_length: int = 100


@dataclass(frozen=True, slots=True)
class DocumentationRules:
    require_readme_update: bool = True
    require_changelog_entry: bool = True
    require_api_documentation: bool = True
    min_description_length: int = 20


@dataclass(frozen=True, slots=True)
class SecurityRules:
    no_hardcoded_secrets: bool = True
    no_public_sensitive_data: bool = True
    require_security_review: bool = False
    scan_dependencies: bool = True


@dataclass(frozen=True, slots=True)
class PerformanceRules:
    max_file_size_increase: int = 100000  # bytes
    warn_on_large_files: bool = True
    check_bundle_size: bool = True


@dataclass(frozen=True, slots=True)
class RuleConfiguration:
    """Thresholds and toggles consulted by the analysis checks.

    Several options (most of ``testing`` and ``performance``) are not read by
    any check. They are kept so the full rule table can be inspected and
    shared with external tooling.
    """

    code_quality: CodeQualityRules = field(default_factory=CodeQualityRules)
    testing: TestingRules = field(default_factory=TestingRules)
    commits: CommitRules = field(default_factory=CommitRules)
    documentation: DocumentationRules = field(default_factory=DocumentationRules)
    security: SecurityRules = field(default_factory=SecurityRules)
    performance: PerformanceRules = field(default_factory=PerformanceRules)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return asdict(self)

    def with_overrides(
        self, overrides: Mapping[str, Mapping[str, Any]]
    ) -> "RuleConfiguration":
        categories = {item.name for item in fields(self)}
        updated: dict[str, Any] = {}
        for category, options in overrides.items():
            if category not in categories:
                raise RuleConfigurationError(f"Unknown rule category '{category}'")
            if not isinstance(options, Mapping):
                raise RuleConfigurationError(
                    f"Rule category '{category}' must be a mapping of options"
                )
            updated[category] = _override_category(
                getattr(self, category), category, options
            )
        return replace(self, **updated)


DEFAULT_RULES = RuleConfiguration()


def load_rules(path: str | Path, base: RuleConfiguration = DEFAULT_RULES) -> RuleConfiguration:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as error:
        raise RuleConfigurationError(f"Cannot read rules file {path}") from error
    except json.JSONDecodeError as error:
        raise RuleConfigurationError(f"Rules file {path} is not valid JSON") from error
    if not isinstance(raw, dict):
        raise RuleConfigurationError(f"Rules file {path} must contain a JSON object")
    return base.with_overrides(raw)


def _override_category(current: Any, category: str, options: Mapping[str, Any]) -> Any:
    known = {item.name for item in fields(current)}
    for name, value in options.items():
        if name not in known:
            raise RuleConfigurationError(f"Unknown rule option '{category}.{name}'")
        expected = type(getattr(current, name))
        # bool is a subclass of int, so it has to be checked on its own
        if isinstance(value, bool) != (expected is bool) or not isinstance(value, expected):
            raise RuleConfigurationError(
                f"Rule option '{category}.{name}' expects {expected.__name__}, "
                f"got {type(value).__name__}"
            )
    return replace(current, **options)
