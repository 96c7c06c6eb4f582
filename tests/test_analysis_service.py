import pytest

from pranalyzer.core.exceptions import (
    CommentPostError,
    InvalidPRNumberError,
    PRFetchError,
    ProviderError,
)
from pranalyzer.core.rules import DEFAULT_RULES
from pranalyzer.core.schema.analysis import AnalysisStatus
from pranalyzer.core.schema.pr import CommitInfo, FileChange, PRDetails
from pranalyzer.core.services import AnalysisService
from tests.fakes import FakePRProvider

DESCRIPTION = "Adds the widget endpoint and wires it into the router."


def _make_provider(
    description: str | None = DESCRIPTION,
    commits: list[str] | None = None,
    fail_on: str | None = None,
) -> FakePRProvider:
    files = [
        FileChange(
            name="src/widgets.ts",
            changes=12,
            additions=10,
            deletions=2,
            patch="@@ -1,2 +1,10 @@\n+export const widgets = [];",
            status="modified",
        ),
        FileChange(
            name="README.md",
            changes=3,
            additions=3,
            deletions=0,
            patch="+## Widgets",
            status="modified",
        ),
        FileChange(
            name="CHANGELOG.md",
            changes=1,
            additions=1,
            deletions=0,
            patch="+- widgets",
            status="modified",
        ),
    ]
    return FakePRProvider(
        PRDetails(title="Add widgets", description=description),  # type: ignore[arg-type]
        files=files,
        commits=[
            CommitInfo(message=message, files_changed=1, sha=f"sha{index}")
            for index, message in enumerate(commits or ["feat(widgets): add endpoint"])
        ],
        fail_on=fail_on,
    )


class TestFetchAndAnalyze:
    def test_returns_analysis_for_pr(self, logger, clock, fixed_now) -> None:
        provider = _make_provider()
        service = AnalysisService(logger, provider, clock)

        analysis = service.fetch_and_analyze("test-owner", "test-repo", 42)

        assert analysis.pr_number == 42
        assert analysis.owner == "test-owner"
        assert analysis.repo == "test-repo"
        assert analysis.timestamp == fixed_now
        assert analysis.analysis.status is AnalysisStatus.PASS
        assert analysis.analysis.score == 100
        assert provider.calls == ["fetch_details", "fetch_files", "fetch_commits"]

    def test_logs_outcome(self, logger, clock) -> None:
        service = AnalysisService(logger, _make_provider(commits=["fixed bug"]), clock)

        service.fetch_and_analyze("test-owner", "test-repo", 42)

        level, message, context = logger.records[-1]
        assert (level, message) == ("info", "Analyzed pull request")
        assert context["pr_ref"] == "test-owner/test-repo#42"
        assert context["status"] == "fail"
        assert context["score"] == 92

    def test_missing_description_is_treated_as_empty(self, logger, clock) -> None:
        service = AnalysisService(logger, _make_provider(description=None), clock)

        analysis = service.fetch_and_analyze("test-owner", "test-repo", 42)

        assert analysis.analysis.violations == ("PR description is too short or missing",)

    def test_uses_configured_rules(self, logger, clock) -> None:
        rules = DEFAULT_RULES.with_overrides(
            {"commits": {"require_conventional_commits": False}}
        )
        service = AnalysisService(
            logger, _make_provider(commits=["Update widgets list"]), clock, rules=rules
        )

        analysis = service.fetch_and_analyze("test-owner", "test-repo", 42)

        assert analysis.analysis.status is AnalysisStatus.PASS
        assert service.rules is rules

    def test_to_dict_is_json_ready(self, logger, clock) -> None:
        service = AnalysisService(logger, _make_provider(), clock)

        data = service.fetch_and_analyze("test-owner", "test-repo", 42).to_dict()

        assert data["pr_number"] == 42
        assert data["analysis"]["status"] == "pass"
        assert data["timestamp"] == "2024-01-15T12:00:00+00:00"


class TestFetchFailures:
    @pytest.mark.parametrize("fail_on", ["fetch_details", "fetch_files", "fetch_commits"])
    def test_provider_fault_fails_whole_operation(self, logger, clock, fail_on) -> None:
        service = AnalysisService(logger, _make_provider(fail_on=fail_on), clock)

        with pytest.raises(PRFetchError) as exc_info:
            service.fetch_and_analyze("test-owner", "test-repo", 42)

        assert exc_info.value.pr_ref == "test-owner/test-repo#42"
        assert isinstance(exc_info.value.__cause__, ProviderError)
        assert "Analyzed pull request" not in logger.messages("info")
        assert logger.messages("exception") == ["Failed to fetch pull request"]

    def test_rejects_invalid_pr_number_before_fetching(self, logger, clock) -> None:
        provider = _make_provider()
        service = AnalysisService(logger, provider, clock)

        with pytest.raises(InvalidPRNumberError):
            service.fetch_and_analyze("test-owner", "test-repo", 0)

        assert provider.calls == []


class TestPostAnalysisComment:
    def test_posts_formatted_comment(self, logger, clock) -> None:
        provider = _make_provider(commits=["fixed bug"])
        service = AnalysisService(logger, provider, clock)
        analysis = service.fetch_and_analyze("test-owner", "test-repo", 42)

        body = service.post_analysis_comment(analysis)

        assert provider.comments == [("test-owner", "test-repo", 42, body)]
        assert "**Status:** FAIL" in body
        assert "**Score:** 92/100" in body
        assert "Posted analysis comment" in logger.messages("info")

    def test_post_failure_raises_comment_error(self, logger, clock) -> None:
        service = AnalysisService(logger, _make_provider(fail_on="post_comment"), clock)
        analysis = service.fetch_and_analyze("test-owner", "test-repo", 42)

        with pytest.raises(CommentPostError) as exc_info:
            service.post_analysis_comment(analysis)

        assert exc_info.value.pr_ref == "test-owner/test-repo#42"
        assert logger.messages("exception") == ["Failed to post analysis comment"]
