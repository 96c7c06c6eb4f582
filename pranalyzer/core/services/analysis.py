from pranalyzer.core.engine import AnalysisEngine
from pranalyzer.core.exceptions import (
    CommentPostError,
    PRAnalyzerError,
    PRFetchError,
)
from pranalyzer.core.ports.clock import Clock
from pranalyzer.core.ports.logger import Logger
from pranalyzer.core.ports.pr_provider import PRProvider
from pranalyzer.core.report import format_comment
from pranalyzer.core.rules import DEFAULT_RULES, RuleConfiguration
from pranalyzer.core.schema.analysis import PRAnalysis
from pranalyzer.core.schema.pr import PRSnapshot, pr_ref, validate_pr_number


class AnalysisService:
    """Fetches a pull request through a provider, analyzes it, and reports back."""

    def __init__(
        self,
        logger: Logger,
        provider: PRProvider,
        clock: Clock,
        *,
        rules: RuleConfiguration = DEFAULT_RULES,
        engine: AnalysisEngine | None = None,
    ) -> None:
        self._logger = logger
        self._provider = provider
        self._clock = clock
        self._rules = rules
        self._engine = engine or AnalysisEngine()

    @property
    def rules(self) -> RuleConfiguration:
        return self._rules

    def fetch_snapshot(self, owner: str, repo: str, pr_number: int) -> PRSnapshot:
        ref = pr_ref(owner, repo, pr_number)
        validate_pr_number(pr_number)
        try:
            details = self._provider.fetch_details(owner, repo, pr_number)
            files = tuple(self._provider.fetch_files(owner, repo, pr_number))
            commits = tuple(self._provider.fetch_commits(owner, repo, pr_number))
        except PRAnalyzerError as error:
            self._logger.exception(
                "Failed to fetch pull request",
                pr_ref=ref,
                error=str(error),
            )
            raise PRFetchError(
                f"Failed to fetch pull request {ref}: {error.message}",
                ref,
            ) from error

        self._logger.debug(
            "Fetched pull request",
            pr_ref=ref,
            file_count=len(files),
            commit_count=len(commits),
        )
        return PRSnapshot(
            number=pr_number,
            title=details.title or "",
            description=details.description or "",
            owner=owner,
            repo=repo,
            files=files,
            commits=commits,
        )

    def fetch_and_analyze(self, owner: str, repo: str, pr_number: int) -> PRAnalysis:
        snapshot = self.fetch_snapshot(owner, repo, pr_number)
        result = self._engine.analyze(snapshot, self._rules)
        self._logger.info(
            "Analyzed pull request",
            pr_ref=snapshot.ref,
            status=result.status.value,
            score=result.score,
            violations=len(result.violations),
            suggestions=len(result.suggestions),
        )
        return PRAnalysis(
            pr_number=pr_number,
            owner=owner,
            repo=repo,
            analysis=result,
            timestamp=self._clock.now(),
        )

    def post_analysis_comment(self, analysis: PRAnalysis) -> str:
        ref = pr_ref(analysis.owner, analysis.repo, analysis.pr_number)
        body = format_comment(analysis.analysis)
        try:
            self._provider.post_comment(
                analysis.owner,
                analysis.repo,
                analysis.pr_number,
                body,
            )
        except PRAnalyzerError as error:
            self._logger.exception(
                "Failed to post analysis comment",
                pr_ref=ref,
                error=str(error),
            )
            raise CommentPostError(
                f"Failed to post comment on {ref}: {error.message}",
                ref,
            ) from error
        self._logger.info("Posted analysis comment", pr_ref=ref)
        return body
