from datetime import datetime, timedelta, timezone
from typing import List, NoReturn

from github import GithubException
from github.PullRequest import PullRequest

from pranalyzer.core.exceptions import (
    ProviderAuthenticationError,
    ProviderError,
    ProviderNotFoundError,
    ProviderRateLimitError,
)
from pranalyzer.core.ports.pr_provider import PRProvider
from pranalyzer.core.schema.pr import CommitInfo, FileChange, PRDetails
from pranalyzer.infra.github.client import GitHubClient


class GitHubPRProvider(PRProvider):
    def __init__(self, client: GitHubClient) -> None:
        self._client = client
        self._pulls: dict[tuple[str, str, int], PullRequest] = {}

    def fetch_details(self, owner: str, repo: str, pr_number: int) -> PRDetails:
        pull = self._get_pull(owner, repo, pr_number)
        return PRDetails(
            title=pull.title or "",
            description=pull.body or "",
        )

    def fetch_files(self, owner: str, repo: str, pr_number: int) -> List[FileChange]:
        pull = self._get_pull(owner, repo, pr_number)
        try:
            return [self._to_file_change(file) for file in pull.get_files()]
        except GithubException as error:
            self._translate_exception(
                "Failed to fetch pull request files",
                error,
                resource=_resource(owner, repo, pr_number),
            )

    def fetch_commits(self, owner: str, repo: str, pr_number: int) -> List[CommitInfo]:
        pull = self._get_pull(owner, repo, pr_number)
        try:
            return [self._to_commit_info(commit) for commit in pull.get_commits()]
        except GithubException as error:
            self._translate_exception(
                "Failed to fetch pull request commits",
                error,
                resource=_resource(owner, repo, pr_number),
            )

    def post_comment(self, owner: str, repo: str, pr_number: int, body: str) -> None:
        pull = self._get_pull(owner, repo, pr_number)
        try:
            pull.create_issue_comment(body)
        except GithubException as error:
            self._translate_exception(
                "Failed to create pull request comment",
                error,
                resource=_resource(owner, repo, pr_number),
            )

    def _to_file_change(self, file) -> FileChange:  # noqa: ANN001
        return FileChange(
            name=file.filename,
            changes=file.changes,
            additions=file.additions,
            deletions=file.deletions,
            patch=file.patch,
            status=file.status,
        )

    def _to_commit_info(self, commit) -> CommitInfo:  # noqa: ANN001
        return CommitInfo(
            message=commit.commit.message or "",
            files_changed=len(commit.raw_data.get("files") or []),
            sha=commit.sha,
        )

    def _get_pull(self, owner: str, repo: str, pr_number: int) -> PullRequest:
        key = (owner, repo, pr_number)
        if key not in self._pulls:
            try:
                self._pulls[key] = self._client.get_pull(owner, repo, pr_number)
            except GithubException as error:
                self._translate_exception(
                    "Failed to access pull request",
                    error,
                    resource=_resource(owner, repo, pr_number),
                )
        return self._pulls[key]

    def _translate_exception(
        self,
        message: str,
        error: GithubException,
        resource: str | None = None,
    ) -> NoReturn:
        status = getattr(error, "status", None)
        headers = getattr(error, "headers", {}) or {}
        if status == 401:
            raise ProviderAuthenticationError(message) from error
        if status == 404:
            raise ProviderNotFoundError(
                message,
                resource or "resource",
            ) from error
        if status == 403:
            retry_after = self._retry_after_from_headers(headers)
            if retry_after:
                raise ProviderRateLimitError(message, retry_after) from error
        raise ProviderError(message) from error

    def _retry_after_from_headers(self, headers) -> datetime | None:  # noqa: ANN001
        try:
            if headers.get("Retry-After") is not None:
                delay = float(headers["Retry-After"])
                return datetime.now(timezone.utc) + timedelta(seconds=delay)
            if headers.get("X-RateLimit-Reset") is not None:
                reset_time = float(headers["X-RateLimit-Reset"])
                return datetime.fromtimestamp(reset_time, tz=timezone.utc)
        except (TypeError, ValueError):
            return None
        return None


def _resource(owner: str, repo: str, pr_number: int) -> str:
    return f"{owner}/{repo}#{pr_number}"
