from typing import Protocol, Sequence, runtime_checkable

from pranalyzer.core.schema.pr import CommitInfo, FileChange, PRDetails


@runtime_checkable
class PRProvider(Protocol):
    def fetch_details(self, owner: str, repo: str, pr_number: int) -> PRDetails:
        ...

    def fetch_files(
        self, owner: str, repo: str, pr_number: int
    ) -> Sequence[FileChange]:
        ...

    def fetch_commits(
        self, owner: str, repo: str, pr_number: int
    ) -> Sequence[CommitInfo]:
        ...

    def post_comment(self, owner: str, repo: str, pr_number: int, body: str) -> None:
        ...
