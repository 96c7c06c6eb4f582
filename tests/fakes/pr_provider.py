from typing import List, Optional, Sequence

from pranalyzer.core.exceptions import ProviderError
from pranalyzer.core.ports.pr_provider import PRProvider
from pranalyzer.core.schema.pr import CommitInfo, FileChange, PRDetails


class FakePRProvider(PRProvider):
    def __init__(
        self,
        details: PRDetails,
        files: Sequence[FileChange] = (),
        commits: Sequence[CommitInfo] = (),
        *,
        fail_on: Optional[str] = None,
    ) -> None:
        self._details = details
        self._files = list(files)
        self._commits = list(commits)
        self._fail_on = fail_on
        self.calls: List[str] = []
        self.comments: List[tuple[str, str, int, str]] = []

    def fetch_details(self, owner: str, repo: str, pr_number: int) -> PRDetails:
        self._record("fetch_details")
        return self._details

    def fetch_files(self, owner: str, repo: str, pr_number: int) -> List[FileChange]:
        self._record("fetch_files")
        return list(self._files)

    def fetch_commits(self, owner: str, repo: str, pr_number: int) -> List[CommitInfo]:
        self._record("fetch_commits")
        return list(self._commits)

    def post_comment(self, owner: str, repo: str, pr_number: int, body: str) -> None:
        self._record("post_comment")
        self.comments.append((owner, repo, pr_number, body))

    def _record(self, call: str) -> None:
        self.calls.append(call)
        if call == self._fail_on:
            raise ProviderError(f"{call} failed")
