from dataclasses import dataclass
from typing import Optional, Tuple

from pranalyzer.core.exceptions import InvalidPRNumberError


@dataclass(frozen=True, slots=True)
class FileChange:
    name: str
    changes: int
    additions: int
    deletions: int
    patch: Optional[str]
    status: str


@dataclass(frozen=True, slots=True)
class CommitInfo:
    message: str
    files_changed: int
    sha: str


@dataclass(frozen=True, slots=True)
class PRDetails:
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class PRSnapshot:
    number: int
    title: str
    description: str
    owner: str
    repo: str
    files: Tuple[FileChange, ...]
    commits: Tuple[CommitInfo, ...]

    def __post_init__(self) -> None:
        validate_pr_number(self.number)

    @property
    def ref(self) -> str:
        return pr_ref(self.owner, self.repo, self.number)


def pr_ref(owner: str, repo: str, pr_number: int) -> str:
    return f"{owner}/{repo}#{pr_number}"


def validate_pr_number(pr_number: int) -> None:
    if isinstance(pr_number, bool) or not isinstance(pr_number, int) or pr_number < 1:
        raise InvalidPRNumberError(
            f"PR number must be a positive integer, got {pr_number!r}",
            pr_number,
        )
