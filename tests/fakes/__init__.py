from tests.fakes.clock import FakeClock
from tests.fakes.github import (
    FakeCommit,
    FakeFile,
    FakeGitCommit,
    FakeGitHubClient,
    FakePullRequest,
)
from tests.fakes.logger import FakeLogger
from tests.fakes.pr_provider import FakePRProvider

__all__ = [
    "FakeClock",
    "FakeCommit",
    "FakeFile",
    "FakeGitCommit",
    "FakeGitHubClient",
    "FakeLogger",
    "FakePRProvider",
    "FakePullRequest",
]
