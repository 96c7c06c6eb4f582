from pranalyzer.infra.github.client import GitHubClient
from pranalyzer.infra.github.pr_provider import GitHubPRProvider

__all__ = ["GitHubClient", "GitHubPRProvider"]
