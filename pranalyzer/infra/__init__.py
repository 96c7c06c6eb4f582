from pranalyzer.infra.clock import SystemClock
from pranalyzer.infra.github import GitHubClient, GitHubPRProvider
from pranalyzer.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire

__all__ = [
    "GitHubClient",
    "GitHubPRProvider",
    "ConsoleLogger",
    "LogfireLogger",
    "configure_logfire",
    "SystemClock",
]
