from contextlib import contextmanager
from typing import Iterator, Optional

from pranalyzer.config import Settings
from pranalyzer.core.exceptions import ConfigurationError
from pranalyzer.core.ports.logger import Logger
from pranalyzer.core.rules import DEFAULT_RULES, RuleConfiguration, load_rules
from pranalyzer.core.services import AnalysisService
from pranalyzer.infra import (
    ConsoleLogger,
    GitHubClient,
    GitHubPRProvider,
    LogfireLogger,
    SystemClock,
    configure_logfire,
)


def build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == "console":
        return ConsoleLogger(settings.logging.name, settings.logging.level)
    if settings.logging.backend == "logfire":
        if not settings.logging.logfire_token:
            raise ConfigurationError(
                "Logfire backend selected but PRANALYZER_LOGFIRE_TOKEN is not set"
            )
        configure_logfire(settings.logging.logfire_token)
        return LogfireLogger(settings.logging.name)
    raise ConfigurationError(f"Unknown logging backend {settings.logging.backend}")


def build_rules(settings: Settings, rules_file: Optional[str] = None) -> RuleConfiguration:
    path = rules_file or settings.rules.rules_file
    if path is None:
        return DEFAULT_RULES
    return load_rules(path)


@contextmanager
def open_analysis_service(
    settings: Settings,
    rules: RuleConfiguration = DEFAULT_RULES,
    logger: Optional[Logger] = None,
) -> Iterator[AnalysisService]:
    """Yield a service backed by GitHub; fails before any request without a token."""
    token = settings.github.require_token()
    logger = logger or build_logger(settings)
    with GitHubClient(token) as client:
        yield AnalysisService(
            logger,
            GitHubPRProvider(client),
            SystemClock(),
            rules=rules,
        )
