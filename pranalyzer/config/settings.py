import os
from dataclasses import dataclass
from typing import Optional

from pranalyzer.core.exceptions import MissingCredentialError

GITHUB_TOKEN_VARIABLE = "GITHUB_TOKEN"


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    token: Optional[str]

    def require_token(self) -> str:
        if not self.token:
            raise MissingCredentialError(
                f"{GITHUB_TOKEN_VARIABLE} environment variable is required",
                GITHUB_TOKEN_VARIABLE,
            )
        return self.token


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class RulesSettings:
    rules_file: Optional[str]


@dataclass(frozen=True, slots=True)
class Settings:
    github: GitHubSettings
    logging: LoggingSettings
    rules: RulesSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    return Settings(
        github=GitHubSettings(token=_get_env_or_default(GITHUB_TOKEN_VARIABLE)),
        logging=LoggingSettings(
            backend=_get_env_or_default("PRANALYZER_LOGGER_BACKEND", "console").lower(),
            name=_get_env_or_default("PRANALYZER_LOGGER_NAME", "pranalyzer"),
            level=_get_env_or_default("PRANALYZER_LOG_LEVEL", "INFO").upper(),
            logfire_token=_get_env_or_default("PRANALYZER_LOGFIRE_TOKEN"),
        ),
        rules=RulesSettings(
            rules_file=_get_env_or_default("PRANALYZER_RULES_FILE"),
        ),
    )


def _get_env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value
