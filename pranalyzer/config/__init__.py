from pranalyzer.config.settings import (
    GitHubSettings,
    LoggingSettings,
    RulesSettings,
    Settings,
    load_settings,
)

__all__ = [
    "Settings",
    "GitHubSettings",
    "LoggingSettings",
    "RulesSettings",
    "load_settings",
]
