from pranalyzer.infra.logging.console import ConsoleLogger
from pranalyzer.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]
