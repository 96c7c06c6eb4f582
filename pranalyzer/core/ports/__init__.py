from pranalyzer.core.ports.clock import Clock
from pranalyzer.core.ports.logger import Logger
from pranalyzer.core.ports.pr_provider import PRProvider

__all__ = [
    "Logger",
    "PRProvider",
    "Clock",
]
