from pranalyzer.core.services.analysis import AnalysisService

__all__ = ["AnalysisService"]
