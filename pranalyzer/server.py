"""MCP tool server exposing PR analysis to MCP-capable clients."""

import json
from contextlib import AbstractContextManager
from typing import Callable

from mcp.server.fastmcp import FastMCP

from pranalyzer.app import build_logger, build_rules, open_analysis_service
from pranalyzer.config import Settings, load_settings
from pranalyzer.core.exceptions import PRAnalyzerError
from pranalyzer.core.rules import RuleConfiguration
from pranalyzer.core.services import AnalysisService

ServiceFactory = Callable[[], AbstractContextManager[AnalysisService]]


class AnalysisTools:
    """Tool handlers; failures come back as text so the client can show them."""

    def __init__(self, service_factory: ServiceFactory, rules: RuleConfiguration) -> None:
        self._service_factory = service_factory
        self._rules = rules

    def analyze_pr(self, owner: str, repo: str, pr_number: int) -> str:
        try:
            with self._service_factory() as service:
                analysis = service.fetch_and_analyze(owner, repo, pr_number)
        except PRAnalyzerError as error:
            return f"Error analyzing PR: {error}"
        return json.dumps(analysis.to_dict(), indent=2)

    def post_analysis_to_pr(self, owner: str, repo: str, pr_number: int) -> str:
        try:
            with self._service_factory() as service:
                analysis = service.fetch_and_analyze(owner, repo, pr_number)
                service.post_analysis_comment(analysis)
        except PRAnalyzerError as error:
            return f"Error posting analysis: {error}"
        return f"Analysis posted successfully on PR #{pr_number}"

    def get_analysis_rules(self) -> str:
        return json.dumps(self._rules.to_dict(), indent=2)


def build_server(tools: AnalysisTools) -> FastMCP:
    server = FastMCP("pr-analyzer")

    @server.tool()
    def analyze_pr(owner: str, repo: str, pr_number: int) -> str:
        """Analyze a GitHub pull request against the configured review rules."""
        return tools.analyze_pr(owner, repo, pr_number)

    @server.tool()
    def post_analysis_to_pr(owner: str, repo: str, pr_number: int) -> str:
        """Analyze a GitHub pull request and post the results as a PR comment."""
        return tools.post_analysis_to_pr(owner, repo, pr_number)

    @server.tool()
    def get_analysis_rules() -> str:
        """Get the current PR analysis rules and thresholds."""
        return tools.get_analysis_rules()

    return server


def create_tools(settings: Settings) -> AnalysisTools:
    rules = build_rules(settings)
    logger = build_logger(settings)
    return AnalysisTools(
        lambda: open_analysis_service(settings, rules, logger),
        rules,
    )


def main() -> None:
    settings = load_settings()
    build_server(create_tools(settings)).run()


if __name__ == "__main__":
    main()
