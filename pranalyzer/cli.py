"""Command-line interface for pranalyzer"""

import json
from typing import Optional

import typer

from pranalyzer import __version__
from pranalyzer.app import build_rules, open_analysis_service
from pranalyzer.config import load_settings
from pranalyzer.core.exceptions import PRAnalyzerError

ACTIONS = ("analyze", "post", "both")
USAGE = "Usage: pranalyzer <owner> <repo> <pr_number> [analyze|post|both]"

app = typer.Typer(
    name="pranalyzer",
    help="Rule-based first-pass review for GitHub pull requests",
    add_completion=False,
)


def _usage_error(message: str) -> typer.Exit:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    typer.echo(USAGE, err=True)
    return typer.Exit(1)


def _parse_pr_number(value: str) -> int:
    try:
        pr_number = int(value)
    except ValueError:
        raise _usage_error("PR number must be a valid number") from None
    if pr_number < 1:
        raise _usage_error("PR number must be a positive integer")
    return pr_number


@app.command()
def main(
    owner: Optional[str] = typer.Argument(None, help="Repository owner"),
    repo: Optional[str] = typer.Argument(None, help="Repository name"),
    pr_number: Optional[str] = typer.Argument(None, help="Pull request number"),
    action: str = typer.Argument(
        "analyze",
        help="analyze (print only), post (also comment on the PR), or both",
    ),
    rules_file: Optional[str] = typer.Option(
        None,
        "--rules",
        "-r",
        help="JSON file overriding the default analysis rules",
    ),
    show_rules: bool = typer.Option(
        False,
        "--show-rules",
        help="Print the effective analysis rules as JSON and exit",
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """
    Analyze a pull request against the configured rules.

    Examples:

      pranalyzer octo-org widgets 42

      pranalyzer octo-org widgets 42 post --rules rules.json
    """
    if version:
        typer.echo(f"pranalyzer version {__version__}")
        raise typer.Exit(0)

    settings = load_settings()

    try:
        rules = build_rules(settings, rules_file)
    except PRAnalyzerError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if show_rules:
        typer.echo(json.dumps(rules.to_dict(), indent=2))
        raise typer.Exit(0)

    if owner is None or repo is None or pr_number is None:
        raise _usage_error("owner, repo and pr_number are required")
    number = _parse_pr_number(pr_number)
    if action not in ACTIONS:
        raise _usage_error(f"unknown action '{action}'")

    try:
        with open_analysis_service(settings, rules) as service:
            typer.echo(f"PR Analyzer for {owner}/{repo}#{number}", err=True)
            analysis = service.fetch_and_analyze(owner, repo, number)
            typer.echo(json.dumps(analysis.to_dict(), indent=2))

            if action in ("post", "both"):
                typer.echo("Posting comment to PR...", err=True)
                service.post_analysis_comment(analysis)
                typer.secho("Comment posted successfully", fg=typer.colors.GREEN, err=True)

    except PRAnalyzerError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        typer.echo("Analysis interrupted", err=True)
        raise typer.Exit(130)


if __name__ == "__main__":
    app()
