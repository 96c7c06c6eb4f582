import json
from contextlib import contextmanager

import pytest
from typer.testing import CliRunner

from pranalyzer import cli
from pranalyzer.core.schema.pr import CommitInfo, FileChange, PRDetails
from pranalyzer.core.services import AnalysisService
from tests.fakes import FakeLogger, FakePRProvider
from tests.settings import get_test_settings

runner = CliRunner()


@pytest.fixture
def provider() -> FakePRProvider:
    return FakePRProvider(
        PRDetails(title="Add widgets", description="W" * 120),
        files=[
            FileChange(
                name="src/widgets.py",
                changes=4,
                additions=4,
                deletions=0,
                patch="+WIDGETS = []",
                status="added",
            )
        ],
        commits=[CommitInfo(message="feat: add widgets", files_changed=1, sha="abc")],
    )


@pytest.fixture
def fake_app(monkeypatch, provider, clock):
    opened = []

    @contextmanager
    def fake_open(settings, rules, logger=None):
        settings.github.require_token()
        opened.append(rules)
        yield AnalysisService(FakeLogger(), provider, clock, rules=rules)

    monkeypatch.setattr(cli, "load_settings", lambda: get_test_settings())
    monkeypatch.setattr(cli, "open_analysis_service", fake_open)
    return opened


class TestAnalyzeCommand:
    def test_prints_analysis(self, fake_app, provider) -> None:
        result = runner.invoke(cli.app, ["test-owner", "test-repo", "42"])

        assert result.exit_code == 0
        assert '"status": "pass"' in result.output
        assert '"score": 100' in result.output
        assert provider.comments == []

    @pytest.mark.parametrize("action", ["post", "both"])
    def test_posts_comment(self, fake_app, provider, action) -> None:
        result = runner.invoke(cli.app, ["test-owner", "test-repo", "42", action])

        assert result.exit_code == 0
        assert len(provider.comments) == 1
        owner, repo, number, body = provider.comments[0]
        assert (owner, repo, number) == ("test-owner", "test-repo", 42)
        assert "**Status:** PASS" in body

    def test_rules_file_is_applied(self, fake_app, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"commits": {"max_files_per_commit": 1}}))

        result = runner.invoke(
            cli.app, ["test-owner", "test-repo", "42", "--rules", str(path)]
        )

        assert result.exit_code == 0
        assert fake_app[0].commits.max_files_per_commit == 1

    def test_provider_failure_exits_non_zero(self, monkeypatch, clock) -> None:
        failing = FakePRProvider(PRDetails(title="t", description=""), fail_on="fetch_files")

        @contextmanager
        def fake_open(settings, rules, logger=None):
            yield AnalysisService(FakeLogger(), failing, clock, rules=rules)

        monkeypatch.setattr(cli, "load_settings", lambda: get_test_settings())
        monkeypatch.setattr(cli, "open_analysis_service", fake_open)

        result = runner.invoke(cli.app, ["test-owner", "test-repo", "42"])

        assert result.exit_code == 1
        assert "Failed to fetch pull request" in result.output


class TestUsageErrors:
    @pytest.mark.parametrize(
        "args,message",
        [
            (["test-owner", "test-repo", "abc"], "PR number must be a valid number"),
            (["test-owner", "test-repo", "0"], "positive integer"),
            (["test-owner", "test-repo"], "required"),
            (["test-owner", "test-repo", "42", "deploy"], "unknown action"),
        ],
    )
    def test_invalid_arguments(self, fake_app, args, message) -> None:
        result = runner.invoke(cli.app, args)

        assert result.exit_code == 1
        assert message in result.output
        assert "Usage: pranalyzer" in result.output
        assert fake_app == []

    def test_missing_token_fails_before_fetching(self, monkeypatch) -> None:
        monkeypatch.setattr(cli, "load_settings", lambda: get_test_settings(token=None))

        result = runner.invoke(cli.app, ["test-owner", "test-repo", "42"])

        assert result.exit_code == 1
        assert "GITHUB_TOKEN" in result.output

    def test_unknown_logger_backend_is_reported(self, monkeypatch) -> None:
        monkeypatch.setattr(
            cli, "load_settings", lambda: get_test_settings(backend="bogus")
        )

        result = runner.invoke(cli.app, ["test-owner", "test-repo", "42"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "Error: Unknown logging backend bogus" in result.output


class TestInspection:
    def test_show_rules(self, fake_app) -> None:
        result = runner.invoke(cli.app, ["--show-rules"])

        assert result.exit_code == 0
        assert '"max_line_length": 100' in result.output
        assert '"scan_dependencies": true' in result.output

    def test_invalid_rules_file(self, fake_app, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"style": {}}))

        result = runner.invoke(cli.app, ["--show-rules", "--rules", str(path)])

        assert result.exit_code == 1
        assert "Unknown rule category" in result.output

    def test_version(self) -> None:
        result = runner.invoke(cli.app, ["--version"])

        assert result.exit_code == 0
        assert "pranalyzer version" in result.output
