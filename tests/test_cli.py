import json

import pytest
from click.testing import CliRunner

from site_audit import FetchError, ValidationError, cli as cli_module
from site_audit.checks import PageContext
from site_audit.auditor import build_report
from conftest import build_page


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def sample_report():
    page = PageContext.from_html("https://acme.example/", build_page(), headers={"server": "nginx"}, elapsed_ms=88)
    return build_report(page, status_code=200)


@pytest.fixture
def fake_analyze(monkeypatch, sample_report):
    calls = []

    def _analyze(url, **kwargs):
        calls.append((url, kwargs))
        return sample_report

    monkeypatch.setattr(cli_module, "analyze", _analyze)
    return calls


def test_json_output(runner, fake_analyze, sample_report):
    result = runner.invoke(cli_module.cli, ["scan", "acme.example", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["url"] == "https://acme.example/"
    assert data["overallScore"] == sample_report.overall_score
    assert data["details"]["seo"]["checks"][0]["title"] == "Title Tag"


def test_timeout_option_forwarded(runner, fake_analyze):
    runner.invoke(cli_module.cli, ["scan", "acme.example", "--json", "--timeout", "3"])
    assert fake_analyze[0][1]["timeout"] == 3.0


def test_table_output(runner, fake_analyze):
    result = runner.invoke(cli_module.cli, ["scan", "acme.example"])

    assert result.exit_code == 0
    assert "Overall Score" in result.output
    assert "Security" in result.output
    assert "Issues Found" in result.output
    assert "Structured Data" in result.output


def test_verbose_lists_every_check(runner, fake_analyze):
    result = runner.invoke(cli_module.cli, ["scan", "acme.example", "--verbose"])

    assert result.exit_code == 0
    assert "Robots Meta Tag" in result.output
    assert "application/ld+json" in result.output


def test_validation_error_exit_code(runner, monkeypatch):
    def _reject(url, **kwargs):
        raise ValidationError("Analysis of local networks is not supported.", url=url)

    monkeypatch.setattr(cli_module, "analyze", _reject)
    result = runner.invoke(cli_module.cli, ["scan", "localhost:3000"])

    assert result.exit_code == 2
    assert "local networks" in result.output


def test_fetch_error_exit_code(runner, monkeypatch):
    def _fail(url, **kwargs):
        raise FetchError(url, "Timeout after 15.0s")

    monkeypatch.setattr(cli_module, "analyze", _fail)
    result = runner.invoke(cli_module.cli, ["scan", "slow.example"])

    assert result.exit_code == 1
    assert "Timeout after 15.0s" in result.output


def test_no_command_prints_help(runner):
    result = runner.invoke(cli_module.cli, [])

    assert result.exit_code == 0
    assert "scan" in result.output


def test_main_inserts_scan_for_bare_url(monkeypatch, fake_analyze):
    monkeypatch.setattr("sys.argv", ["site-audit", "acme.example", "--json"])

    with pytest.raises(SystemExit) as exc_info:
        cli_module.main()

    assert exc_info.value.code == 0
    assert fake_analyze[0][0] == "acme.example"


def test_log_level_is_case_insensitive(runner, fake_analyze):
    result = runner.invoke(cli_module.cli, ["scan", "acme.example", "--json", "--log-level", "debug"])
    assert result.exit_code == 0


def test_unknown_log_level_rejected(runner, fake_analyze):
    result = runner.invoke(cli_module.cli, ["scan", "acme.example", "--log-level", "loud"])

    assert result.exit_code == 2
    assert "Invalid value" in result.output
    assert fake_analyze == []


def test_main_leaves_explicit_scan_alone(monkeypatch, fake_analyze):
    monkeypatch.setattr("sys.argv", ["site-audit", "scan", "acme.example", "--json"])

    with pytest.raises(SystemExit) as exc_info:
        cli_module.main()

    assert exc_info.value.code == 0
    assert fake_analyze[0][0] == "acme.example"
