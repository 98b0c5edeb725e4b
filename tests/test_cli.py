"""Tests for CLI commands."""

import json
from unittest.mock import patch

from click.testing import CliRunner


def test_version_command():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["version"])

    assert result.exit_code == 0
    assert "tgpp-guidance v2.0.0" in result.output


def test_ask_prints_analysis():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["ask", "What is SUCI and how is it different from IMSI?"])

    assert result.exit_code == 0
    assert "Query Analysis:" in result.output
    assert "Intent: learning" in result.output
    assert "Domain: authentication" in result.output
    assert "Concepts: SUCI, IMSI" in result.output
    assert "Next Steps:" in result.output
    assert "Related Topics:" in result.output


def test_ask_json():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["ask", "Compare TS 24.301 vs TS 24.501", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["analysis"]["intent"] == "comparison"
    assert data["guidance"]["sections"][0]["title"] == "Comparison Approach"


def test_ask_with_level_and_domain():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["ask", "Find specs", "-l", "expert", "-d", "charging", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["analysis"]["user_level"] == "expert"
    assert data["analysis"]["domain"] == "charging"


def test_ask_rejects_unknown_level():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["ask", "Find specs", "--level", "guru"])

    assert result.exit_code != 0


def test_ask_without_sections():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["ask", ""])

    assert result.exit_code == 0
    assert "No specific guidance sections" in result.output


def test_spec_command():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["spec", "24.501"])

    assert result.exit_code == 0
    assert "TS 24.501" in result.output
    assert "Working group: CT1" in result.output
    assert "Implementation Notes:" in result.output


def test_spec_command_not_found():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["spec", "TS 99.999"])

    assert result.exit_code == 0
    assert "Specification not found: TS 99.999" in result.output


def test_spec_command_invalid_id():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["spec", "bogus"])

    assert result.exit_code == 0
    assert "Invalid specification ID" in result.output


def test_related_command():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["related", "TS 24.501"])

    assert result.exit_code == 0
    assert "Related to TS 24.501" in result.output
    assert "33.501" in result.output


def test_related_command_empty():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["related", "TS 99.999"])

    assert result.exit_code == 0
    assert "No related specifications for TS 99.999" in result.output


def test_patterns_command():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["patterns"])

    assert result.exit_code == 0
    assert "Research Patterns:" in result.output
    assert "Protocol Analysis" in result.output


def test_serve_command_starts_server():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    with patch("tgpp_guidance.server.main") as run_server:
        result = runner.invoke(main, ["serve"])

    assert result.exit_code == 0
    run_server.assert_called_once()


def test_search_command_json():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["search", "5g", "-s", "33", "-s", "38", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [entry["id"] for entry in data["results"]] == ["TS 33.501", "TS 38.331"]


def test_search_command_table():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["search", "charging", "--release", "17", "-w", "sa5"])

    assert result.exit_code == 0
    assert "TS 32.290" in result.output
    assert "Also related:" in result.output


def test_search_command_no_matches():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["search", "charging", "-r", "Rel-16"])

    assert result.exit_code == 0
    assert "No specifications match 'charging'" in result.output


def test_search_command_invalid_filter():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["search", "charging", "--series", "3x"])

    assert result.exit_code == 0
    assert "Invalid search" in result.output


def test_verbose_flag_enables_debug_logging():
    from tgpp_guidance.cli import main

    runner = CliRunner()
    with patch("tgpp_guidance.utils.logging.configure_logging") as configure:
        result = runner.invoke(main, ["--verbose", "version"])

    assert result.exit_code == 0
    configure.assert_called_once_with("DEBUG")
