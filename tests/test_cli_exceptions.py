"""Tests for CLI exception handling."""
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from rubocop_checks.cli import main


def test_keyboard_interrupt_exits_with_130():
    """Test that KeyboardInterrupt exits with code 130 (SIGINT)."""
    runner = CliRunner()

    with patch("rubocop_checks.cli.run_lint_check") as mock_run:
        mock_run.side_effect = KeyboardInterrupt()

        result = runner.invoke(main, ["--project-root", "."])

        assert result.exit_code == 130
        assert "cancelled" in result.output.lower()


def test_value_error_shows_error_message():
    """Test that ValueError shows helpful error message."""
    runner = CliRunner()

    with patch("rubocop_checks.cli.run_lint_check") as mock_run:
        mock_run.side_effect = ValueError("GitHub token is required")

        result = runner.invoke(main, ["--project-root", "."])

        assert result.exit_code == 2
        assert "GitHub token is required" in result.output


def test_invalid_config_file_exits_with_2():
    """Test that a config file failing validation is a usage error."""
    runner = CliRunner()

    with runner.isolated_filesystem():
        Path(".rubocop-checks.json").write_text('{"exclude": [""]}')

        with patch("rubocop_checks.cli.run_lint_check") as mock_run:
            result = runner.invoke(main, ["--project-root", "."])

            assert result.exit_code == 2
            assert "exclude" in result.output
            mock_run.assert_not_called()


def test_generic_exception_shows_helpful_message():
    """Test that unexpected exceptions show helpful message."""
    runner = CliRunner()

    with patch("rubocop_checks.cli.run_lint_check") as mock_run:
        mock_run.side_effect = RuntimeError("Unexpected internal error")

        result = runner.invoke(main, ["--project-root", ".", "--verbose"])

        assert result.exit_code == 2
        assert "Unexpected internal error" in result.output
