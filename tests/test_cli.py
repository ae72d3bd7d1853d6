"""Tests for the command line interface."""
from typer.testing import CliRunner

from asciichat.cli import app

runner = CliRunner()


class TestAsk:
    """Tests for the ask command."""

    def test_offline_reply_prints_placeholder_art(self, clean_env, tmp_path):
        """Test that ask without a key prints the placeholder art."""
        clean_env.chdir(tmp_path)

        result = runner.invoke(app, ["ask", "draw a cat"])

        assert result.exit_code == 0
        assert "OPENAI_API_KEY not set" in result.output
        assert "MISSING" in result.output
        assert "Ascii art" in result.output

    def test_rejects_non_positive_max_tokens(self, clean_env, tmp_path):
        """Test that a max-tokens value below one is rejected."""
        clean_env.chdir(tmp_path)
        result = runner.invoke(app, ["ask", "hi", "--max-tokens", "0"])
        assert result.exit_code != 0


class TestChat:
    """Tests for the chat command options."""

    def test_unknown_log_level_exits(self, clean_env, tmp_path):
        """Test that an unknown log level exits with code 1."""
        clean_env.chdir(tmp_path)
        result = runner.invoke(app, ["chat", "--log-level", "loud"])
        assert result.exit_code == 1

    def test_no_args_shows_help(self):
        """Test that running with no command shows help."""
        result = runner.invoke(app, [])
        assert "ask" in result.output
        assert "chat" in result.output
