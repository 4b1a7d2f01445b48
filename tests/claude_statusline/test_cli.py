"""Tests for cli/main.py module."""

import io
import os
from unittest.mock import patch

import pytest

from claude_statusline.cli.main import main
from claude_statusline.config.defaults import TOKENS_ICON


@pytest.fixture
def stdin(monkeypatch):
    """Replace stdin with the given payload; str payloads are sent as UTF-8."""
    def _set(payload, encoding: str = "utf-8"):
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(payload), encoding=encoding))
    return _set


@pytest.fixture
def no_config(tmp_path):
    return ["--config", str(tmp_path / "missing.toml")]


class TestMain:
    """Tests for the claude-statusline entry point."""

    @patch.dict(os.environ, {}, clear=True)
    def test_renders_line(self, stdin, no_config, capsys):
        stdin('{"model": {"display_name": "Sonnet 4.5"}, "cost": {"total_cost_usd": 50.0}}')

        assert main(no_config) == 0

        out = capsys.readouterr().out
        assert out.endswith("\n")
        assert out.count("\n") == 1
        assert "Sonnet 4.5" in out
        assert "$50.00" in out

    @patch.dict(os.environ, {}, clear=True)
    def test_invalid_json(self, stdin, no_config, capsys):
        stdin("{not json")

        assert main(no_config) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error" in captured.err

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_model(self, stdin, no_config, capsys):
        stdin('{"cost": {"total_cost_usd": 1.0}}')

        assert main(no_config) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "model" in captured.err

    @patch.dict(os.environ, {}, clear=True)
    def test_undecodable_bytes(self, stdin, no_config, capsys):
        """Test invalid UTF-8 is reported as invalid JSON, not a traceback."""
        stdin(b'{"model": {"display_name": "\xff"}}')

        assert main(no_config) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "not valid JSON" in captured.err

    @patch.dict(os.environ, {}, clear=True)
    def test_utf8_read_regardless_of_stdin_encoding(self, stdin, no_config, capsys):
        """Test the payload is decoded as UTF-8 even if stdin's codec differs."""
        stdin('{"model": {"display_name": "Opus é"}}', encoding="latin-1")

        assert main(no_config) == 0

        out = capsys.readouterr().out
        assert "Opus é" in out
        assert "Ã©" not in out

    @patch.dict(os.environ, {"CLAUDE_STATUSLINE_TOKENS_ICON": "env_icon"}, clear=True)
    def test_env_beats_config_file(self, stdin, tmp_path, capsys):
        path = tmp_path / "statusline.toml"
        path.write_text('[tokens]\nicon = "toml_icon"\n[cost]\nicon = "C"\n', encoding="utf-8")
        stdin('{"model": {"display_name": "Opus"}}')

        assert main(["--config", str(path)]) == 0

        out = capsys.readouterr().out
        assert "env_icon" in out
        assert "toml_icon" not in out
        assert TOKENS_ICON not in out
        assert "C " in out

    @patch.dict(os.environ, {}, clear=True)
    def test_broken_config_file_ignored(self, stdin, tmp_path, capsys):
        path = tmp_path / "statusline.toml"
        path.write_text("[[[", encoding="utf-8")
        stdin('{"model": {"display_name": "Opus"}}')

        assert main(["--config", str(path)]) == 0
        assert "Opus" in capsys.readouterr().out
