"""Path resolution for the status line config file."""

from pathlib import Path

from claude_statusline.config.defaults import CONFIG_DIRNAME, CONFIG_FILENAME


def get_claude_dir() -> Path:
    """Return the host's settings directory, ``~/.claude``."""
    return Path.home() / CONFIG_DIRNAME


def get_config_path() -> Path:
    """Return the default config file location, ``~/.claude/statusline.toml``.

    Resolved on every call so a changed ``HOME`` is picked up.
    """
    return get_claude_dir() / CONFIG_FILENAME
