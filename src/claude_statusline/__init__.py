"""claude-statusline: a colorized status line for Claude Code sessions."""
