"""Default configuration values for the status line.

This module centralizes the palette indices, icons, thresholds and naming
constants used across the package. Modules should import these constants
instead of hard-coding values.

Usage:
    from claude_statusline.config.defaults import (
        CONTEXT_BAR_WIDTH,
        ENV_PREFIX,
        SEGMENT_SEPARATOR,
    )
"""

from __future__ import annotations

# =============================================================================
# Palette (xterm 256-color indices)
# =============================================================================

BRIGHT_GREEN = 46
BRIGHT_YELLOW = 226
DODGER_BLUE = 39
LAVENDER = 141
MAGENTA_PINK = 213
ORANGE = 208
PINK_RED = 203


# =============================================================================
# Icons
# =============================================================================

CONTEXT_ICON = "🧠"
COST_ICON = "💰"
DURATION_ICON = "⏱️"
MODEL_ICON = "🤖"
TOKENS_ICON = "🪙"


# =============================================================================
# Context Window Bar
# =============================================================================

CONTEXT_BAR_WIDTH = 10
CONTEXT_BAR_FILLED = "▓"
CONTEXT_BAR_EMPTY = "░"

# Auto-compaction seems to kick in around 83%.
CONTEXT_THRESHOLD_HIGH = 80
CONTEXT_THRESHOLD_MEDIUM = 70

CONTEXT_COLOR_HIGH = PINK_RED
CONTEXT_COLOR_MEDIUM = BRIGHT_YELLOW
CONTEXT_COLOR_LOW = BRIGHT_GREEN


# =============================================================================
# Layout
# =============================================================================

SEGMENT_SEPARATOR = " | "
ZERO_DURATION = "0s"


# =============================================================================
# Configuration Sources
# =============================================================================

ENV_PREFIX = "CLAUDE_STATUSLINE"
CONFIG_DIRNAME = ".claude"
CONFIG_FILENAME = "statusline.toml"

FIELD_NAMES = ("cost", "duration", "model", "percentage", "tokens")
FIELD_ATTRIBUTES = ("color", "icon")

# (default color, default icon) per field. Percentage color is computed
# from CONTEXT_THRESHOLD_* instead.
FIELD_DEFAULTS: dict[str, tuple[int | None, str]] = {
    "cost": (LAVENDER, COST_ICON),
    "duration": (DODGER_BLUE, DURATION_ICON),
    "model": (ORANGE, MODEL_ICON),
    "percentage": (None, CONTEXT_ICON),
    "tokens": (MAGENTA_PINK, TOKENS_ICON),
}
