"""Status line UI layer — configuration, painting, segments and the formatter."""
from __future__ import annotations

# Configuration
from claude_statusline.ui.config import (
    FieldConfig,
    StatusLineConfig,
    env_var_name,
    load_config,
)

# Painting
from claude_statusline.ui.paint import paint

# Components
from claude_statusline.ui.components import (
    BaseSegment,
    CostSegment,
    DurationSegment,
    ModelSegment,
    PercentageSegment,
    TokensSegment,
)

# Formatter
from claude_statusline.ui.statusline import StatusLine, render

__all__ = [
    # Config
    "FieldConfig",
    "StatusLineConfig",
    "env_var_name",
    "load_config",
    # Painting
    "paint",
    # Components
    "BaseSegment",
    "CostSegment",
    "DurationSegment",
    "ModelSegment",
    "PercentageSegment",
    "TokensSegment",
    # Formatter
    "StatusLine",
    "render",
]
