"""Status line segment components."""
from __future__ import annotations

from claude_statusline.ui.components.base import BaseSegment
from claude_statusline.ui.components.segments import (
    CostSegment,
    DurationSegment,
    ModelSegment,
    PercentageSegment,
    TokensSegment,
    context_bar,
    context_color,
)

__all__ = [
    "BaseSegment",
    "CostSegment",
    "DurationSegment",
    "ModelSegment",
    "PercentageSegment",
    "TokensSegment",
    "context_bar",
    "context_color",
]
