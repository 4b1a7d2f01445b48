#!/usr/bin/env python
"""
Status line segments - one renderer per session field.

Segments:
- ModelSegment: model display name
- PercentageSegment: context window bar, colored by usage
- TokensSegment: total input/output tokens
- CostSegment: session cost in USD
- DurationSegment: total API time
"""
from __future__ import annotations

from typing import Optional

from claude_statusline.config.defaults import (
    CONTEXT_BAR_EMPTY,
    CONTEXT_BAR_FILLED,
    CONTEXT_BAR_WIDTH,
    CONTEXT_COLOR_HIGH,
    CONTEXT_COLOR_LOW,
    CONTEXT_COLOR_MEDIUM,
    CONTEXT_THRESHOLD_HIGH,
    CONTEXT_THRESHOLD_MEDIUM,
)
from claude_statusline.session import Amount, Duration, Model, Percentage, Tokens
from claude_statusline.ui.components.base import BaseSegment
from claude_statusline.ui.config import StatusLineConfig
from claude_statusline.utils.duration import format_duration


def context_color(percent: int) -> int:
    """Palette index for a context usage level."""
    if percent > CONTEXT_THRESHOLD_HIGH:
        return CONTEXT_COLOR_HIGH
    if percent > CONTEXT_THRESHOLD_MEDIUM:
        return CONTEXT_COLOR_MEDIUM
    return CONTEXT_COLOR_LOW


def context_bar(percent: int) -> str:
    """Fixed-width usage bar; always ``CONTEXT_BAR_WIDTH`` cells."""
    filled = percent * CONTEXT_BAR_WIDTH // 100
    filled = max(0, min(CONTEXT_BAR_WIDTH, filled))
    return CONTEXT_BAR_FILLED * filled + CONTEXT_BAR_EMPTY * (CONTEXT_BAR_WIDTH - filled)


class ModelSegment(BaseSegment):
    field_name = "model"

    def __init__(self, model: Model, config: Optional[StatusLineConfig] = None):
        super().__init__(config)
        self._model = model

    def text(self) -> str:
        return self._model.display_name


class PercentageSegment(BaseSegment):
    """Context window usage. Color follows the thresholds, not the config."""

    field_name = "percentage"

    def __init__(self, percentage: Percentage, config: Optional[StatusLineConfig] = None):
        super().__init__(config)
        self._percentage = percentage

    def color(self) -> int:
        return context_color(self._percentage.percent)

    def text(self) -> str:
        percent = self._percentage.percent
        return f"{context_bar(percent)} {percent}%"


class TokensSegment(BaseSegment):
    field_name = "tokens"

    def __init__(self, tokens: Tokens, config: Optional[StatusLineConfig] = None):
        super().__init__(config)
        self._tokens = tokens

    def text(self) -> str:
        return f"{self._tokens.total_input_tokens}↑ {self._tokens.total_output_tokens}↓"


class CostSegment(BaseSegment):
    field_name = "cost"

    def __init__(self, amount: Amount, config: Optional[StatusLineConfig] = None):
        super().__init__(config)
        self._amount = amount

    def text(self) -> str:
        return f"${self._amount.total_cost_usd:.2f}"


class DurationSegment(BaseSegment):
    field_name = "duration"

    def __init__(self, duration: Duration, config: Optional[StatusLineConfig] = None):
        super().__init__(config)
        self._duration = duration

    def text(self) -> str:
        return format_duration(self._duration.total_api_duration_ms)
