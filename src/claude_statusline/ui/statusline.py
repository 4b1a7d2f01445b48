#!/usr/bin/env python
"""
Status line formatter - composes the segments into one line.

Order is fixed: model | percentage | tokens | cost | duration. Every
segment is always present; a missing payload section renders its
defaults rather than being dropped.
"""
from __future__ import annotations

from typing import Optional, Union

from claude_statusline.config.defaults import SEGMENT_SEPARATOR
from claude_statusline.session import SessionSnapshot, parse_session
from claude_statusline.ui.components.base import BaseSegment
from claude_statusline.ui.components.segments import (
    CostSegment,
    DurationSegment,
    ModelSegment,
    PercentageSegment,
    TokensSegment,
)
from claude_statusline.ui.config import StatusLineConfig


class StatusLine:
    """The rendered status line for a single session snapshot."""

    def __init__(self, snapshot: SessionSnapshot, config: Optional[StatusLineConfig] = None):
        config = config or StatusLineConfig()
        self._segments: list[BaseSegment] = [
            ModelSegment(snapshot.model, config),
            PercentageSegment(snapshot.percentage, config),
            TokensSegment(snapshot.tokens, config),
            CostSegment(snapshot.cost, config),
            DurationSegment(snapshot.duration, config),
        ]

    @property
    def segments(self) -> list[BaseSegment]:
        return list(self._segments)

    def render(self) -> str:
        return SEGMENT_SEPARATOR.join(segment.render() for segment in self._segments)

    def __str__(self) -> str:
        return self.render()


def render(payload: Union[bytes, str], config: Optional[StatusLineConfig] = None) -> str:
    """
    Parse a session payload and render its status line.

    Raises:
        SessionParseError: If the payload is not valid JSON or has no model name
    """
    return StatusLine(parse_session(payload), config).render()
