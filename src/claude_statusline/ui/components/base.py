#!/usr/bin/env python
"""
Base segment - foundation for every piece of the status line.

A segment renders as ``"{icon} {painted text}"``. Subclasses name the
config field they read and implement ``text()``; the color comes from the
config unless ``color()`` is overridden.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from claude_statusline.ui.config import StatusLineConfig
from claude_statusline.ui.paint import paint


class BaseSegment(ABC):
    """
    Abstract base class for status line segments.

    All segments must implement:
    - text() - The string to paint

    Optional:
    - color() - Palette index, when it isn't the configured one
    """

    field_name: str = ""

    def __init__(self, config: Optional[StatusLineConfig] = None):
        self._config = config or StatusLineConfig()

    @property
    def icon(self) -> str:
        _, icon = self._config.resolve(self.field_name)
        return icon

    def color(self) -> int:
        color, _ = self._config.resolve(self.field_name)
        return color

    @abstractmethod
    def text(self) -> str:
        """Unpainted segment text. Must be implemented by subclasses."""
        pass

    def render(self) -> str:
        """Render the icon followed by the painted text."""
        return f"{self.icon} {paint(self.color(), self.text())}"

    def __str__(self) -> str:
        return self.render()
