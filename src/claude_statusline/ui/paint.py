"""ANSI painting for status line segments."""
from __future__ import annotations

from rich.color import Color, ColorSystem, ColorType
from rich.style import Style


def paint(color: int, text: str) -> str:
    """Wrap ``text`` in the escape codes for 256-color palette index ``color``.

    Always emits the ``38;5;n`` form, including for indices below 16.
    """
    fixed = Color(f"color({color})", ColorType.EIGHT_BIT, number=color)
    return Style(color=fixed).render(text, color_system=ColorSystem.EIGHT_BIT)
