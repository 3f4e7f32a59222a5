"""Geometry of the ghost-text overlay.

The overlay sits right after the caret, vertically centred in the field's
text area.  Text measurement goes through a :class:`TextMeasurer` so the
maths can run against a terminal, a pixel toolkit or a test stub alike.
"""

from __future__ import annotations

import math
from typing import Protocol

from rich.cells import cell_len

from ghostfield.models import BorderStyle, Font, Rect, Size


class TextMeasurer(Protocol):
    """Measures the bounding box of a string drawn in a font."""

    def measure(self, text: str, constraint: Size, font: Font) -> Size:
        """Return the size of *text* laid out within *constraint*."""
        ...


class CellMeasurer:
    """Terminal text measurer counting character cells.

    Wide glyphs (CJK, emoji) occupy two cells.  Text wider than the
    constraint wraps by character onto further lines.
    """

    def measure(self, text: str, constraint: Size, font: Font) -> Size:
        if not text:
            return Size(0, 0)
        width = cell_len(text) * font.cell_width
        if constraint.width <= 0:
            return Size(0, font.line_height)
        if width <= constraint.width:
            return Size(width, font.line_height)
        lines = math.ceil(width / constraint.width)
        return Size(constraint.width, lines * font.line_height)


def compute_overlay_rect(
    bounds: Rect,
    typed_text: str,
    remainder: str,
    font: Font,
    measurer: TextMeasurer,
    border_style: BorderStyle = BorderStyle.PLAIN,
) -> Rect | None:
    """Compute where the suggestion remainder is drawn.

    Args:
        bounds: Text area of the field.
        typed_text: Text already in the field.
        remainder: Culled suggestion text to overlay.
        font: Font of the field.
        measurer: Text measurement capability.
        border_style: Border style of the field, for offset correction.

    Returns:
        The overlay rectangle, pinned at the right edge with zero width when
        it would overflow the field, or None when the field has no geometry
        yet.
    """
    if bounds.is_empty:
        return None

    typed = measurer.measure(typed_text, bounds.size, font)
    leftover = Size(max(bounds.width - typed.width, 0), bounds.height)
    suggestion = measurer.measure(remainder, leftover, font)

    caret_x = math.ceil(bounds.x + typed.width)
    x = caret_x + border_style.x_offset
    height = suggestion.height
    y = bounds.y + (bounds.height - height) / 2 - border_style.y_offset

    if x + suggestion.width >= bounds.right:
        return Rect(bounds.right, y, 0, height)
    return Rect(x, y, suggestion.width, height)
