"""Tests for overlay geometry."""

from ghostfield.layout import CellMeasurer, compute_overlay_rect
from ghostfield.models import BorderStyle, Font, Rect, Size

BOUNDS = Rect(0, 0, 200, 40)


class TestComputeOverlayRect:
    """Tests for compute_overlay_rect with a fixed-width measurer."""

    def test_overlay_follows_typed_text(self, measurer):
        rect = compute_overlay_rect(BOUNDS, "g", "mail.com", Font(), measurer)
        assert rect == Rect(10, 10, 80, 20)

    def test_vertically_centred(self, measurer):
        rect = compute_overlay_rect(Rect(0, 0, 200, 60), "g", "mail.com", Font(), measurer)
        assert rect.y == 20

    def test_bounds_origin_is_respected(self, measurer):
        rect = compute_overlay_rect(Rect(5, 4, 200, 40), "g", "mail.com", Font(), measurer)
        assert rect == Rect(15, 14, 80, 20)

    def test_rounded_border_offsets(self, measurer):
        rect = compute_overlay_rect(
            BOUNDS, "g", "mail.com", Font(), measurer, BorderStyle.ROUNDED
        )
        assert rect == Rect(16, 9.5, 80, 20)

    def test_none_border_offsets(self, measurer):
        rect = compute_overlay_rect(BOUNDS, "g", "mail.com", Font(), measurer, BorderStyle.NONE)
        assert rect == Rect(11, 10, 80, 20)

    def test_collapses_when_overflowing(self, measurer):
        rect = compute_overlay_rect(BOUNDS, "a" * 12, "b" * 10, Font(), measurer)
        assert rect.width == 0
        assert rect.x == BOUNDS.right

    def test_collapses_when_exactly_full(self, measurer):
        rect = compute_overlay_rect(BOUNDS, "a" * 10, "b" * 10, Font(), measurer)
        assert rect == Rect(200, 10, 0, 20)

    def test_fits_just_below_width(self, measurer):
        rect = compute_overlay_rect(BOUNDS, "a" * 10, "b" * 9, Font(), measurer)
        assert rect == Rect(100, 10, 90, 20)

    def test_offset_can_push_into_collapse(self, measurer):
        bounds = Rect(0, 0, 195, 40)
        plain = compute_overlay_rect(bounds, "a" * 10, "b" * 9, Font(), measurer)
        assert plain == Rect(100, 10, 90, 20)
        rounded = compute_overlay_rect(
            bounds, "a" * 10, "b" * 9, Font(), measurer, BorderStyle.ROUNDED
        )
        assert rounded.width == 0
        assert rounded.x == 195

    def test_empty_bounds_returns_none(self, measurer):
        assert compute_overlay_rect(Rect(0, 0, 0, 0), "g", "mail.com", Font(), measurer) is None

    def test_empty_remainder(self, measurer):
        rect = compute_overlay_rect(BOUNDS, "gmail.com", "", Font(), measurer)
        assert rect == Rect(90, 20, 0, 0)


class TestCellMeasurer:
    """Tests for the terminal cell measurer."""

    def test_ascii(self):
        assert CellMeasurer().measure("gmail", Size(80, 1), Font()) == Size(5, 1)

    def test_empty(self):
        assert CellMeasurer().measure("", Size(80, 1), Font()) == Size(0, 0)

    def test_wide_characters(self):
        assert CellMeasurer().measure("日本", Size(80, 1), Font()) == Size(4, 1)

    def test_wraps_when_constrained(self):
        assert CellMeasurer().measure("abcdefghij", Size(4, 1), Font()) == Size(4, 3)

    def test_font_metrics(self):
        font = Font(cell_width=8, line_height=16)
        assert CellMeasurer().measure("abc", Size(100, 16), font) == Size(24, 16)

    def test_terminal_field_collapses(self):
        bounds = Rect(0, 0, 10, 1)
        rect = compute_overlay_rect(bounds, "john@gm", "ail.com", Font(), CellMeasurer())
        assert rect.width == 0
        assert rect.x == 10

    def test_terminal_field_fits(self):
        bounds = Rect(0, 0, 40, 1)
        rect = compute_overlay_rect(bounds, "john@gm", "ail.com", Font(), CellMeasurer())
        assert rect == Rect(7, 0, 7, 1)
