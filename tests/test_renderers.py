"""Tests for the SWOT diagram and the matrix raster."""

import pytest

from tows.matrix_renderer import MATRIX_HEIGHT, MATRIX_WIDTH, draw_matrix
from tows.quadrant_renderer import (
    SWOT_HEIGHT,
    SWOT_WIDTH,
    draw_swot,
    items_that_fit,
    layout_item_lines,
)
from tows.schemas import SWOTSet


def rgb(hex_color: str):
    h = hex_color.lstrip("#")
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


@pytest.fixture
def many_items() -> SWOTSet:
    items = [f"S{i}: A fairly long item text that needs wrapping number {i}" for i in range(1, 30)]
    return SWOTSet(strengths=items, weaknesses=items[:2], opportunities=items[:7], threats=items[:9])


class TestQuadrantRenderer:
    def test_fixed_size(self, many_items):
        assert draw_swot(many_items).size == (SWOT_WIDTH, SWOT_HEIGHT)
        assert draw_swot(SWOTSet(threats=["T1: x"])).size == (800, 600)

    def test_quadrant_colors_and_cross(self):
        img = draw_swot(SWOTSet(strengths=["S1: a"]))
        assert img.getpixel((5, 295)) == rgb("#2196F3")
        assert img.getpixel((795, 5)) == rgb("#FF9800")
        assert img.getpixel((5, 595)) == rgb("#4CAF50")
        assert img.getpixel((795, 595)) == rgb("#673AB7")
        assert img.getpixel((400, 250)) == (255, 255, 255)
        assert img.getpixel((250, 300)) == (255, 255, 255)

    def test_item_cap(self):
        assert items_that_fit(100, 300) == 5
        assert items_that_fit(2, 300) == 2
        assert items_that_fit(3, 100) == 0

    def test_items_beyond_cap_are_not_drawn(self):
        short = [f"S{i}: item {i}" for i in range(1, 6)]
        longer = short + [f"S{i}: item {i}" for i in range(6, 10)]
        five = draw_swot(SWOTSet(strengths=short))
        nine = draw_swot(SWOTSet(strengths=longer))
        assert five.tobytes() == nine.tobytes()

    def test_long_item_stops_above_bottom_margin(self):
        item = "S1: " + " ".join(["wrapping"] * 80)
        img = draw_swot(SWOTSet(strengths=[item]))
        bg = rgb("#2196F3")
        # Top-left quadrant: bottom margin starts at 300 - 20; the cross starts near 298.
        for y in range(280, 296):
            for x in range(0, 395):
                assert img.getpixel((x, y)) == bg, (x, y)

    def test_wrapped_lines_push_next_item_down(self):
        placed = layout_item_lines(["S1: aaaa bbbb", "S2: c"], 9, len, top=0, height=300)
        assert placed == [(160, "S1: aaaa"), (180, "bbbb"), (205, "S2: c")]

    def test_lines_at_bottom_margin_are_skipped(self):
        placed = layout_item_lines(["w " * 10], 1, len, top=300, height=300)
        assert [b for b, _ in placed] == [460, 480, 500, 520, 540, 560]


class TestMatrixRenderer:
    def test_fixed_size(self, many_items):
        img = draw_matrix(many_items, {"S1-O1": "text " * 200})
        assert img.size == (MATRIX_WIDTH, MATRIX_HEIGHT)
        assert draw_matrix(SWOTSet(), {}).size == (1000, 800)

    def test_quadrant_cell_colors(self):
        # Defaults to 3x3x3x3: 125px columns, 80px rows, body starts at y=180.
        img = draw_matrix(SWOTSet(), {})
        assert img.getpixel((5, 5)) == (255, 255, 255)
        assert img.getpixel((300, 250)) == rgb("#ffeb3b")  # SO
        assert img.getpixel((690, 250)) == rgb("#2196f3")  # ST
        assert img.getpixel((300, 490)) == rgb("#8bc34a")  # WO
        assert img.getpixel((690, 490)) == rgb("#f44336")  # WT
        assert img.getpixel((25, 200)) == rgb("#4a90e2")  # Strengths band
        assert img.getpixel((205, 65)) == rgb("#4a90e2")  # Opportunities band

    def test_strategy_text_is_drawn(self):
        blank = draw_matrix(SWOTSet(), {})
        filled = draw_matrix(SWOTSet(), {"S1-O1": "Grow with partners in new markets"})
        box = (200, 180, 325, 260)
        assert blank.crop(box).tobytes() != filled.crop(box).tobytes()
        # Other cells are untouched.
        other = (325, 180, 450, 260)
        assert blank.crop(other).tobytes() == filled.crop(other).tobytes()

    def test_orphaned_keys_are_not_drawn(self):
        blank = draw_matrix(SWOTSet(), {})
        orphan = draw_matrix(SWOTSet(), {"S9-O9": "hidden"})
        assert blank.tobytes() == orphan.tobytes()
