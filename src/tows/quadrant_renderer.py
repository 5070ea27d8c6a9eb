"""Four-quadrant SWOT diagram drawn with Pillow."""

import logging
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from tows.config import Settings
from tows.drawing import load_font, text_measurer
from tows.schemas import SWOTSet
from tows.utils import Measure, wrap_text

logger = logging.getLogger(__name__)

SWOT_WIDTH = 800
SWOT_HEIGHT = 600

# category -> (title, background, foreground)
SWOT_COLORS = {
    "strengths": ("STRENGTHS", "#2196F3", "#FFFFFF"),
    "weaknesses": ("WEAKNESSES", "#FF9800", "#FFFFFF"),
    "opportunities": ("OPPORTUNITIES", "#4CAF50", "#FFFFFF"),
    "threats": ("THREATS", "#673AB7", "#FFFFFF"),
}

# Quadrant order: top-left, top-right, bottom-left, bottom-right.
QUADRANT_ORDER = ("strengths", "weaknesses", "opportunities", "threats")

TITLE_SIZE = 36
LETTER_SIZE = 80
ITEM_SIZE = 16
TITLE_BASELINE = 50
LETTER_BASELINE = 130
ITEMS_BASELINE = 160
ITEM_PITCH = 25
WRAP_LINE_HEIGHT = 20
TEXT_INSET = 20
ITEMS_RESERVED = 170
BOTTOM_MARGIN = 20
CROSS_WIDTH = 4


def items_that_fit(count: int, quadrant_height: float) -> int:
    return max(0, min(count, int((quadrant_height - ITEMS_RESERVED) // ITEM_PITCH)))


def layout_item_lines(
    items: List[str],
    max_width: float,
    measure: Measure,
    top: float,
    height: float,
) -> List[Tuple[float, str]]:
    """
    Baselines and text of the wrapped item lines of one quadrant. Items past
    ``items_that_fit`` are dropped; lines at or below the bottom margin are
    skipped.
    """
    bottom = top + height - BOTTOM_MARGIN
    cursor = top + ITEMS_BASELINE
    placed: List[Tuple[float, str]] = []
    for item in items[: items_that_fit(len(items), height)]:
        for line in wrap_text(item, max_width, measure):
            if cursor < bottom:
                placed.append((cursor, line))
            cursor += WRAP_LINE_HEIGHT
        cursor += ITEM_PITCH - WRAP_LINE_HEIGHT
    return placed


def _draw_quadrant(
    draw: ImageDraw.ImageDraw,
    x: float,
    y: float,
    width: float,
    height: float,
    category: str,
    items: List[str],
    settings: Settings,
) -> None:
    title, bg, fg = SWOT_COLORS[category]
    draw.rectangle([x, y, x + width, y + height], fill=bg)

    title_font = load_font(TITLE_SIZE, bold=True, override=settings.font_bold_path)
    letter_font = load_font(LETTER_SIZE, bold=True, override=settings.font_bold_path)
    item_font = load_font(ITEM_SIZE, override=settings.font_path)

    center_x = x + width / 2
    draw.text((center_x, y + TITLE_BASELINE), title, fill=fg, font=title_font, anchor="ms")
    draw.text((center_x, y + LETTER_BASELINE), title[0], fill=fg, font=letter_font, anchor="ms")

    measure = text_measurer(draw, item_font)
    for baseline, line in layout_item_lines(items, width - 2 * TEXT_INSET, measure, y, height):
        draw.text((x + TEXT_INSET, baseline), line, fill=fg, font=item_font, anchor="ls")


def draw_swot(swot: SWOTSet, settings: Optional[Settings] = None) -> Image.Image:
    """Paint the 800x600 SWOT diagram for ``swot``."""
    settings = settings or Settings()
    image = Image.new("RGB", (SWOT_WIDTH, SWOT_HEIGHT), "white")
    draw = ImageDraw.Draw(image)

    half_w = SWOT_WIDTH / 2
    half_h = SWOT_HEIGHT / 2
    origins = [(0, 0), (half_w, 0), (0, half_h), (half_w, half_h)]

    for category, (ox, oy) in zip(QUADRANT_ORDER, origins):
        _draw_quadrant(draw, ox, oy, half_w, half_h, category, swot.items(category), settings)

    draw.line([(half_w, 0), (half_w, SWOT_HEIGHT)], fill="#FFFFFF", width=CROSS_WIDTH)
    draw.line([(0, half_h), (SWOT_WIDTH, half_h)], fill="#FFFFFF", width=CROSS_WIDTH)

    logger.debug("Rendered SWOT diagram with counts %s", swot.counts())
    return image
