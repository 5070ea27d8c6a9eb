"""Raster rendering of the TOWS confrontation matrix for export."""

import logging
from typing import Dict, Optional

from PIL import Image, ImageDraw

from tows import layout as L
from tows.config import Settings
from tows.drawing import load_font, text_measurer
from tows.layout import MatrixGeometry, MatrixLayout, compute_geometry
from tows.schemas import StrategyQuadrant, SWOTSet, strategy_key
from tows.utils import wrap_text_capped

logger = logging.getLogger(__name__)

MATRIX_WIDTH = 1000
MATRIX_HEIGHT = 800
MATRIX_TITLE = "Confrontation Matrix (TOWS)"

BAND_COLOR = "#4a90e2"
BORDER_COLOR = "#333333"
TITLE_COLOR = "#333333"

SUBHEADER_COLORS = {
    "S": "#2196F3",
    "W": "#FF9800",
    "O": "#4CAF50",
    "T": "#f44336",
}

# quadrant -> (fill, text)
STRATEGY_COLORS = {
    StrategyQuadrant.SO: ("#ffeb3b", "#333333"),
    StrategyQuadrant.ST: ("#2196f3", "#FFFFFF"),
    StrategyQuadrant.WO: ("#8bc34a", "#FFFFFF"),
    StrategyQuadrant.WT: ("#f44336", "#FFFFFF"),
}

CELL_TEXT_SIZE = 9
CELL_LINE_HEIGHT = 11
CELL_PADDING = 8
CELL_TEXT_BASELINE = 20
CELL_MAX_LINES = 5


def _box(draw: ImageDraw.ImageDraw, x0: float, y0: float, x1: float, y1: float, fill: str) -> None:
    draw.rectangle([x0, y0, x1, y1], fill=fill, outline=BORDER_COLOR, width=1)


def _centered(draw, box, text, font, fill="#FFFFFF") -> None:
    x0, y0, x1, y1 = box
    draw.text(((x0 + x1) / 2, (y0 + y1) / 2), text, fill=fill, font=font, anchor="mm")


def _draw_headers(draw: ImageDraw.ImageDraw, geo: MatrixGeometry, settings: Settings) -> None:
    lay = geo.layout
    band_font = load_font(16, bold=True, override=settings.font_bold_path)
    label_font = load_font(14, bold=True, override=settings.font_bold_path)

    bands = [
        ("Opportunities", geo.opportunities_x, geo.threats_x),
        ("Threats", geo.threats_x, geo.grid_right),
    ]
    for text, x0, x1 in bands:
        box = (x0, L.HEADER_Y, x1, L.HEADER_Y + L.HEADER_HEIGHT)
        draw.rectangle(box, fill=BAND_COLOR)
        _centered(draw, box, text, band_font)

    for i, label in enumerate(lay.col_labels()):
        box = (geo.col_x(i), L.SUBHEADER_Y, geo.col_x(i) + geo.cell_width, L.SUBHEADER_Y + geo.cell_height)
        _box(draw, *box, fill=SUBHEADER_COLORS[label[0]])
        _centered(draw, box, label, label_font)

    sections = [
        ("Strengths", geo.body_y, geo.weaknesses_y),
        ("Weaknesses", geo.weaknesses_y, geo.weaknesses_y + lay.weaknesses * geo.cell_height),
    ]
    for text, y0, y1 in sections:
        box = (L.SECTION_X, y0, L.SECTION_X + L.SECTION_WIDTH, y1)
        draw.rectangle(box, fill=BAND_COLOR)
        _centered(draw, box, text, label_font)

    for j, label in enumerate(lay.row_labels()):
        box = (L.LABEL_X, geo.row_y(j), L.LABEL_X + L.LABEL_WIDTH, geo.row_y(j) + geo.cell_height)
        _box(draw, *box, fill=SUBHEADER_COLORS[label[0]])
        _centered(draw, box, label, label_font)


def _draw_cells(
    draw: ImageDraw.ImageDraw,
    geo: MatrixGeometry,
    strategies: Dict[str, str],
    settings: Settings,
) -> None:
    text_font = load_font(CELL_TEXT_SIZE, override=settings.font_path)
    measure = text_measurer(draw, text_font)
    lay = geo.layout

    for j, row_label in enumerate(lay.row_labels()):
        for i, col_label in enumerate(lay.col_labels()):
            fill, text_color = STRATEGY_COLORS[StrategyQuadrant.for_labels(row_label, col_label)]
            x0, y0, x1, y1 = geo.cell_box(j, i)
            _box(draw, x0, y0, x1, y1, fill=fill)

            text = strategies.get(strategy_key(row_label, col_label))
            if not text:
                continue
            lines = wrap_text_capped(
                text, geo.cell_width - 2 * CELL_PADDING, measure, max_lines=CELL_MAX_LINES
            )
            for n, line in enumerate(lines):
                draw.text(
                    (x0 + CELL_PADDING, y0 + CELL_TEXT_BASELINE + n * CELL_LINE_HEIGHT),
                    line,
                    fill=text_color,
                    font=text_font,
                    anchor="ls",
                )

    # Rule between the strength and weakness sections.
    draw.line(
        [(L.SECTION_X, geo.weaknesses_y), (geo.grid_right, geo.weaknesses_y)],
        fill=BORDER_COLOR,
        width=1,
    )


def draw_matrix(
    swot: SWOTSet,
    strategies: Dict[str, str],
    settings: Optional[Settings] = None,
) -> Image.Image:
    """Paint the 1000x800 confrontation matrix from the current state."""
    settings = settings or Settings()
    image = Image.new("RGB", (MATRIX_WIDTH, MATRIX_HEIGHT), "white")
    draw = ImageDraw.Draw(image)

    geo = compute_geometry(MatrixLayout.from_swot(swot), MATRIX_WIDTH, MATRIX_HEIGHT)

    title_font = load_font(24, bold=True, override=settings.font_bold_path)
    draw.text((MATRIX_WIDTH / 2, L.TITLE_BASELINE), MATRIX_TITLE, fill=TITLE_COLOR, font=title_font, anchor="ms")

    _draw_headers(draw, geo, settings)
    _draw_cells(draw, geo, strategies, settings)

    logger.debug(
        "Rendered matrix %sx%s cells, %s strategies",
        geo.layout.body_rows,
        geo.layout.body_cols,
        len(strategies),
    )
    return image
