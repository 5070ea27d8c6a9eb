"""
Matrix layout shared by the interactive grid and the raster export.

Both views are driven by one ``MatrixLayout`` (counts, labels, grid
topology) so that they cannot drift apart. ``compute_geometry`` turns the
layout into pixel positions for a fixed-size canvas.
"""

from dataclasses import dataclass
from typing import List, Tuple

from tows.schemas import PREFIXES, SWOTSet

# Sizing fallback for an empty category: placeholder rows/cols only.
DEFAULT_COUNT = 3

HEADER_ROWS = 2
HEADER_COLS = 2

# Relative widths of the grid columns (section label, sub-header, cell).
LABEL_COL_WEIGHT = 1.5
SUBHEADER_COL_WEIGHT = 1.0
CELL_COL_WEIGHT = 2.0

# Raster frame constants, in pixels.
TITLE_BASELINE = 30
SECTION_X = 20
SECTION_WIDTH = 80
LABEL_X = 100
LABEL_WIDTH = 100
GRID_X = 200
HEADER_Y = 60
HEADER_HEIGHT = 40
SUBHEADER_Y = HEADER_Y + HEADER_HEIGHT
RIGHT_MARGIN = 50
MIN_ROW_HEIGHT = 80
VERTICAL_RESERVED = 180


@dataclass(frozen=True)
class MatrixLayout:
    strengths: int
    weaknesses: int
    opportunities: int
    threats: int

    @classmethod
    def from_swot(cls, swot: SWOTSet) -> "MatrixLayout":
        counts = swot.counts()
        return cls(**{c: (n or DEFAULT_COUNT) for c, n in counts.items()})

    @property
    def n_rows(self) -> int:
        return HEADER_ROWS + self.strengths + self.weaknesses

    @property
    def n_cols(self) -> int:
        return HEADER_COLS + self.opportunities + self.threats

    @property
    def body_rows(self) -> int:
        return self.strengths + self.weaknesses

    @property
    def body_cols(self) -> int:
        return self.opportunities + self.threats

    def row_labels(self) -> List[str]:
        s = [f"{PREFIXES['strengths']}{i}" for i in range(1, self.strengths + 1)]
        w = [f"{PREFIXES['weaknesses']}{i}" for i in range(1, self.weaknesses + 1)]
        return s + w

    def col_labels(self) -> List[str]:
        o = [f"{PREFIXES['opportunities']}{i}" for i in range(1, self.opportunities + 1)]
        t = [f"{PREFIXES['threats']}{i}" for i in range(1, self.threats + 1)]
        return o + t

    def column_weights(self) -> List[float]:
        return [LABEL_COL_WEIGHT, SUBHEADER_COL_WEIGHT] + [CELL_COL_WEIGHT] * self.body_cols

    def contains(self, row_label: str, col_label: str) -> bool:
        return row_label in self.row_labels() and col_label in self.col_labels()


@dataclass(frozen=True)
class MatrixGeometry:
    layout: MatrixLayout
    width: int
    height: int
    cell_width: float
    cell_height: float

    @property
    def body_y(self) -> float:
        return SUBHEADER_Y + self.cell_height

    @property
    def opportunities_x(self) -> float:
        return GRID_X

    @property
    def threats_x(self) -> float:
        return GRID_X + self.layout.opportunities * self.cell_width

    @property
    def grid_right(self) -> float:
        return GRID_X + self.layout.body_cols * self.cell_width

    @property
    def weaknesses_y(self) -> float:
        return self.body_y + self.layout.strengths * self.cell_height

    def col_x(self, index: int) -> float:
        """Left edge of body column ``index`` (0-based over O then T)."""
        return GRID_X + index * self.cell_width

    def row_y(self, index: int) -> float:
        """Top edge of body row ``index`` (0-based over S then W)."""
        return self.body_y + index * self.cell_height

    def cell_box(self, row: int, col: int) -> Tuple[float, float, float, float]:
        x, y = self.col_x(col), self.row_y(row)
        return x, y, x + self.cell_width, y + self.cell_height


def compute_geometry(layout: MatrixLayout, width: int, height: int) -> MatrixGeometry:
    cell_width = (width - GRID_X - RIGHT_MARGIN) / layout.body_cols
    cell_height = max(MIN_ROW_HEIGHT, (height - VERTICAL_RESERVED) / (layout.body_rows + HEADER_ROWS))
    return MatrixGeometry(
        layout=layout,
        width=width,
        height=height,
        cell_width=cell_width,
        cell_height=cell_height,
    )
