"""
Interactive confrontation matrix structure.

``build_matrix_grid`` produces a plain description of the grid (cells with
positions, spans, tooltips and editable keys). The Streamlit page turns it
into widgets via ``MatrixGrid.render_plan``.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from tows.layout import HEADER_COLS, HEADER_ROWS, MatrixLayout
from tows.schemas import SINGULAR, StrategyQuadrant, SWOTSet, strategy_key

CATEGORY_BY_PREFIX = {
    "S": "strengths",
    "W": "weaknesses",
    "O": "opportunities",
    "T": "threats",
}


@dataclass
class GridCell:
    row: int
    col: int
    text: str = ""
    kind: str = "header"  # "blank" | "header" | "subheader" | "strategy"
    row_span: int = 1
    col_span: int = 1
    tooltip: str = ""
    key: Optional[str] = None
    quadrant: Optional[StrategyQuadrant] = None

    @property
    def editable(self) -> bool:
        return self.kind == "strategy"


@dataclass
class GridSlot:
    """One entry of a rendered row: the anchoring cell or a span continuation."""

    cell: GridCell
    weight: float
    anchor: bool


@dataclass
class MatrixGrid:
    layout: MatrixLayout
    cells: List[GridCell] = field(default_factory=list)
    _index: Dict[Tuple[int, int], GridCell] = field(default_factory=dict, repr=False, compare=False)
    _indexed: int = field(default=0, repr=False, compare=False)

    def _covering(self) -> Dict[Tuple[int, int], GridCell]:
        # Rebuilt only when cells were added since the last lookup.
        if self._indexed != len(self.cells):
            index: Dict[Tuple[int, int], GridCell] = {}
            for c in self.cells:
                for r in range(c.row, c.row + c.row_span):
                    for k in range(c.col, c.col + c.col_span):
                        index.setdefault((r, k), c)
            self._index = index
            self._indexed = len(self.cells)
        return self._index

    def cell_at(self, row: int, col: int) -> Optional[GridCell]:
        """Cell covering ``(row, col)``, following spans."""
        return self._covering().get((row, col))

    def strategy_cells(self) -> List[GridCell]:
        return [c for c in self.cells if c.editable]

    def strategy_keys(self) -> List[str]:
        return [c.key for c in self.strategy_cells()]

    def render_plan(self) -> List[List[GridSlot]]:
        """
        Rows of slots for a column-based renderer. Column spans merge into one
        slot with the summed weight; rows covered by a row span get a
        non-anchor slot so the columns stay aligned.
        """
        weights = self.layout.column_weights()
        plan: List[List[GridSlot]] = []
        for r in range(self.layout.n_rows):
            row: List[GridSlot] = []
            for c in range(self.layout.n_cols):
                cell = self.cell_at(r, c)
                if cell is None or cell.col != c:
                    continue
                w = sum(weights[c : c + cell.col_span])
                row.append(GridSlot(cell=cell, weight=w, anchor=cell.row == r))
            plan.append(row)
        return plan


def _tooltip(swot: SWOTSet, label: str) -> str:
    category = CATEGORY_BY_PREFIX[label[0]]
    index = int(label[1:])
    items = swot.items(category)
    if index <= len(items):
        return items[index - 1]
    return f"{SINGULAR[category]} {index}"


def build_matrix_grid(swot: SWOTSet, strategies: Dict[str, str]) -> MatrixGrid:
    """Build a fresh grid for ``swot`` pre-filled from ``strategies``."""
    lay = MatrixLayout.from_swot(swot)
    grid = MatrixGrid(layout=lay)
    cells = grid.cells

    # Row 0: section headers.
    cells.append(GridCell(0, 0, kind="blank"))
    cells.append(GridCell(0, 1, kind="blank"))
    cells.append(GridCell(0, HEADER_COLS, "Opportunities", col_span=lay.opportunities))
    cells.append(GridCell(0, HEADER_COLS + lay.opportunities, "Threats", col_span=lay.threats))

    # Row 1: O1..On, T1..Tm.
    cells.append(GridCell(1, 0, kind="blank"))
    cells.append(GridCell(1, 1, kind="blank"))
    col_labels = lay.col_labels()
    for i, label in enumerate(col_labels):
        cells.append(GridCell(1, HEADER_COLS + i, label, kind="subheader", tooltip=_tooltip(swot, label)))

    # Body: section label, row sub-header, strategy cells.
    cells.append(GridCell(HEADER_ROWS, 0, "Strengths", row_span=lay.strengths))
    cells.append(GridCell(HEADER_ROWS + lay.strengths, 0, "Weaknesses", row_span=lay.weaknesses))

    for j, row_label in enumerate(lay.row_labels()):
        r = HEADER_ROWS + j
        cells.append(GridCell(r, 1, row_label, kind="subheader", tooltip=_tooltip(swot, row_label)))
        for i, col_label in enumerate(col_labels):
            key = strategy_key(row_label, col_label)
            quadrant = StrategyQuadrant.for_labels(row_label, col_label)
            cells.append(
                GridCell(
                    r,
                    HEADER_COLS + i,
                    strategies.get(key, ""),
                    kind="strategy",
                    tooltip=f"{quadrant.value} Strategy: {row_label} + {col_label} ({quadrant.label})",
                    key=key,
                    quadrant=quadrant,
                )
            )

    return grid
