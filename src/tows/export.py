from io import BytesIO
from typing import Dict, List

from PIL import Image

from tows.layout import MatrixLayout
from tows.schemas import StrategyQuadrant, SWOTSet, strategy_key

SWOT_FILENAME = "swot-analysis.png"
MATRIX_FILENAME = "confrontation-matrix.png"
MARKDOWN_FILENAME = "swot-analysis.md"
PDF_FILENAME = "swot-report.pdf"


def to_png_bytes(image: Image.Image) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def swot_to_md(swot: SWOTSet, strategies: Dict[str, str], title: str = "") -> str:
    """Markdown summary: the four lists, then reachable strategies per quadrant."""

    def section(name: str, items: List[str], level: str = "##") -> str:
        lines = [f"{level} {name}"]
        for x in items:
            lines.append(f"- {x}")
        return "\n".join(lines)

    parts = [
        f"# SWOT{' – ' + title if title else ''}",
        section("Strengths", swot.strengths),
        section("Weaknesses", swot.weaknesses),
        section("Opportunities", swot.opportunities),
        section("Threats", swot.threats),
    ]

    lay = MatrixLayout.from_swot(swot)
    by_quadrant: Dict[StrategyQuadrant, List[str]] = {q: [] for q in StrategyQuadrant}
    for row_label in lay.row_labels():
        for col_label in lay.col_labels():
            text = (strategies.get(strategy_key(row_label, col_label)) or "").strip()
            if text:
                q = StrategyQuadrant.for_labels(row_label, col_label)
                by_quadrant[q].append(f"{row_label} + {col_label}: {text}")

    if any(by_quadrant.values()):
        parts.append("## Confrontation matrix (TOWS)")
        for q, entries in by_quadrant.items():
            if entries:
                parts.append(section(f"{q.value} – {q.label}", entries, level="###"))

    return "\n\n".join(parts).strip() + "\n"
