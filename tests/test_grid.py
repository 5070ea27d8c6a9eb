"""Tests for the interactive matrix grid structure."""

from collections import Counter

import pytest

from tows.grid import build_matrix_grid
from tows.layout import CELL_COL_WEIGHT
from tows.schemas import StrategyQuadrant, SWOTSet


@pytest.fixture
def swot() -> SWOTSet:
    return SWOTSet(
        strengths=["S1: Alpha", "S2: Beta"],
        weaknesses=["W1: Slow"],
        opportunities=["O1: Demand", "O2: Tech"],
        threats=["T1: Rivals"],
    )


def test_header_rows(swot):
    grid = build_matrix_grid(swot, {})
    assert grid.cell_at(0, 0).kind == "blank"
    assert grid.cell_at(0, 1).kind == "blank"
    opp = grid.cell_at(0, 2)
    assert opp.text == "Opportunities" and opp.col_span == 2
    assert grid.cell_at(0, 3) is opp
    threats = grid.cell_at(0, 4)
    assert threats.text == "Threats" and threats.col_span == 1

    assert [grid.cell_at(1, c).text for c in range(2, 5)] == ["O1", "O2", "T1"]
    assert grid.cell_at(1, 2).tooltip == "O1: Demand"


def test_section_labels_span_rows(swot):
    grid = build_matrix_grid(swot, {})
    strengths = grid.cell_at(2, 0)
    assert strengths.text == "Strengths" and strengths.row_span == 2
    assert grid.cell_at(3, 0) is strengths
    weaknesses = grid.cell_at(4, 0)
    assert weaknesses.text == "Weaknesses" and weaknesses.row_span == 1
    assert [grid.cell_at(r, 1).text for r in range(2, 5)] == ["S1", "S2", "W1"]
    assert grid.cell_at(4, 1).tooltip == "W1: Slow"


def test_strategy_cells_are_tagged_and_prefilled(swot):
    grid = build_matrix_grid(swot, {"S2-T1": "Lock in contracts", "W1-O1": ""})
    cell = grid.cell_at(3, 4)
    assert cell.key == "S2-T1"
    assert cell.quadrant is StrategyQuadrant.ST
    assert cell.text == "Lock in contracts"
    assert cell.tooltip == "ST Strategy: S2 + T1 (Defensive)"

    wo = grid.cell_at(4, 2)
    assert wo.key == "W1-O1" and wo.text == "" and wo.quadrant.label == "Turnaround"


def test_empty_categories_use_placeholders():
    swot = SWOTSet(strengths=["S1: Alpha", "S2: Beta"])
    grid = build_matrix_grid(swot, {})
    assert grid.layout.n_rows == 2 + 2 + 3
    assert grid.layout.n_cols == 2 + 3 + 3
    assert grid.cell_at(1, 2).tooltip == "Opportunity 1"
    assert grid.cell_at(1, 7).tooltip == "Threat 3"
    assert grid.cell_at(6, 1).tooltip == "Weakness 3"
    assert grid.cell_at(2, 1).tooltip == "S1: Alpha"


def test_key_space_per_quadrant(swot):
    grid = build_matrix_grid(swot, {})
    keys = grid.strategy_keys()
    assert len(keys) == len(set(keys))
    counts = Counter(c.quadrant for c in grid.strategy_cells())
    assert counts[StrategyQuadrant.SO] == 2 * 2
    assert counts[StrategyQuadrant.ST] == 2 * 1
    assert counts[StrategyQuadrant.WO] == 1 * 2
    assert counts[StrategyQuadrant.WT] == 1 * 1


def test_render_plan_merges_spans(swot):
    plan = build_matrix_grid(swot, {}).render_plan()
    assert len(plan) == 5

    header = plan[0]
    assert [s.cell.text for s in header] == ["", "", "Opportunities", "Threats"]
    assert header[2].weight == pytest.approx(2 * CELL_COL_WEIGHT)
    assert header[3].weight == pytest.approx(CELL_COL_WEIGHT)

    second_strength = plan[3]
    assert second_strength[0].cell.text == "Strengths"
    assert second_strength[0].anchor is False
    assert len(second_strength) == 2 + 3
    assert all(slot.anchor for slot in second_strength[1:])


def test_rebuild_is_fresh(swot):
    first = build_matrix_grid(swot, {"S1-O1": "a"})
    second = build_matrix_grid(swot, {})
    assert first.cell_at(2, 2).text == "a"
    assert second.cell_at(2, 2).text == ""


def test_cell_lookup_follows_spans_and_new_cells():
    grid = build_matrix_grid(SWOTSet(strengths=["S1: a"] * 30, opportunities=["O1: b"] * 30), {})
    assert grid.cell_at(31, 0).text == "Strengths"
    assert grid.cell_at(0, 31).text == "Opportunities"
    assert grid.cell_at(31, 31).key == "S30-O30"
    assert grid.cell_at(99, 99) is None
    assert len(grid.render_plan()) == grid.layout.n_rows
