import html
import logging

import streamlit as st

from tows.config import Settings
from tows.errors import EmptyInputError, LoadFailure
from tows.export import (
    MARKDOWN_FILENAME,
    MATRIX_FILENAME,
    PDF_FILENAME,
    SWOT_FILENAME,
    swot_to_md,
    to_png_bytes,
)
from tows.grid import GridCell
from tows.matrix_renderer import draw_matrix
from tows.quadrant_renderer import draw_swot
from tows.report import build_pdf_report
from tows.schemas import CATEGORIES
from tows.state import AppState
from tows.utils import sanitize_text

SETTINGS = Settings.from_env()
logging.basicConfig(level=SETTINGS.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("swot_app")

st.set_page_config(page_title="SWOT & TOWS Builder", layout="wide")

# Minimal CSS for the confrontation matrix cells
st.markdown(
    """
    <style>
      .matrix-cell {
        border-radius: 6px;
        padding: 6px 8px;
        margin-bottom: 4px;
        font-weight: 700;
        text-align: center;
        color: #ffffff;
      }
      .main-header { background: #4a90e2; }
      .sub-header { cursor: help; }
      .sub-s { background: #2196F3; }
      .sub-w { background: #FF9800; }
      .sub-o { background: #4CAF50; }
      .sub-t { background: #f44336; }
      .strategy-tag {
        border-radius: 4px;
        padding: 1px 6px;
        font-size: 0.75rem;
        font-weight: 600;
        display: inline-block;
        cursor: help;
      }
      .strategy-so { background: #ffeb3b; color: #333333; }
      .strategy-st { background: #2196f3; color: #ffffff; }
      .strategy-wo { background: #8bc34a; color: #ffffff; }
      .strategy-wt { background: #f44336; color: #ffffff; }
    </style>
    """,
    unsafe_allow_html=True,
)

# ----------------------------
# Session state initialization
# ----------------------------
DEFAULT_STATE = {
    "error": "",
    "notice": "",
    "confirm_clear": False,
    "analysis_title": "",
    "input_strengths": "• Broad product range\n• International network",
    "input_weaknesses": "• High cost base\n• Complex structure",
    "input_opportunities": "• Growing demand for sustainable materials\n• Technological innovations",
    "input_threats": "• Strong international competition\n• Stricter European regulation",
}

for k, v in DEFAULT_STATE.items():
    if k not in st.session_state:
        st.session_state[k] = v

if "app" not in st.session_state:
    st.session_state.app = AppState()

app: AppState = st.session_state.app


def _input_texts() -> dict:
    return {c: st.session_state.get(f"input_{c}", "") for c in CATEGORIES}


def _sync_inputs_from_state() -> None:
    for c in CATEGORIES:
        st.session_state[f"input_{c}"] = app.inputs[c]


# ----------------------------
# Callbacks (run before the page body on the next rerun)
# ----------------------------
def on_generate() -> None:
    st.session_state.error = ""
    st.session_state.notice = ""
    try:
        app.generate(_input_texts())
    except EmptyInputError as e:
        logger.info("Generate rejected: all categories empty")
        st.session_state.error = str(e)


def on_load_example() -> None:
    st.session_state.error = ""
    st.session_state.notice = ""
    try:
        app.load_file(SETTINGS.default_data_path)
    except LoadFailure as e:
        logger.warning("Example data not loaded from %s", SETTINGS.default_data_path)
        st.session_state.error = str(e)
        return
    _sync_inputs_from_state()
    st.session_state.notice = (
        "Default SWOT data and strategies loaded. "
        "The confrontation matrix is pre-filled with example strategies."
    )


def on_load_upload() -> None:
    st.session_state.error = ""
    st.session_state.notice = ""
    uploaded = st.session_state.get("upload")
    if uploaded is None:
        st.session_state.error = "Choose a JSON file first."
        return
    try:
        app.load_bytes(uploaded.getvalue(), source=uploaded.name)
    except LoadFailure as e:
        logger.warning("Uploaded file %s not loaded", uploaded.name)
        st.session_state.error = str(e)
        return
    _sync_inputs_from_state()
    st.session_state.notice = f"Loaded {uploaded.name}."


def on_build_matrix() -> None:
    app.rebuild_matrix()
    logger.info("Confrontation matrix rebuilt")
    st.session_state.notice = (
        "Confrontation matrix generated. Fill in strategic combinations by typing in the cells."
    )


def on_cell_change(key: str, widget_key: str) -> None:
    app.set_strategy(key, st.session_state[widget_key])


def on_clear_confirmed() -> None:
    app.clear_strategies(confirmed=True)
    st.session_state.confirm_clear = False


def on_clear_cancelled() -> None:
    app.clear_strategies(confirmed=False)
    logger.info("Clearing matrix strategies cancelled")
    st.session_state.confirm_clear = False


# -------------
# Sidebar
# -------------
with st.sidebar:
    st.header("Data")

    st.text_input("Analysis title (optional)", key="analysis_title")

    st.button("Load example data", use_container_width=True, on_click=on_load_example)

    st.file_uploader(
        "Initial-state file (JSON)",
        type=["json"],
        key="upload",
        help="Same structure as default-swot.json: four lists and optional matrixStrategies.",
    )
    st.button("Load uploaded file", use_container_width=True, on_click=on_load_upload)

title = sanitize_text(st.session_state.analysis_title, max_len=120)

# -------------
# Main UI
# -------------
st.title("SWOT & TOWS Builder")
st.write(
    "Enter one item per line in each category. Click **Generate SWOT** to draw the diagram, "
    "then fill in the confrontation matrix."
)

r1c1, r1c2 = st.columns(2)
with r1c1:
    st.text_area("Strengths", key="input_strengths", height=140)
with r1c2:
    st.text_area("Weaknesses", key="input_weaknesses", height=140)

r2c1, r2c2 = st.columns(2)
with r2c1:
    st.text_area("Opportunities", key="input_opportunities", height=140)
with r2c2:
    st.text_area("Threats", key="input_threats", height=140)

st.button("Generate SWOT", type="primary", use_container_width=True, on_click=on_generate)

# ----------------------------
# Display errors
# ----------------------------
if st.session_state.error:
    st.error(st.session_state.error)
elif st.session_state.notice:
    st.success(st.session_state.notice)

if app.swot is None:
    st.stop()

# ----------------------------
# SWOT diagram
# ----------------------------
swot_png = to_png_bytes(draw_swot(app.swot, SETTINGS))
st.subheader("SWOT diagram")
st.image(swot_png)
st.download_button(
    label="Download SWOT image",
    data=swot_png,
    file_name=SWOT_FILENAME,
    mime="image/png",
)

# ----------------------------
# Confrontation matrix
# ----------------------------
st.subheader("Confrontation Matrix (TOWS)")

m1, m2 = st.columns(2)
with m1:
    st.button("Generate Confrontation Matrix", use_container_width=True, on_click=on_build_matrix)
with m2:
    if st.button("Clear Matrix", use_container_width=True):
        st.session_state.confirm_clear = True

if st.session_state.confirm_clear:
    st.warning("Are you sure you want to clear all matrix data? This cannot be undone.")
    k1, k2 = st.columns(2)
    with k1:
        st.button("Yes, clear all", type="primary", use_container_width=True, on_click=on_clear_confirmed)
    with k2:
        st.button("Cancel", use_container_width=True, on_click=on_clear_cancelled)


def render_cell(cell: GridCell) -> None:
    if cell.kind == "blank":
        return
    if cell.kind == "header":
        st.markdown(
            f'<div class="matrix-cell main-header">{html.escape(cell.text)}</div>',
            unsafe_allow_html=True,
        )
        return
    if cell.kind == "subheader":
        st.markdown(
            f'<div class="matrix-cell sub-header sub-{cell.text[0].lower()}" '
            f'title="{html.escape(cell.tooltip)}">{html.escape(cell.text)}</div>',
            unsafe_allow_html=True,
        )
        return

    widget_key = f"cell_{app.grid_version}_{cell.key}"
    st.markdown(
        f'<span class="strategy-tag strategy-{cell.quadrant.value.lower()}" '
        f'title="{html.escape(cell.tooltip)}">{cell.quadrant.value} · {cell.key}</span>',
        unsafe_allow_html=True,
    )
    st.text_area(
        cell.key,
        value=cell.text,
        key=widget_key,
        placeholder="Add strategy...",
        label_visibility="collapsed",
        height=80,
        on_change=on_cell_change,
        args=(cell.key, widget_key),
    )


grid = app.grid()
for row in grid.render_plan():
    columns = st.columns([slot.weight for slot in row])
    for slot, col in zip(row, columns):
        if slot.anchor:
            with col:
                render_cell(slot.cell)

orphaned = app.orphaned_keys()
if orphaned:
    st.caption(
        f"{len(orphaned)} saved strategies are hidden because their items no longer exist: "
        + ", ".join(orphaned)
    )

# ----------------------------
# Export / download
# ----------------------------
st.subheader("Download")

matrix_png = to_png_bytes(draw_matrix(app.swot, app.strategies, SETTINGS)) if app.matrix_generated else b""

d1, d2, d3 = st.columns(3)
with d1:
    if matrix_png:
        st.download_button(
            label="Download Matrix image",
            data=matrix_png,
            file_name=MATRIX_FILENAME,
            mime="image/png",
            use_container_width=True,
        )
    else:
        st.caption("Generate the confrontation matrix to enable the matrix image.")
with d2:
    st.download_button(
        label="Download Markdown",
        data=swot_to_md(app.swot, app.strategies, title=title),
        file_name=MARKDOWN_FILENAME,
        mime="text/markdown",
        use_container_width=True,
    )
with d3:
    st.download_button(
        label="Download PDF report",
        data=build_pdf_report(title, swot_png, matrix_png),
        file_name=PDF_FILENAME,
        mime="application/pdf",
        use_container_width=True,
    )
