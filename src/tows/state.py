import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from tows.errors import EmptyInputError, LoadFailure
from tows.grid import MatrixGrid, build_matrix_grid
from tows.layout import MatrixLayout
from tows.schemas import (
    CATEGORIES,
    PREFIXES,
    InitialStateDocument,
    SWOTSet,
    parse_strategy_key,
)
from tows.utils import parse_items

logger = logging.getLogger(__name__)


def parse_swot(texts: Dict[str, str]) -> SWOTSet:
    return SWOTSet(**{c: parse_items(texts.get(c, ""), PREFIXES[c]) for c in CATEGORIES})


class AppState:
    """
    Everything one session works on: the raw inputs, the current SWOTSet and
    the strategy mapping shared by the editable grid and the matrix export.
    """

    def __init__(self) -> None:
        self.inputs: Dict[str, str] = {c: "" for c in CATEGORIES}
        self.swot: Optional[SWOTSet] = None
        self.strategies: Dict[str, str] = {}
        # Bumped whenever the grid must be rebuilt from the mapping.
        self.grid_version = 0
        self.matrix_generated = False

    # ----------------------------
    # SWOT
    # ----------------------------
    def generate(self, texts: Dict[str, str]) -> SWOTSet:
        """Parse all four inputs; raise EmptyInputError without touching state."""
        swot = parse_swot(texts)
        if swot.is_empty():
            raise EmptyInputError()

        self.inputs = {c: texts.get(c, "") for c in CATEGORIES}
        self.swot = swot
        self.grid_version += 1
        logger.debug("Generated SWOT with counts %s", swot.counts())
        return swot

    # ----------------------------
    # Matrix
    # ----------------------------
    def layout(self) -> MatrixLayout:
        return MatrixLayout.from_swot(self.swot or SWOTSet())

    def grid(self) -> MatrixGrid:
        return build_matrix_grid(self.swot or SWOTSet(), self.strategies)

    def rebuild_matrix(self) -> MatrixGrid:
        self.grid_version += 1
        self.matrix_generated = True
        return self.grid()

    def set_strategy(self, key: str, value: str) -> None:
        if parse_strategy_key(key) is None:
            raise ValueError(f"Not a strategy cell key: {key!r}")
        self.strategies[key] = value

    def get_strategy(self, key: str) -> str:
        return self.strategies.get(key, "")

    def clear_strategies(self, confirmed: bool) -> bool:
        """Wipe all strategy text. Does nothing unless ``confirmed``."""
        if not confirmed:
            return False
        count = len(self.strategies)
        self.strategies = {}
        self.grid_version += 1
        logger.info("Cleared %s matrix strategies", count)
        return True

    def orphaned_keys(self) -> List[str]:
        """Keys with text that the current grid no longer shows."""
        lay = self.layout()
        return sorted(
            k for k, v in self.strategies.items()
            if v and not lay.contains(*k.split("-", 1))
        )

    # ----------------------------
    # Initial state
    # ----------------------------
    def load_document(self, doc: InitialStateDocument) -> SWOTSet:
        texts = {c: doc.as_text(c) for c in CATEGORIES}
        swot = parse_swot(texts)
        if swot.is_empty():
            raise LoadFailure("The example data does not contain any SWOT items.")

        self.inputs = texts
        self.swot = swot
        if doc.matrix_strategies is not None:
            self.strategies = dict(doc.matrix_strategies)
        self.grid_version += 1
        logger.info(
            "Loaded initial state: counts %s, %s strategies",
            swot.counts(),
            len(self.strategies),
        )
        return swot

    def load_bytes(self, data: Union[bytes, str], source: str = "upload") -> SWOTSet:
        try:
            doc = InitialStateDocument.model_validate(json.loads(data))
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            logger.exception("Invalid initial-state document from %s", source)
            raise LoadFailure(f"Could not load data from {source}: {e}") from e
        return self.load_document(doc)

    def load_file(self, path: Union[str, Path]) -> SWOTSet:
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.exception("Could not read initial-state file %s", path)
            raise LoadFailure(
                f"Could not load default data. Please check that {path.name} exists."
            ) from e
        return self.load_bytes(data, source=path.name)
