import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

REPO_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_DATA_PATH = REPO_ROOT / "data" / "default-swot.json"


class Settings(BaseModel):
    """Runtime settings. Every field has a default; the environment only overrides."""

    default_data_path: Path = DEFAULT_DATA_PATH
    font_path: Optional[str] = None
    font_bold_path: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            default_data_path=Path(os.getenv("SWOT_DEFAULT_DATA", "").strip() or DEFAULT_DATA_PATH),
            font_path=os.getenv("SWOT_FONT_PATH", "").strip() or None,
            font_bold_path=os.getenv("SWOT_FONT_BOLD_PATH", "").strip() or None,
            log_level=(os.getenv("SWOT_LOG_LEVEL", "INFO").strip() or "INFO").upper(),
        )
