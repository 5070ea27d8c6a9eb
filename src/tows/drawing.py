import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Sequence

from PIL import ImageDraw, ImageFont

from tows.utils import Measure

logger = logging.getLogger(__name__)

REGULAR_FONTS = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/Library/Fonts/Arial.ttf",
    "C:/Windows/Fonts/arial.ttf",
)
BOLD_FONTS = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
    "/Library/Fonts/Arial Bold.ttf",
    "C:/Windows/Fonts/arialbd.ttf",
)


def _first_existing(paths: Sequence[Optional[str]]) -> Optional[str]:
    for p in paths:
        if p and Path(p).exists():
            return str(p)
    return None


@lru_cache(maxsize=64)
def load_font(size: int, bold: bool = False, override: Optional[str] = None):
    """
    Load a TrueType font at ``size`` px.

    ``override`` (from settings) wins, then common system fonts, then
    Pillow's bundled default font.
    """
    candidates = [override] + list(BOLD_FONTS if bold else REGULAR_FONTS) + list(REGULAR_FONTS)
    chosen = _first_existing(candidates)
    if chosen:
        try:
            return ImageFont.truetype(chosen, size=size)
        except OSError:
            logger.warning("Could not open font %s, falling back to default", chosen)

    logger.warning("No TrueType font found; using Pillow default font (size %s)", size)
    return ImageFont.load_default(size=size)


def text_measurer(draw: ImageDraw.ImageDraw, font) -> Measure:
    def measure(text: str) -> float:
        return draw.textlength(text, font=font)

    return measure
