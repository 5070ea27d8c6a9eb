import re
from typing import Callable, List

# Conservative sanitization: strip tags and control chars.
TAG_RE = re.compile(r"<[^>]+>")
CTRL_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")

BULLET_RE = re.compile(r"^[•\-*]\s*")
LABEL_RE = re.compile(r"^[SWOT]\d+\s*[:\-.]?\s*")

Measure = Callable[[str], float]


def sanitize_text(text: str, max_len: int) -> str:
    if text is None:
        return ""
    t = str(text)
    t = TAG_RE.sub("", t)
    t = CTRL_RE.sub("", t)
    t = t.replace("\u2028", " ").replace("\u2029", " ")
    t = t.strip()
    if len(t) > max_len:
        t = t[:max_len].rstrip() + "…"
    return t


def clean_line(line: str) -> str:
    """Remove one bullet marker and one existing ``S1:``-style label."""
    cleaned = BULLET_RE.sub("", line.strip(), count=1)
    return LABEL_RE.sub("", cleaned, count=1)


def parse_items(text: str, prefix: str) -> List[str]:
    """
    Turn textarea content into labeled items ``"{prefix}{i}: {text}"``.

    Blank lines are dropped, prior bullets/labels are stripped first so that
    parsing already-labeled output is a no-op.
    """
    if not text or not text.strip():
        return []

    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    return [f"{prefix}{i}: {clean_line(line)}" for i, line in enumerate(lines, start=1)]


def wrap_text(text: str, max_width: float, measure: Measure) -> List[str]:
    """
    Greedy word wrap: each line's measured width stays within ``max_width``
    unless a single word alone is wider. Words are never split.
    """
    lines: List[str] = []
    current = ""
    for word in (text or "").split():
        candidate = f"{current} {word}" if current else word
        if measure(candidate) > max_width and current:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)
    return lines


def _shorten_to_fit(line: str, max_width: float, measure: Measure, marker: str) -> str:
    words = line.split()
    while words and measure(" ".join(words) + marker) > max_width:
        words.pop()
    if words:
        return " ".join(words) + marker

    # Not even the first word fits next to the marker: cut characters instead.
    s = line
    while s and measure(s + marker) > max_width:
        s = s[:-1]
    return s.rstrip() + marker


def wrap_text_capped(
    text: str,
    max_width: float,
    measure: Measure,
    max_lines: int = 5,
    marker: str = "...",
) -> List[str]:
    """
    ``wrap_text`` limited to ``max_lines``. On overflow the last kept line is
    the would-be ``max_lines``-th line, shortened so that it still fits once
    ``marker`` is appended.
    """
    lines = wrap_text(text, max_width, measure)
    if len(lines) <= max_lines:
        return lines

    head = lines[: max_lines - 1]
    return head + [_shorten_to_fit(lines[max_lines - 1], max_width, measure, marker)]
