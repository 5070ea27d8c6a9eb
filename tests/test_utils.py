"""Tests for the list parser and the text wrappers."""

import pytest

from tows.utils import parse_items, sanitize_text, wrap_text, wrap_text_capped


def measure(text: str) -> float:
    return len(text)


class TestParseItems:
    def test_strips_bullets_and_labels(self):
        text = "• Alpha\n\n- Beta\n*Gamma\n  S7: Delta  "
        assert parse_items(text, "S") == ["S1: Alpha", "S2: Beta", "S3: Gamma", "S4: Delta"]

    @pytest.mark.parametrize(
        "line",
        ["W12-Beta", "O1. Beta", "T3 : Beta", "S2 Beta", "- S1: Beta"],
    )
    def test_label_variants(self, line):
        assert parse_items(line, "O") == ["O1: Beta"]

    def test_words_starting_with_category_letter_are_kept(self):
        assert parse_items("Strong brand", "S") == ["S1: Strong brand"]

    def test_blank_lines_are_dropped_without_placeholders(self):
        assert parse_items("\nA\n\n\nB\n", "T") == ["T1: A", "T2: B"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n  \n", None])
    def test_empty_input_gives_empty_list(self, text):
        assert parse_items(text, "W") == []

    def test_idempotent(self):
        first = parse_items("• Alpha\n- W3: Beta\nGamma  delta", "W")
        second = parse_items("\n".join(first), "W")
        assert second == first

    def test_relabels_with_new_prefix(self):
        assert parse_items("S1: Alpha\nS2: Beta", "O") == ["O1: Alpha", "O2: Beta"]


class TestWrapText:
    def test_lines_fit_width(self):
        text = "the quick brown fox jumps over the lazy dog"
        lines = wrap_text(text, 10, measure)
        assert all(len(line) <= 10 for line in lines)
        assert " ".join(lines) == text

    def test_reconstructs_normalized_text(self):
        text = "  spaced   out\twords  here "
        lines = wrap_text(text, 8, measure)
        assert " ".join(lines) == "spaced out words here"

    def test_long_word_is_never_split(self):
        lines = wrap_text("a supercalifragilistic b", 5, measure)
        assert lines == ["a", "supercalifragilistic", "b"]

    def test_greedy_fill(self):
        assert wrap_text("aa bb cc dd", 5, measure) == ["aa bb", "cc dd"]

    def test_empty(self):
        assert wrap_text("", 10, measure) == []


class TestWrapTextCapped:
    WORDS = "aaaa bbbb cccc dddd eeee ffff gggg hhhh iiii jjjj kkkk llll"

    def test_short_text_unchanged(self):
        assert wrap_text_capped("aaaa bbbb cccc", 10, measure) == ["aaaa bbbb", "cccc"]

    def test_caps_at_five_lines_using_fifth_line(self):
        lines = wrap_text_capped(self.WORDS, 10, measure)
        assert len(lines) == 5
        assert lines[:4] == ["aaaa bbbb", "cccc dddd", "eeee ffff", "gggg hhhh"]
        assert lines[4] == "iiii..."

    def test_marker_line_fits_when_possible(self):
        lines = wrap_text_capped(self.WORDS, 14, measure, max_lines=2)
        assert lines[0] == "aaaa bbbb cccc"
        assert lines[1].endswith("...")
        assert len(lines[1]) <= 14

    def test_overlong_word_is_cut_by_characters(self):
        text = "a b c verylongwordhere rest"
        lines = wrap_text_capped(text, 6, measure, max_lines=2)
        assert lines == ["a b c", "ver..."]


def test_sanitize_text_strips_tags_and_limits_length():
    assert sanitize_text("<b>Plan</b>\x07 A", max_len=50) == "Plan A"
    assert sanitize_text("abcdef", max_len=3) == "abc…"
    assert sanitize_text(None, max_len=3) == ""
