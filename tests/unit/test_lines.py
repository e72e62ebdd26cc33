"""Unit tests for line splitting, ranges and numbered output."""

from repotools.text import (
    format_line_output,
    get_base_name,
    get_extension,
    get_line_range,
    split_lines,
)


class TestSplitLines:
    """Test split_lines contract."""

    def test_normalizes_mixed_line_endings(self):
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_keeps_trailing_empty_line(self):
        assert split_lines("a\nb\n") == ["a", "b", ""]

    def test_round_trips_with_join(self):
        text = "one\n\ntwo\n"
        assert "\n".join(split_lines(text)) == text

    def test_empty_text_is_one_empty_line(self):
        assert split_lines("") == [""]


class TestGetLineRange:
    """Test get_line_range clamping."""

    lines = ["a", "b", "c"]

    def test_clamps_out_of_range_bounds(self):
        assert get_line_range(self.lines, 0, 10) == ["a", "b", "c"]

    def test_end_never_before_start(self):
        assert get_line_range(self.lines, 5, 2) == ["c"]
        assert get_line_range(self.lines, 2, 1) == ["b"]

    def test_end_defaults_to_last_line(self):
        assert get_line_range(self.lines, 2) == ["b", "c"]

    def test_inclusive_range(self):
        assert get_line_range(self.lines, 1, 2) == ["a", "b"]

    def test_empty_lines_never_raise(self):
        assert get_line_range([], 3, 7) == []


class TestFormatLineOutput:
    """Test format_line_output numbering."""

    def test_pads_numbers_to_widest(self):
        out = format_line_output(["x"] * 10, 1).split("\n")
        assert out[0] == " 1: x"
        assert out[-1] == "10: x"

    def test_starts_at_given_line(self):
        assert format_line_output(["a", "b"], 99) == " 99: a\n100: b"

    def test_reconstructs_text_line_for_line(self):
        text = "first\r\n\n  indented\nlast"
        formatted = format_line_output(split_lines(text), 1).split("\n")
        stripped = [line.split(": ", 1)[1] for line in formatted]
        assert stripped == ["first", "", "  indented", "last"]


def test_get_extension():
    assert get_extension("src/App.TSX") == "tsx"
    assert get_extension(".gitignore") == ""
    assert get_extension("Makefile") == ""


def test_get_base_name():
    assert get_base_name("src\\lib\\tools.ts") == "tools.ts"
    assert get_base_name("README.md") == "README.md"
