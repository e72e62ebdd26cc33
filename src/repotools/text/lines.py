"""Line handling for snapshot text: splitting, ranges, numbered output."""

import re

_LINE_BREAK = re.compile(r"\r\n?")


def split_lines(text: str) -> list[str]:
    """Split text into lines, handling \\r\\n, lone \\r and \\n endings.

    Empty segments are kept, so a trailing newline yields a trailing ""
    and "\\n".join() of the result gives back the normalized text.
    """
    return _LINE_BREAK.sub("\n", text).split("\n")


def get_line_range(lines: list[str], start_line: int, end_line: int | None = None) -> list[str]:
    """Get a range of lines (1-indexed, inclusive).

    Out-of-range values are clamped rather than rejected: start to
    [1, total], end to [start, total]. Never raises.

    Args:
        lines: All lines of the file
        start_line: First line to return (1-indexed)
        end_line: Last line to return (inclusive). None means end of file.

    Returns:
        The selected lines
    """
    total = len(lines)
    start = max(1, min(start_line, total))
    if end_line is None:
        end = total
    else:
        end = max(start, min(end_line, total))
    return lines[start - 1:end]


def format_line_output(lines: list[str], start_line: int = 1) -> str:
    """Format lines with right-aligned line numbers as "{num}: {content}"."""
    end_line = start_line + len(lines) - 1
    width = len(str(end_line))
    return "\n".join(
        f"{str(start_line + idx).rjust(width)}: {line}"
        for idx, line in enumerate(lines)
    )


def get_extension(filename: str) -> str:
    """Lower-cased extension without the dot; "" for dotfiles or no extension."""
    last_dot = filename.rfind(".")
    if last_dot <= 0:
        return ""
    return filename[last_dot + 1:].lower()


def get_base_name(filepath: str) -> str:
    """Last path segment, treating "\\" and "/" alike."""
    return filepath.replace("\\", "/").rsplit("/", 1)[-1]
