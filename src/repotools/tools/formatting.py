"""Formatting shared by the listing, grep and search tools."""

import re
from typing import Iterable

from ..models import RepositoryFile
from ..text.lines import split_lines

TRUNCATION_MARKER = "... (truncated)"

_NEWLINES = re.compile(r"[\r\n]+")


def truncate_line(line: str, max_length: int = 500) -> str:
    """Cut a line to max_length characters, appending the truncation marker."""
    if len(line) <= max_length:
        return line
    return line[:max_length] + TRUNCATION_MARKER


def collapse_newlines(text: str) -> str:
    """Replace each run of line breaks with a single space."""
    return _NEWLINES.sub(" ", text)


def count_lines(file: RepositoryFile) -> int:
    return len(split_lines(file.text)) if file.text else 0


def describe_file(file: RepositoryFile) -> str:
    """One listing line: "{name} ({lines}L, {chars}C)"."""
    text = file.text or ""
    return f"{file.name} ({count_lines(file)}L, {len(text)}C)"


def sort_by_name(files: Iterable[RepositoryFile]) -> list[RepositoryFile]:
    """Sort files by name, case-folded first so "a.md" and "B.md" interleave."""
    return sorted(files, key=lambda f: (f.name.casefold(), f.name))
