"""Text primitives behind the repository tools: lines, globs and grep."""

from .lines import (
    split_lines,
    get_line_range,
    format_line_output,
    get_extension,
    get_base_name,
)
from .glob_match import glob_to_regex, compile_glob, match_glob
from .grep import compile_search_pattern, grep_text

__all__ = [
    "split_lines",
    "get_line_range",
    "format_line_output",
    "get_extension",
    "get_base_name",
    "glob_to_regex",
    "compile_glob",
    "match_glob",
    "compile_search_pattern",
    "grep_text",
]
