"""Glob matching for snapshot file names.

Supports:
- * matches any characters except /
- ** matches any characters including /; "**/" also matches zero directories
- ? matches a single character except /
- Character classes [abc], [a-z], [!abc]
- Alternation {a,b,c}

Matching is case-insensitive and treats "\\" and "/" as the same separator.
"""

import re
from functools import lru_cache
from typing import Callable

from ..logging_config import get_logger

logger = get_logger(__name__)


def _normalize(path: str) -> str:
    return path.replace("\\", "/")


def glob_to_regex(glob: str) -> str:
    """Convert a glob pattern to an (unanchored) regex pattern string."""
    regex = []
    i = 0
    n = len(glob)

    while i < n:
        c = glob[i]

        if c == "*":
            if i + 1 < n and glob[i + 1] == "*":
                i += 2
                if i < n and glob[i] == "/":
                    # "**/" spans any number of directories, including none
                    regex.append("(?:.*/)?")
                    i += 1
                else:
                    regex.append(".*")
            else:
                regex.append("[^/]*")
                i += 1
        elif c == "?":
            regex.append("[^/]")
            i += 1
        elif c == "[":
            class_end = glob.find("]", i + 1)
            if class_end == -1:
                regex.append(re.escape(c))
                i += 1
            else:
                content = glob[i + 1:class_end]
                if content.startswith("!"):
                    content = "^" + content[1:]
                regex.append(f"[{content}]")
                i = class_end + 1
        elif c == "{":
            brace_end = glob.find("}", i + 1)
            if brace_end == -1:
                regex.append(re.escape(c))
                i += 1
            else:
                options = glob[i + 1:brace_end].split(",")
                regex.append("(?:" + "|".join(re.escape(o) for o in options) + ")")
                i = brace_end + 1
        else:
            regex.append(re.escape(c))
            i += 1

    return "".join(regex)


@lru_cache(maxsize=256)
def compile_glob(pattern: str) -> Callable[[str], bool]:
    """Compile a glob pattern into a predicate over file names.

    If the generated regex does not compile (e.g. a malformed character
    class), the predicate falls back to a case-insensitive substring check.
    """
    normalized = _normalize(pattern)
    try:
        regex = re.compile(glob_to_regex(normalized), re.IGNORECASE)
    except re.error as e:
        logger.debug("Glob %r did not compile (%s); using substring match", pattern, e)
        needle = normalized.lower()
        return lambda filename: needle in _normalize(filename).lower()
    return lambda filename: regex.fullmatch(_normalize(filename)) is not None


def match_glob(filename: str, pattern: str) -> bool:
    """Return True if filename matches the glob pattern."""
    return compile_glob(pattern)(filename)
