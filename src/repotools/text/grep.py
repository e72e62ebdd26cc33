"""Line-oriented pattern search with context windows and match caps."""

import re

from ..logging_config import get_logger
from ..models import GrepOutcome, LineMatch, MatchSpan
from .lines import split_lines

logger = get_logger(__name__)


def compile_search_pattern(
    pattern: str,
    ignore_case: bool = True,
    literal: bool = False,
) -> re.Pattern:
    """Compile a grep pattern.

    An invalid regex is not an error: it is searched for literally instead.

    Args:
        pattern: Regex (or literal text when literal=True)
        ignore_case: Case-insensitive matching
        literal: Escape all regex metacharacters

    Returns:
        Compiled pattern
    """
    flags = re.IGNORECASE if ignore_case else 0
    if literal:
        return re.compile(re.escape(pattern), flags)
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        logger.debug("Invalid regex %r (%s); matching literally", pattern, e)
        return re.compile(re.escape(pattern), flags)


def _find_spans(regex: re.Pattern, line: str) -> list[MatchSpan]:
    spans = []
    pos = 0
    while pos <= len(line):
        match = regex.search(line, pos)
        if match is None:
            break
        spans.append(MatchSpan(start=match.start(), end=match.end(), text=match.group(0)))
        # Step past zero-length matches so the scan always moves forward
        pos = match.end() if match.end() > match.start() else match.end() + 1
    return spans


def grep_text(
    text: str,
    pattern: str | re.Pattern,
    ignore_case: bool = True,
    literal: bool = False,
    max_matches: int = 50,
    context_lines: int = 0,
) -> GrepOutcome:
    """Search text line by line for a pattern.

    Lines within context_lines of a match are included as context-only
    records. Scanning stops once max_matches lines have matched; context
    lines never count towards the cap.

    Args:
        text: The text content to search
        pattern: Pattern string, or a pattern from compile_search_pattern()
            (ignore_case and literal are then ignored)
        ignore_case: Case-insensitive matching
        literal: Treat pattern as plain text
        max_matches: Maximum number of matching lines (<= 0 for no cap)
        context_lines: Lines of context before and after each match

    Returns:
        GrepOutcome with records sorted by line number
    """
    if isinstance(pattern, re.Pattern):
        regex = pattern
    else:
        regex = compile_search_pattern(pattern, ignore_case=ignore_case, literal=literal)

    context_lines = max(0, context_lines)
    lines = split_lines(text)
    matched: dict[int, LineMatch] = {}
    included: set[int] = set()
    match_count = 0
    truncated = False

    for i, line in enumerate(lines):
        spans = _find_spans(regex, line)
        if not spans:
            continue

        match_count += 1
        matched[i] = LineMatch(line_number=i + 1, content=line, spans=spans)
        included.update(range(max(0, i - context_lines), min(len(lines) - 1, i + context_lines) + 1))

        if max_matches > 0 and match_count >= max_matches:
            truncated = True
            break

    if match_count == 0:
        return GrepOutcome()

    records = []
    for index in sorted(included):
        record = matched.get(index)
        if record is None:
            record = LineMatch(line_number=index + 1, content=lines[index], is_context_only=True)
        records.append(record)

    return GrepOutcome(matches=records, truncated=truncated, match_count=match_count)
