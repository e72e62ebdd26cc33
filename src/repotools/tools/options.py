"""Size limits for the repository tools."""

from dataclasses import dataclass, fields

from ..logging_config import get_logger

logger = get_logger(__name__)

# Fixed limits (not configurable)
MAX_TOTAL_GREP_MATCHES = 100   # across all files in one grep call
MAX_GREP_LINE_CHARS = 200      # per reported grep line
MAX_SEARCH_RESULTS = 20        # ceiling for search "limit"
MAX_SNIPPET_CHARS = 400        # per search result
MAX_READ_SUGGESTIONS = 5       # "Did you mean" candidates


@dataclass(frozen=True)
class ToolOptions:
    """Configurable limits, fixed for the lifetime of a catalog."""
    max_grep_matches: int = 20        # per file
    max_read_lines: int = 200
    max_read_chars: int = 15000
    default_context_lines: int = 2
    default_search_results: int = 10

    @classmethod
    def from_config(cls, config: dict | None = None) -> "ToolOptions":
        """Build options from the "tools" section of the config dict.

        Unknown keys are ignored; values that are not integers are logged
        and left at their defaults.
        """
        if config is None:
            from ..config import config
        section = (config or {}).get("tools") or {}
        known = {f.name for f in fields(cls)}

        values = {}
        for key, value in section.items():
            if key not in known:
                continue
            try:
                values[key] = int(value)
            except (TypeError, ValueError):
                logger.warning("Ignoring tools.%s=%r (not an integer)", key, value)
        return cls(**values)
