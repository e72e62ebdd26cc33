"""repository_grep: regex search across snapshot files."""

from pydantic import BaseModel, ConfigDict, Field

from ..logging_config import get_logger
from ..models import LineMatch
from ..text.glob_match import compile_glob
from ..text.grep import compile_search_pattern, grep_text
from .base import RepositoryTool
from .formatting import truncate_line
from .options import MAX_GREP_LINE_CHARS, MAX_TOTAL_GREP_MATCHES
from .results import render

logger = get_logger(__name__)


class GrepInput(BaseModel):
    pattern: str = Field(
        min_length=1,
        description="Regex pattern to search for. Invalid regexes are matched literally.",
    )
    filePattern: str | None = Field(
        default=None,
        description='Optional glob pattern to filter which files to search (e.g., "*.ts", "src/**/*.js").',
    )
    ignoreCase: bool | None = Field(default=None, description="Case-insensitive search. Default: true.")
    contextLines: int | None = Field(
        default=None,
        description="Number of context lines to include before and after each match.",
    )
    maxMatches: int | None = Field(
        default=None,
        description="Maximum number of matching lines per file (cannot exceed the configured cap).",
    )
    literal: bool | None = Field(default=None, description="Treat the pattern as plain text. Default: false.")

    model_config = ConfigDict(extra="ignore")


def _format_record(record: LineMatch, file_name: str | None) -> str:
    separator = "-" if record.is_context_only else ":"
    prefix = f"{file_name}:" if file_name else ""
    content = truncate_line(record.content, MAX_GREP_LINE_CHARS)
    return f"{prefix}{record.line_number}{separator}{content}"


class GrepTool(RepositoryTool):
    name = "repository_grep"
    args_schema = GrepInput
    required_messages = {"pattern": "Pattern is required"}

    @property
    def description(self) -> str:
        return (
            "Search for a regex pattern across repository files. Returns matching lines with "
            "line numbers and context.\n"
            "Output: the first line of each file is \"file:line:content\", following lines "
            "\"line:content\"; \"-\" instead of \":\" marks a context line.\n"
            f"Defaults: {self._options.default_context_lines} context lines, "
            f"{self._options.max_grep_matches} matches per file, "
            f"{MAX_TOTAL_GREP_MATCHES} matches in total.\n"
            "Examples:\n"
            '- "def\\s+\\w+" finds function definitions\n'
            '- "TODO|FIXME" finds todo comments\n'
            '- "import.*from" finds import statements'
        )

    async def run(self, params: GrepInput) -> str:
        options = self._options
        context_lines = options.default_context_lines if params.contextLines is None else params.contextLines
        per_file = options.max_grep_matches
        if params.maxMatches is not None:
            per_file = max(1, min(params.maxMatches, per_file))

        regex = compile_search_pattern(
            params.pattern,
            ignore_case=True if params.ignoreCase is None else params.ignoreCase,
            literal=bool(params.literal),
        )

        candidates = [f for f in self._files if f.is_readable]
        if params.filePattern:
            matches_file = compile_glob(params.filePattern)
            candidates = [f for f in candidates if matches_file(f.name)]

        total = 0
        body = []
        for file in candidates:
            remaining = MAX_TOTAL_GREP_MATCHES - total
            if remaining <= 0:
                break

            outcome = grep_text(
                file.text,
                regex,
                max_matches=min(per_file, remaining),
                context_lines=context_lines,
            )
            if not outcome.matches:
                continue

            total += outcome.match_count
            for index, record in enumerate(outcome.matches):
                body.append(_format_record(record, file.name if index == 0 else None))

        logger.debug("grep %r: %d matches in %d files", params.pattern, total, len(candidates))

        header = f"# {total} matches in {len(candidates)} files"
        if total >= MAX_TOTAL_GREP_MATCHES:
            header += " (limit reached)"
        return render(header, body)
