"""repository_read: bounded, line-numbered reads of one snapshot file."""

from pydantic import BaseModel, ConfigDict, Field

from ..logging_config import get_logger
from ..models import FileStatus, RepositoryFile
from ..text.lines import format_line_output, get_line_range, split_lines
from .base import RepositoryTool
from .errors import FileLookupError
from .options import MAX_READ_SUGGESTIONS
from .results import render

logger = get_logger(__name__)


class ReadInput(BaseModel):
    fileName: str = Field(
        min_length=1,
        description="The name of the file to read (as shown in repository_ls output).",
    )
    startLine: int | None = Field(default=None, description="Start line number (1-indexed). Default: 1.")
    endLine: int | None = Field(default=None, description="End line number (1-indexed, inclusive).")

    model_config = ConfigDict(extra="ignore")


class ReadTool(RepositoryTool):
    name = "repository_read"
    args_schema = ReadInput
    required_messages = {"fileName": "fileName is required"}

    @property
    def description(self) -> str:
        return (
            "Read the content of a file from the repository. Returns the file content with line numbers.\n"
            "Use after discovering files with repository_ls or repository_glob.\n"
            f"Returns at most {self._options.max_read_lines} lines and "
            f"{self._options.max_read_chars} characters per call; use startLine/endLine "
            "to page through large files."
        )

    def _resolve(self, file_name: str) -> RepositoryFile:
        wanted = file_name.lower()
        completed = [f for f in self._files if f.status == FileStatus.COMPLETED]
        for file in completed:
            if file.name.lower() == wanted:
                return file

        suggestions = [f.name for f in completed if wanted in f.name.lower()]
        raise FileLookupError(file_name, suggestions[:MAX_READ_SUGGESTIONS])

    async def run(self, params: ReadInput) -> str:
        file = self._resolve(params.fileName)
        if not file.text:
            return f"# {file.name} (0 lines)\n[empty file]"

        lines = split_lines(file.text)
        total = len(lines)
        start = max(1, params.startLine or 1)
        if params.endLine is None:
            end = min(start + self._options.max_read_lines - 1, total)
        else:
            end = min(params.endLine, total)

        if start > total:
            # Past the end of the file: an empty range, not an error
            selected = []
        else:
            end = max(end, start)
            selected = get_line_range(lines, start, end)

        content = "\n".join(selected)
        char_truncated = len(content) > self._options.max_read_chars
        if char_truncated:
            # May cut the last line short; the header still names the requested end
            content = content[:self._options.max_read_chars]
            selected = split_lines(content)
            logger.debug("read %s truncated to %d chars", file.name, self._options.max_read_chars)

        header = f"# {file.name} (lines {start}-{end} of {total})"
        if char_truncated:
            header += " [truncated]"
        elif end < total:
            header += f" [continues to line {total}]"

        return render(header, [format_line_output(selected, start)] if selected else None)
