"""repository_ls and repository_glob: list snapshot files with sizes."""

from pydantic import BaseModel, ConfigDict, Field

from ..logging_config import get_logger
from ..text.glob_match import compile_glob
from .base import RepositoryTool
from .formatting import describe_file, sort_by_name
from .results import render

logger = get_logger(__name__)


class LsInput(BaseModel):
    path: str | None = Field(
        default=None,
        description="Optional file name prefix to filter by (case-insensitive). If empty, lists all files.",
    )

    model_config = ConfigDict(extra="ignore")


class GlobInput(BaseModel):
    pattern: str = Field(min_length=1, description="Glob pattern to match file names against.")

    model_config = ConfigDict(extra="ignore")


class LsTool(RepositoryTool):
    name = "repository_ls"
    args_schema = LsInput

    @property
    def description(self) -> str:
        return (
            "List files in the repository. Returns file names with line and character counts. "
            "Use this first to discover what files are available before reading or searching them."
        )

    async def run(self, params: LsInput) -> str:
        files = self._files
        if params.path:
            prefix = params.path.lower()
            files = [f for f in files if f.name.lower().startswith(prefix)]

        listed = sort_by_name(files)
        header = f"# {len(listed)} files"
        if params.path:
            header += f' under "{params.path}"'
        return render(header, [describe_file(f) for f in listed])


class GlobTool(RepositoryTool):
    name = "repository_glob"
    args_schema = GlobInput
    required_messages = {"pattern": "Pattern is required"}

    @property
    def description(self) -> str:
        return (
            "Find files matching a glob pattern. Supports *, **, ?, [abc], {a,b,c} patterns.\n"
            "Examples:\n"
            '- "*.ts" matches TypeScript files in root\n'
            '- "**/*.ts" matches all TypeScript files\n'
            '- "src/**/*.{ts,tsx}" matches TS/TSX files in src\n'
            '- "*.{js,jsx,ts,tsx}" matches JS/TS files'
        )

    async def run(self, params: GlobInput) -> str:
        matches = compile_glob(params.pattern)
        listed = sort_by_name(f for f in self._files if matches(f.name))
        logger.debug("glob %r matched %d of %d files", params.pattern, len(listed), len(self._files))
        return render(
            f'# {len(listed)} files matching "{params.pattern}"',
            [describe_file(f) for f in listed],
        )
