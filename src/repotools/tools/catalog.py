"""The five repository tools over one file snapshot."""

from typing import Iterable, Mapping

from langchain_core.tools import BaseTool

from ..logging_config import get_logger
from ..models import RepositoryFile
from .base import RepositoryTool
from .grep import GrepTool
from .listing import GlobTool, LsTool
from .options import ToolOptions
from .read import ReadTool
from .search import QueryChunksFunction, SearchAdapter, SearchTool

logger = get_logger(__name__)


def _to_file(item: RepositoryFile | Mapping) -> RepositoryFile:
    if isinstance(item, RepositoryFile):
        return item
    return RepositoryFile.from_dict(dict(item))


class RepositoryToolCatalog:
    """Holds an immutable snapshot and the query callback, and the tools built on them.

    The snapshot is copied at construction; when the underlying files change,
    build a new catalog.
    """

    def __init__(
        self,
        files: Iterable[RepositoryFile | Mapping],
        query_chunks: QueryChunksFunction,
        options: ToolOptions | None = None,
    ):
        self.files: tuple[RepositoryFile, ...] = tuple(_to_file(f) for f in files)
        self.options = options or ToolOptions.from_config()
        self._search = SearchAdapter(query_chunks)
        self._tools: tuple[RepositoryTool, ...] = (
            LsTool(self.files, self.options),
            GlobTool(self.files, self.options),
            GrepTool(self.files, self.options),
            ReadTool(self.files, self.options),
            SearchTool(self.files, self.options, self._search),
        )
        logger.debug("Built repository tools over %d files", len(self.files))

    @property
    def tools(self) -> list[RepositoryTool]:
        return list(self._tools)

    def get(self, name: str) -> RepositoryTool:
        """Look up a tool by name.

        Raises:
            KeyError: if no tool has that name
        """
        for tool in self._tools:
            if tool.name == name:
                return tool
        raise KeyError(name)

    def langchain_tools(self) -> list[BaseTool]:
        return [tool.as_langchain_tool() for tool in self._tools]


def create_repository_tools(
    files: Iterable[RepositoryFile | Mapping],
    query_chunks: QueryChunksFunction,
    options: ToolOptions | None = None,
) -> list[RepositoryTool]:
    """Create all repository file access tools.

    Args:
        files: Snapshot of repository files to operate on
        query_chunks: Function for semantic search, query_chunks(query, top_k)
        options: Size limits (defaults to the loaded config)

    Returns:
        The ls, glob, grep, read and search tools, in that order
    """
    return RepositoryToolCatalog(files, query_chunks, options).tools
