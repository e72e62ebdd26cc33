"""Semantic search tool.

This module provides both:
1. SearchAdapter, which calls the externally supplied query function and maps
   its failures to UpstreamSearchError
2. SearchTool (repository_search), which formats the ranked chunks
"""

import inspect
from typing import Annotated, Awaitable, Callable, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from ..logging_config import get_logger
from ..models import FileChunk, RepositoryFile
from .base import RepositoryTool
from .errors import UpstreamSearchError
from .formatting import collapse_newlines, truncate_line
from .options import MAX_SEARCH_RESULTS, MAX_SNIPPET_CHARS, ToolOptions
from .results import render

logger = get_logger(__name__)

# query_chunks(query, top_k) -> chunks, sync or async
QueryChunksFunction = Callable[[str, int], Union[Awaitable[list[FileChunk]], list[FileChunk]]]


class SearchAdapter:
    """Wraps the external semantic query function.

    Holds no state beyond the callable. There is no retry: one failure is
    reported once.
    """

    def __init__(self, query_chunks: QueryChunksFunction):
        self._query_chunks = query_chunks

    async def query(self, query: str, limit: int) -> list[FileChunk]:
        """Run the query.

        Raises:
            UpstreamSearchError: if the query function raises or its awaitable fails
        """
        try:
            result = self._query_chunks(query, limit)
            if inspect.isawaitable(result):
                result = await result
            return list(result or [])
        except Exception as e:
            logger.warning("Semantic search failed: %s", e)
            raise UpstreamSearchError(e) from e


class SearchInput(BaseModel):
    query: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(
        description="Natural language query describing what you're looking for. Be descriptive and specific.",
    )
    limit: int | None = Field(
        default=None,
        description=f"Maximum number of results to return (at most {MAX_SEARCH_RESULTS}).",
    )

    model_config = ConfigDict(extra="ignore")


def _format_chunk(chunk: FileChunk, rank: int) -> str:
    snippet = truncate_line(collapse_newlines(chunk.text), MAX_SNIPPET_CHARS)
    if chunk.similarity is not None:
        label = f"{chunk.similarity * 100:.0f}%"
    else:
        label = str(rank + 1)
    return f"[{label}] {chunk.file.name}: {snippet}"


class SearchTool(RepositoryTool):
    name = "repository_search"
    args_schema = SearchInput
    required_messages = {"query": "Query is required"}

    def __init__(
        self,
        files: tuple[RepositoryFile, ...],
        options: ToolOptions,
        adapter: SearchAdapter,
    ):
        super().__init__(files, options)
        self._adapter = adapter

    @property
    def description(self) -> str:
        return (
            "Semantic search across repository files using natural language. Returns relevant "
            "text chunks ranked by similarity.\n"
            "Use for:\n"
            "- Finding code related to a concept or feature\n"
            "- Discovering relevant documentation\n"
            "- Locating implementations when you don't know exact names\n"
            "This uses embeddings for meaning-based search, not exact text matching. "
            "For exact pattern matching, use repository_grep instead."
        )

    async def run(self, params: SearchInput) -> str:
        limit = self._options.default_search_results if params.limit is None else params.limit
        limit = max(1, min(limit, MAX_SEARCH_RESULTS))

        chunks = await self._adapter.query(params.query, limit)
        if not chunks:
            return f'# No results for "{params.query}"'

        return render(
            f'# {len(chunks)} results for "{params.query}"',
            [_format_chunk(chunk, rank) for rank, chunk in enumerate(chunks)],
        )
