"""File search and inspection tools over an in-memory repository snapshot.

Exposes ls, glob, grep, read and semantic search as agent tools so a model
can explore a document or code set without loading it into the prompt.
"""

from .models import (
    FileStatus,
    RepositoryFile,
    FileChunk,
    MatchSpan,
    LineMatch,
    GrepOutcome,
    TextContent,
    ContentBlock,
)
from .tools import (
    RepositoryTool,
    RepositoryToolCatalog,
    create_repository_tools,
    ToolOptions,
    SearchAdapter,
    get_repository_tools_instructions,
)

__all__ = [
    "FileStatus",
    "RepositoryFile",
    "FileChunk",
    "MatchSpan",
    "LineMatch",
    "GrepOutcome",
    "TextContent",
    "ContentBlock",
    "RepositoryTool",
    "RepositoryToolCatalog",
    "create_repository_tools",
    "ToolOptions",
    "SearchAdapter",
    "get_repository_tools_instructions",
]
