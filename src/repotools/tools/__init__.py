"""Repository file tools with bounded results."""

from .base import RepositoryTool
from .catalog import RepositoryToolCatalog, create_repository_tools
from .errors import (
    RepositoryToolError,
    ArgumentValidationError,
    FileLookupError,
    UpstreamSearchError,
)
from .grep import GrepTool
from .instructions import get_repository_tools_instructions
from .listing import LsTool, GlobTool
from .options import ToolOptions
from .read import ReadTool
from .search import SearchAdapter, SearchTool, QueryChunksFunction

__all__ = [
    "RepositoryTool",
    "RepositoryToolCatalog",
    "create_repository_tools",
    "RepositoryToolError",
    "ArgumentValidationError",
    "FileLookupError",
    "UpstreamSearchError",
    "GrepTool",
    "get_repository_tools_instructions",
    "LsTool",
    "GlobTool",
    "ToolOptions",
    "ReadTool",
    "SearchAdapter",
    "SearchTool",
    "QueryChunksFunction",
]
