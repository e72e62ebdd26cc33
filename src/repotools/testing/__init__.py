"""Test helpers: snapshot builders and scripted semantic search."""

from .fixtures import make_file, create_test_snapshot, call_tool
from .mock_query import create_mock_query

__all__ = [
    "make_file",
    "create_test_snapshot",
    "call_tool",
    "create_mock_query",
]
