"""Unit tests for repository_search and the SearchAdapter."""

import asyncio
import json

import pytest

from repotools.models import FileChunk
from repotools.tools import SearchAdapter, UpstreamSearchError
from repotools.testing import call_tool, make_file


@pytest.fixture
def chunks():
    return [
        FileChunk(file=make_file("docs/auth.md"), text="Login flow:\nuser submits\r\ncredentials", similarity=0.876),
        FileChunk(file=make_file("src/session.py"), text="def refresh(): ...", similarity=None),
    ]


class TestSearchTool:
    """Test repository_search contract."""

    def test_formats_ranked_results(self, catalog_factory, mock_query_factory, snapshot, chunks):
        catalog = catalog_factory(snapshot, mock_query_factory(chunks))
        out = call_tool(catalog.get("repository_search"), {"query": "auth flow"})
        assert out == (
            '# 2 results for "auth flow"\n'
            "[88%] docs/auth.md: Login flow: user submits credentials\n"
            "[2] src/session.py: def refresh(): ..."
        )

    def test_no_results_is_header_only(self, catalog):
        out = call_tool(catalog.get("repository_search"), {"query": "nothing here"})
        assert out == '# No results for "nothing here"'

    def test_query_is_trimmed_and_limit_defaulted(self, catalog_factory, mock_query_factory, snapshot):
        query = mock_query_factory()
        catalog = catalog_factory(snapshot, query)
        call_tool(catalog.get("repository_search"), {"query": "  session handling  "})
        assert query.calls == [("session handling", 10)]

    @pytest.mark.parametrize("limit,expected", [(50, 20), (5, 5), (0, 1)])
    def test_limit_is_bounded(self, catalog_factory, mock_query_factory, snapshot, limit, expected):
        query = mock_query_factory()
        catalog = catalog_factory(snapshot, query)
        call_tool(catalog.get("repository_search"), {"query": "q", "limit": limit})
        assert query.calls[0][1] == expected

    def test_long_snippets_truncated(self, catalog_factory, mock_query_factory, snapshot):
        chunk = FileChunk(file=make_file("big.txt"), text="y" * 500, similarity=0.5)
        catalog = catalog_factory(snapshot, mock_query_factory([chunk]))
        out = call_tool(catalog.get("repository_search"), {"query": "y"})
        assert out.split("\n")[1] == "[50%] big.txt: " + "y" * 400 + "... (truncated)"

    @pytest.mark.parametrize("args", [{}, {"query": ""}, {"query": "   "}])
    def test_missing_query(self, catalog, args):
        out = call_tool(catalog.get("repository_search"), args)
        assert json.loads(out) == {"error": "Query is required"}

    def test_upstream_failure_reported_not_raised(self, catalog_factory, mock_query_factory, snapshot):
        catalog = catalog_factory(snapshot, mock_query_factory(error=RuntimeError("index offline")))
        out = call_tool(catalog.get("repository_search"), {"query": "anything"})
        assert json.loads(out) == {"error": "Search failed: index offline"}

    def test_accepts_synchronous_query_function(self, catalog_factory, snapshot, chunks):
        catalog = catalog_factory(snapshot, lambda query, top_k: chunks[:top_k])
        out = call_tool(catalog.get("repository_search"), {"query": "auth", "limit": 1})
        assert out.split("\n")[0] == '# 1 results for "auth"'


class TestSearchAdapter:
    """SearchAdapter maps query success/failure."""

    def test_returns_chunks(self, mock_query_factory, chunks):
        adapter = SearchAdapter(mock_query_factory(chunks))
        assert asyncio.run(adapter.query("auth", 5)) == chunks

    def test_wraps_failure(self, mock_query_factory):
        cause = ConnectionError("timeout")
        adapter = SearchAdapter(mock_query_factory(error=cause))
        with pytest.raises(UpstreamSearchError) as info:
            asyncio.run(adapter.query("auth", 5))
        assert info.value.cause is cause
        assert info.value.message == "Search failed: timeout"

    def test_message_falls_back_to_exception_type(self, mock_query_factory):
        adapter = SearchAdapter(mock_query_factory(error=TimeoutError()))
        with pytest.raises(UpstreamSearchError, match="Search failed: TimeoutError"):
            asyncio.run(adapter.query("auth", 5))
