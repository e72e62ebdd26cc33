"""Pytest configuration and fixtures for repository tool testing."""

import pytest

from repotools.tools import RepositoryToolCatalog, ToolOptions
from repotools.testing import create_mock_query, create_test_snapshot


@pytest.fixture
def snapshot():
    """Mixed snapshot: code, docs, an empty file, a pending and a failed upload.

    Returns:
        List of RepositoryFile
    """
    return create_test_snapshot()


@pytest.fixture
def mock_query_factory():
    """Factory for scripted query_chunks functions.

    Example:
        >>> def test_search(mock_query_factory):
        ...     query = mock_query_factory([FileChunk(file=f, text="...")])
    """
    def _factory(responses=None, error=None):
        return create_mock_query(responses, error=error)
    return _factory


@pytest.fixture
def catalog_factory(mock_query_factory):
    """Factory for catalogs with default limits (independent of config.json / env).

    Returns:
        Function (files, query_chunks=None, **option_overrides) -> RepositoryToolCatalog
    """
    def _factory(files, query_chunks=None, **overrides):
        return RepositoryToolCatalog(
            files,
            query_chunks or mock_query_factory(),
            options=ToolOptions(**overrides),
        )
    return _factory


@pytest.fixture
def catalog(catalog_factory, snapshot):
    """Catalog over the standard test snapshot."""
    return catalog_factory(snapshot)
