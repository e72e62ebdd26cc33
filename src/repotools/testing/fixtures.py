"""Snapshot fixture builders for testing the repository tools."""

import asyncio
from typing import Any

from ..models import ContentBlock, FileStatus, RepositoryFile


def make_file(
    name: str,
    text: str | None = "",
    status: FileStatus | str = FileStatus.COMPLETED,
    **kwargs: Any,
) -> RepositoryFile:
    """Create a RepositoryFile for testing.

    Example:
        >>> make_file("src/app.py", "print('hi')")
        >>> make_file("big.pdf", None, status="processing")
    """
    return RepositoryFile(name=name, status=FileStatus(status), text=text, **kwargs)


def create_test_snapshot() -> list[RepositoryFile]:
    """A small mixed snapshot: code, docs, an empty file and unfinished uploads."""
    return [
        make_file(
            "src/app.py",
            "import os\n\n\ndef main():\n    print('hello')\n\n\nif __name__ == '__main__':\n    main()\n",
        ),
        make_file("src/utils/helpers.py", "def helper():\n    return 42\n"),
        make_file("README.md", "# Demo\r\nA demo project.\r\nTODO: write docs\r\n"),
        make_file("docs/guide.md", "Guide\nTODO: first\nmiddle\nTODO: second\n"),
        make_file("empty.txt", ""),
        make_file("upload.pdf", None, status=FileStatus.PENDING),
        make_file("broken.docx", None, status=FileStatus.ERROR, error="parse failed"),
    ]


def call_tool(tool, args: dict | None = None) -> str:
    """Invoke a tool handler synchronously and return its single text block."""
    blocks: list[ContentBlock] = asyncio.run(tool.handler(args or {}))
    assert len(blocks) == 1, f"expected one content block, got {len(blocks)}"
    return blocks[0].text
