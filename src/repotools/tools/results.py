"""Helpers for building tool payloads."""

import json

from ..models import ContentBlock, TextContent


def text_result(text: str) -> list[ContentBlock]:
    """Wrap text in the single-block payload every tool returns."""
    return [TextContent(text=text)]


def error_result(message: str) -> list[ContentBlock]:
    """Payload for a failed call: {"error": message} as JSON text."""
    return text_result(json.dumps({"error": message}, ensure_ascii=False))


def render(header: str, body: list[str] | None = None) -> str:
    """Join a "# ..." header line and optional body lines."""
    if not body:
        return header
    return "\n".join([header, *body])
