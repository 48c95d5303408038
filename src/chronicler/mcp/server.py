"""FastMCP server exposing the distance calculator as tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from chronicler.config import Settings, get_settings
from chronicler.core.engine import calculate, calculate_distance as _calculate_distance
from chronicler.core.errors import ChroniclerError
from chronicler.core.parser import parse_lists as _parse_lists
from chronicler.core.tengwar import detransliterate, transliterate as _transliterate


def create_mcp_server(settings: Settings | None = None) -> FastMCP:
    """Create a FastMCP server bound to the given settings."""
    settings = settings or get_settings()

    mcp = FastMCP(
        "chronicler",
        instructions="Compute the total distance between two lists of integers after sorting both.",
    )

    @mcp.tool()
    def calculate_distance(list1: list[int], list2: list[int]) -> dict[str, Any] | str:
        """Sort both lists, pair them by rank and return the summed absolute differences."""
        try:
            return _calculate_distance(list1, list2).to_wire()
        except ChroniclerError as exc:
            return f"Error: {exc.message}"

    @mcp.tool()
    def parse_lists(content: str) -> dict[str, Any] | str:
        """Parse two whitespace-separated integer columns into two lists."""
        try:
            parsed = _parse_lists(content, max_bytes=settings.max_upload_bytes)
        except ChroniclerError as exc:
            return f"Error: {exc.message}"
        return {"list1": list(parsed.list1), "list2": list(parsed.list2), "rowCount": parsed.row_count}

    @mcp.tool()
    def calculate_from_text(content: str) -> dict[str, Any] | str:
        """Parse two integer columns from text and calculate their total distance."""
        try:
            return calculate(_parse_lists(content, max_bytes=settings.max_upload_bytes)).to_wire()
        except ChroniclerError as exc:
            return f"Error: {exc.message}"

    @mcp.tool()
    def transliterate(text: str, reverse: bool = False) -> str:
        """Convert Latin text to Tengwar, or Tengwar back to Latin with reverse=True."""
        return detransliterate(text) if reverse else _transliterate(text)

    return mcp
