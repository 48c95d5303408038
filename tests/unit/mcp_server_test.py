"""Tests for the MCP server tool definitions."""

from __future__ import annotations

import inspect

from chronicler.mcp.server import create_mcp_server


def _tool_fn(name: str):  # type: ignore[no-untyped-def]
    server = create_mcp_server()
    return server._tool_manager._tools[name].fn  # type: ignore[attr-defined]


class TestMcpServerCreation:
    def test_creates_server(self) -> None:
        server = create_mcp_server()
        assert server is not None
        assert server.name == "chronicler"

    def test_server_has_tools(self) -> None:
        server = create_mcp_server()
        tool_names = {t.name for t in server._tool_manager._tools.values()}
        assert tool_names >= {"calculate_distance", "parse_lists", "calculate_from_text", "transliterate"}

    def test_transliterate_reverse_defaults_to_false(self) -> None:
        sig = inspect.signature(_tool_fn("transliterate"))
        assert sig.parameters["reverse"].default is False


class TestMcpTools:
    def test_calculate_distance(self) -> None:
        result = _tool_fn("calculate_distance")([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3])
        assert result["totalDistance"] == 11

    def test_calculate_distance_error_is_string(self) -> None:
        result = _tool_fn("calculate_distance")([1, 2], [1])
        assert isinstance(result, str)
        assert result.startswith("Error:")

    def test_parse_lists(self) -> None:
        assert _tool_fn("parse_lists")("1 2\n3 4\n") == {"list1": [1, 3], "list2": [2, 4], "rowCount": 2}

    def test_calculate_from_text(self, sample_content: str) -> None:
        assert _tool_fn("calculate_from_text")(sample_content)["totalDistance"] == 11

    def test_calculate_from_text_malformed(self) -> None:
        result = _tool_fn("calculate_from_text")("1 2\nx\n")
        assert result.startswith("Error: Invalid format at line 2")

    def test_transliterate_round_trip(self) -> None:
        fn = _tool_fn("transliterate")
        assert fn(fn("mellon"), reverse=True) == "mellon"
