"""End-to-end tests for tools.mcp_server through an in-memory FastMCP client."""

import asyncio
from pathlib import Path

import pytest
from fastmcp import Client

from core.config import Settings
from tools.mcp_server import create_server

TOOL_NAMES = {"save_note", "list_notes", "read_note", "get_weather"}


def _call(server, name: str, arguments: dict | None = None):
    async def go():
        async with Client(server) as client:
            return await client.call_tool_mcp(name, arguments or {})

    return asyncio.run(go())


def _text(result) -> str:
    assert len(result.content) == 1
    return result.content[0].text


@pytest.fixture()
def server(settings: Settings):
    return create_server(settings)


# ---------------------------------------------------------------------------
# Tool discovery
# ---------------------------------------------------------------------------


class TestToolSchemas:
    @pytest.fixture()
    def tools(self, server):
        async def go():
            async with Client(server) as client:
                return {t.name: t for t in await client.list_tools()}

        return asyncio.run(go())

    def test_exactly_four_tools(self, tools):
        assert set(tools) == TOOL_NAMES

    def test_save_note_schema(self, tools):
        schema = tools["save_note"].inputSchema
        assert set(schema["required"]) == {"title", "content"}
        assert schema["properties"]["title"]["type"] == "string"
        assert schema["properties"]["title"]["description"] == "Note title (used as filename)"
        assert schema["properties"]["content"]["description"] == "Markdown content of the note"

    def test_list_notes_takes_no_parameters(self, tools):
        assert not tools["list_notes"].inputSchema.get("properties")

    def test_descriptions_present(self, tools):
        assert tools["get_weather"].description.startswith("Get current weather")
        assert "City name" in tools["get_weather"].inputSchema["properties"]["location"]["description"]


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


class TestNoteTools:
    def test_bug_backlog_example(self, server, notes_dir: Path):
        saved = _call(server, "save_note", {"title": "Bug Backlog", "content": "- fix X\n- fix Y"})
        assert not saved.isError
        assert "bug-backlog.md" in _text(saved)
        assert (notes_dir / "bug-backlog.md").read_text() == "- fix X\n- fix Y"

        read = _call(server, "read_note", {"title": "Bug Backlog"})
        assert not read.isError
        assert _text(read) == "- fix X\n- fix Y"

        listing = _text(_call(server, "list_notes"))
        assert "bug backlog" in listing
        assert "bug-backlog.md" in listing

    def test_list_on_empty_store(self, server, notes_dir: Path):
        result = _call(server, "list_notes")
        assert not result.isError
        assert _text(result) == f"No notes found in {notes_dir}."

    def test_list_joins_one_line_per_note(self, server):
        _call(server, "save_note", {"title": "Alpha", "content": "a"})
        _call(server, "save_note", {"title": "Beta", "content": "b"})
        assert len(_text(_call(server, "list_notes")).splitlines()) == 2

    def test_case_variants_list_once(self, server):
        _call(server, "save_note", {"title": "Project Ideas", "content": "one"})
        _call(server, "save_note", {"title": "project ideas", "content": "two"})
        lines = _text(_call(server, "list_notes")).splitlines()
        assert len(lines) == 1
        assert _text(_call(server, "read_note", {"title": "PROJECT IDEAS"})) == "two"

    def test_empty_content_round_trip(self, server):
        _call(server, "save_note", {"title": "Blank", "content": ""})
        result = _call(server, "read_note", {"title": "Blank"})
        assert not result.isError
        assert _text(result) == ""

    def test_read_missing_note_is_error_result(self, server, notes_dir: Path):
        result = _call(server, "read_note", {"title": "does-not-exist"})
        assert result.isError
        text = _text(result)
        assert "does-not-exist.md" in text
        assert str(notes_dir) in text

    def test_server_keeps_serving_after_error(self, server):
        assert _call(server, "read_note", {"title": "nope"}).isError
        assert not _call(server, "list_notes").isError


# ---------------------------------------------------------------------------
# Argument validation happens before any handler runs
# ---------------------------------------------------------------------------


class TestValidation:
    @pytest.mark.parametrize(
        "arguments",
        [
            {"title": "Rejected"},
            {"content": "no title"},
            {"title": 42, "content": "x"},
            {"title": "Rejected", "content": ["not", "text"]},
        ],
    )
    def test_bad_save_arguments_write_nothing(self, server, notes_dir: Path, arguments):
        result = _call(server, "save_note", arguments)
        assert result.isError
        assert not notes_dir.exists()

    def test_missing_location_sends_no_request(self, server, wttr):
        result = _call(server, "get_weather", {})
        assert result.isError
        assert wttr.urls == []


# ---------------------------------------------------------------------------
# Weather
# ---------------------------------------------------------------------------


class TestWeatherTool:
    def test_success(self, server, wttr):
        result = _call(server, "get_weather", {"location": "Orlando"})
        assert not result.isError
        assert _text(result).startswith("Weather for Orlando:")
        assert "72°F (22°C)" in _text(result)
        assert wttr.urls == ["https://weather.test/Orlando?format=j1"]

    def test_http_error_names_location(self, server, wttr):
        wttr.status = 502
        result = _call(server, "get_weather", {"location": "New York"})
        assert result.isError
        assert '"New York"' in _text(result)
