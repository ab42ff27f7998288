# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the four MCP tools the agent can call.  Each tool is a thin
#   wrapper around a core/ function: it logs the call, delegates, and turns
#   the core Result into an MCP tool result.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g., "save_note")
#   2. FastMCP validates the arguments against the tool's schema, which it
#      builds from the Annotated[...] parameter types below.  Bad arguments
#      (missing title, content sent as a number) are rejected right here and
#      the function body never runs.
#   3. The function calls core/ logic and gets a Success or Failure back
#   4. Success -> one text block.  Failure -> ToolError, which FastMCP
#      returns as one text block with isError set.
#
# TOOL NAMING CONVENTIONS:
#   - save_*  -> Writes (overwrites on slug collision, no versioning)
#   - list_*  -> Read-only enumeration
#   - read_*  -> Read-only retrieval by title
#   - get_*   -> Read-only external lookup
#
# RUNNING THIS SERVER:
#   main.py builds the server with create_server(Settings.from_env()) and
#   runs it over stdio.  Tests build one against a temp directory and talk
#   to it with fastmcp.Client, in memory.
# =============================================================================

import logging
import sys
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from core.config import SERVER_NAME, SERVER_VERSION, Settings
from core.models import Failure, Result, Success
from core.notes import NoteStore
from core.weather import get_weather as fetch_weather

logger = logging.getLogger(__name__)

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the agent over STDOUT.
# Anything printed to stdout would corrupt the JSON-RPC stream.
#
# Per-call lines are DEBUG, so a server at the default INFO level writes
# exactly one line: the startup notice from main.py.  Set
# DEV_NOTES_LOG_LEVEL=DEBUG to watch calls go by, colour-coded:
#     - CYAN for incoming requests (tool name + parameters)
#     - YELLOW for intermediate status
#     - GREEN for the response
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

# Only our own loggers follow DEV_NOTES_LOG_LEVEL.  Everything else
# (fastmcp, docket, httpx) stays at WARNING so it can't add startup chatter.
_APP_LOGGERS = ("dev_notes", "core", "tools")
_LIBRARY_LOGGERS = ("fastmcp", "docket", "httpx", "mcp")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    for name in _APP_LOGGERS:
        logging.getLogger(name).setLevel(level)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.debug(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.debug(f"{_YELLOW}  → {message}{_RESET}")


def _respond(tool_name: str, result: Result) -> str:
    """Log the outcome, then hand it to FastMCP.

    A Failure is raised as ToolError; FastMCP turns that into a result with
    isError=True and the failure text as its only content block.  Either way
    the agent gets exactly one text block.
    """
    status = "error" if result.is_error else "ok"
    logger.debug(f"{_GREEN}  ← {tool_name} {status}: {result.text!r}{_RESET}")
    if isinstance(result, Failure):
        raise ToolError(result.text)
    return result.text


# =============================================================================
# Server factory
# =============================================================================
def create_server(settings: Settings) -> FastMCP:
    """Build the dev-notes tool server for the given store and endpoint."""
    store = NoteStore(settings.notes_dir, settings.note_extension)
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    # -------------------------------------------------------------------------
    # TOOL 1: save_note
    # -------------------------------------------------------------------------
    @mcp.tool()
    def save_note(
        title: Annotated[str, Field(description="Note title (used as filename)")],
        content: Annotated[str, Field(description="Markdown content of the note")],
    ) -> str:
        """Save a markdown note to ~/dev-notes/.

        The filename is derived from the title ("Bug Backlog" -> bug-backlog.md).
        Saving a title that maps to an existing file replaces that file.
        """
        _log_request("save_note", title=title, content=f"<{len(content)} chars>")
        return _respond("save_note", Success(store.save(title, content)))

    # -------------------------------------------------------------------------
    # TOOL 2: list_notes
    # -------------------------------------------------------------------------
    @mcp.tool()
    def list_notes() -> str:
        """List all saved notes in ~/dev-notes/ with their last-modified time."""
        _log_request("list_notes")
        lines = store.list()
        _log_status(f"{len(lines)} line(s)")
        return _respond("list_notes", Success("\n".join(lines)))

    # -------------------------------------------------------------------------
    # TOOL 3: read_note
    # -------------------------------------------------------------------------
    @mcp.tool()
    def read_note(
        title: Annotated[str, Field(description="Title of the note to read")],
    ) -> str:
        """Read a saved note from ~/dev-notes/ and return its full content."""
        _log_request("read_note", title=title)
        return _respond("read_note", store.read(title))

    # -------------------------------------------------------------------------
    # TOOL 4: get_weather
    # -------------------------------------------------------------------------
    @mcp.tool()
    def get_weather(
        location: Annotated[
            str, Field(description="City name (e.g. 'Orlando' or 'New York')")
        ],
    ) -> str:
        """Get current weather for a location.

        Returns temperature (°F and °C), conditions, humidity and wind.
        """
        _log_request("get_weather", location=location)
        return _respond("get_weather", fetch_weather(location, settings.weather_url))

    return mcp
