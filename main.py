# =============================================================================
# main.py  -  Entry Point for the Dev Notes MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          (or the installed `dev-notes-mcp` script)
#
# Register it with an MCP client as a stdio server, e.g.:
#   {"command": "dev-notes-mcp"}
#
# WHAT HAPPENS:
#   1. Loads a local .env file and turns off FastMCP's update check
#   2. Configures logging to stderr
#   3. Creates ~/dev-notes/ if needed; failing here aborts startup
#   4. Builds the FastMCP server and hands stdin/stdout to it
# =============================================================================

import logging
import os

from dotenv import load_dotenv

# Load .env and FastMCP's own switches BEFORE importing anything that pulls
# in fastmcp: its settings object reads the environment once, at import.
# The server never phones home to check for a newer fastmcp release.
load_dotenv()
os.environ.setdefault("FASTMCP_CHECK_FOR_UPDATES", "off")

from core.config import Settings
from core.notes import NoteStore
from tools.mcp_server import configure_logging, create_server

logger = logging.getLogger("dev_notes")


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    NoteStore(settings.notes_dir, settings.note_extension).ensure_store()

    mcp = create_server(settings)
    # stderr, so it doesn't interfere with the protocol on stdout.
    logger.info("Dev Notes MCP server is running.")
    mcp.run(transport="stdio", show_banner=False)


if __name__ == "__main__":
    main()
