# =============================================================================
# core/config.py  -  Fixed Paths, Endpoints & Settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Names every constant the server depends on (where notes live, which
#   weather endpoint to call) and bundles them into one Settings value that
#   main.py builds at startup and hands to the tool server.
#
# WHY A SETTINGS OBJECT INSTEAD OF MODULE GLOBALS?
#   The store path and weather URL are fixed for a running server, but tests
#   need to point them somewhere else (a temp directory, a fake endpoint).
#   Passing Settings into create_server() makes that a constructor argument
#   instead of a monkeypatch.
#
# WHAT IS *NOT* CONFIGURABLE:
#   The notes directory is always ~/dev-notes/ for the real server.  There is
#   no CLI flag or environment variable for it.  The only value read from the
#   environment is the log level.
# =============================================================================

import os
from dataclasses import dataclass
from pathlib import Path

SERVER_NAME = "dev-notes"
SERVER_VERSION = "1.0.0"

NOTES_DIR_NAME = "dev-notes"
NOTE_EXTENSION = ".md"

# wttr.in is free and needs no API key.  "?format=j1" asks for JSON.
WEATHER_URL = "https://wttr.in"

LOG_LEVEL_ENV = "DEV_NOTES_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Everything the tool server needs to know about its environment."""

    notes_dir: Path
    weather_url: str = WEATHER_URL
    note_extension: str = NOTE_EXTENSION
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build the production settings (store under the home directory)."""
        return cls(
            notes_dir=Path.home() / NOTES_DIR_NAME,
            log_level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
        )
