# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through the system.  They carry no behavior; formatting and I/O live in
# core/notes.py and core/weather.py.
#
# THE RESULT ENVELOPE:
#   Every tool answers with either a Success or a Failure, each carrying one
#   block of text.  Core functions RETURN a Failure for problems the caller
#   should hear about (missing note, weather service said no) instead of
#   raising, so the tools/ layer can hand the agent a clean error message
#   and keep serving the next request.
# =============================================================================

from dataclasses import dataclass
from datetime import datetime
from typing import Union


# -----------------------------------------------------------------------------
# Result envelope
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Success:
    """A tool call that worked.  `text` is returned to the agent verbatim."""

    text: str
    is_error: bool = False


@dataclass(frozen=True)
class Failure:
    """A recoverable, reported error.  The server keeps running."""

    text: str
    is_error: bool = True


Result = Union[Success, Failure]


# -----------------------------------------------------------------------------
# NoteSummary - one row of list_notes output
# -----------------------------------------------------------------------------
@dataclass
class NoteSummary:
    """A note file as seen by the listing, without its content."""

    title: str                         # Display title: "project ideas"
    filename: str                      # "project-ideas.md"
    modified: datetime                 # Local time of the last write


# -----------------------------------------------------------------------------
# WeatherSnapshot - current conditions for one location
# -----------------------------------------------------------------------------
# Values stay as the strings wttr.in sends.  We only reformat them, so there
# is nothing to gain from parsing "72" into an int and back.
# -----------------------------------------------------------------------------
@dataclass
class WeatherSnapshot:
    """Current conditions, built per request and never stored."""

    location: str                      # As the caller typed it: "New York"
    temp_f: str                        # "72"
    temp_c: str                        # "22"
    condition: str                     # "Partly cloudy"
    humidity: str                      # Percent, without the sign: "64"
    wind_mph: str                      # "9"
    wind_dir: str                      # 16-point compass: "NNW"
