# =============================================================================
# core/notes.py  -  Note Storage (a directory of markdown files)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Saves, lists and reads notes.  A note is one file, <slug>.md, inside the
#   store directory.  The file holds exactly the text the agent sent: no
#   front matter, no index file, nothing else to keep in sync.
#
# ERROR TIERS:
#   - ensure_store() failing (permission denied, path is a file) is FATAL:
#     the OSError propagates.  There is nothing sensible to return.
#   - read() of a missing or unreadable note is RECOVERABLE: it returns a
#     Failure whose text says which file was looked for and where.
#
# CONCURRENCY:
#   None is managed here.  Two saves to the same slug are last-writer-wins,
#   with whatever atomicity the filesystem's write gives us.
# =============================================================================

import logging
from datetime import datetime
from pathlib import Path

from core.config import NOTE_EXTENSION
from core.models import Failure, NoteSummary, Result, Success
from core.slug import slugify, title_from_filename

logger = logging.getLogger(__name__)

_MODIFIED_FORMAT = "%Y-%m-%d %H:%M:%S"


class NoteStore:
    """A directory of note files addressed by slugified title."""

    def __init__(self, directory: Path, extension: str = NOTE_EXTENSION):
        self.directory = Path(directory)
        self.extension = extension

    def ensure_store(self) -> None:
        """Create the store directory (and parents) if it is missing."""
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, title: str) -> Path:
        return self.directory / slugify(title, self.extension)

    # -------------------------------------------------------------------------
    # save
    # -------------------------------------------------------------------------
    def save(self, title: str, content: str) -> str:
        """Write `content` to the note for `title`, replacing any old version.

        newline="" keeps the text exactly as given, so read() returns the
        same characters on every platform.
        """
        self.ensure_store()
        path = self.path_for(title)
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
        logger.debug("Wrote %d chars to %s", len(content), path)
        return f'Saved note "{title}" to {path}'

    # -------------------------------------------------------------------------
    # list
    # -------------------------------------------------------------------------
    def summaries(self) -> list[NoteSummary]:
        """Every note file in directory order (not sorted)."""
        self.ensure_store()
        found = []
        for entry in self.directory.iterdir():
            if not entry.name.endswith(self.extension):
                continue
            try:
                stat = entry.stat()
            except FileNotFoundError:
                # Dangling symlink, or deleted since iterdir() saw it.
                logger.debug("Skipping vanished note %s", entry)
                continue
            modified = datetime.fromtimestamp(stat.st_mtime)
            found.append(NoteSummary(
                title=title_from_filename(entry.name, self.extension),
                filename=entry.name,
                modified=modified,
            ))
        return found

    def list(self) -> list[str]:
        """One summary line per note, or a single "no notes" line.

        The result is never empty, so callers can always join and return it.
        """
        summaries = self.summaries()
        if not summaries:
            return [f"No notes found in {self.directory}."]
        return [
            f"- {s.title}  ({s.filename})  last modified: "
            f"{s.modified.strftime(_MODIFIED_FORMAT)}"
            for s in summaries
        ]

    # -------------------------------------------------------------------------
    # read
    # -------------------------------------------------------------------------
    def read(self, title: str) -> Result:
        self.ensure_store()
        path = self.path_for(title)
        try:
            with open(path, encoding="utf-8", newline="") as fh:
                return Success(fh.read())
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Could not read %s: %s", path, exc)
            return Failure(
                f'Note "{title}" not found '
                f"(looked for {path.name} in {self.directory})."
            )
