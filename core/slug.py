# =============================================================================
# core/slug.py  -  Title -> Filename
# =============================================================================
#
#   "Project Ideas"      -> "project-ideas.md"
#   "  Bug Backlog!! "   -> "bug-backlog.md"
#   "???"                -> ".md"
#
# The filename is a pure function of the title.  Two titles that normalize to
# the same slug ("Project Ideas", "project ideas") address the same file, and
# saving one overwrites the other.
# =============================================================================

import re

from core.config import NOTE_EXTENSION

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_SEPARATOR = "-"


def slugify(title: str, extension: str = NOTE_EXTENSION) -> str:
    """Turn a free-text title into a filesystem-safe filename."""
    slug = _NON_ALNUM.sub(_SEPARATOR, title.lower().strip())
    return slug.strip(_SEPARATOR) + extension


def title_from_filename(filename: str, extension: str = NOTE_EXTENSION) -> str:
    """Best-effort display title for a note file ("bug-backlog.md" -> "bug backlog")."""
    if extension and filename.endswith(extension):
        filename = filename[: -len(extension)]
    return filename.replace(_SEPARATOR, " ")
