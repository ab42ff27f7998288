# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the dev-notes server: turning
# titles into filenames, reading and writing the notes directory, and
# fetching the weather.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any protocol code.  Every
#   module here is plain Python; the tests drive it with a temp directory
#   and a patched urlopen, no server involved.
# =============================================================================
