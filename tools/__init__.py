# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP protocol and core/.
#   mcp_server.py:
#     1. Declares each tool's name, description and typed parameters
#     2. Lets FastMCP validate arguments before any core/ code runs
#     3. Converts core Success/Failure results into MCP tool results
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT touch the filesystem or the network (that's core/)
#   - They do NOT hold state between calls
# =============================================================================
