"""Status tool: get_status."""

import json
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state


def register_status_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_status() -> str:
        """Return a summary of the current session.

        Shows whether a boundary and roster are loaded, which teams have
        surveys, the layout parameters, and which fields were generated or
        skipped.
        """
        return json.dumps(state.summary(), indent=2)
