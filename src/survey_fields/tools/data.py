"""Data loading tools: load_boundary, load_teams."""

import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state
from ..core.boundary import BoundaryRing
from ..core.roster import load_teams_file

logger = logging.getLogger(__name__)


def register_data_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_boundary(file_path: str) -> str:
        """Load the boundary polygon from a text file of lon,lat rows (degrees).

        Rows starting with '#' and rows that do not begin with two numbers are
        skipped. The ring is used as given: repeat the first vertex at the end
        of the file if the polygon should be closed.
        **Next:** load_teams, then add_survey, then generate_fields.

        Args:
            file_path: Absolute path to the boundary file.
        """
        try:
            boundary = BoundaryRing.from_file(file_path)
        except OSError as e:
            return f"Error: Could not read boundary file: {e}"

        if len(boundary) < 2:
            return f"Error: Boundary file {file_path} has fewer than two usable vertices."

        state.boundary = boundary
        state.boundary_source = file_path
        # Clear layouts since the boundary changed
        state.clear_fields()

        logger.info("Boundary loaded from %s (%d vertices)", file_path, len(boundary))
        closed = boundary.points[0] == boundary.points[-1]
        return (
            f"Boundary loaded: {len(boundary)} vertices, {len(boundary.edges())} edges "
            f"({'closed' if closed else 'open'} ring)"
        )

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_teams(file_path: str) -> str:
        """Load the team roster from a CSV file.

        The first row is a header. Each following row is name,abbr,#RRGGBB.
        Malformed rows are skipped.
        **Next:** add_survey for each team, then generate_fields.

        Args:
            file_path: Absolute path to the roster CSV.
        """
        try:
            teams = load_teams_file(file_path)
        except OSError as e:
            return f"Error: Could not read roster file: {e}"

        if not teams:
            return f"Error: Roster file {file_path} has no usable team rows."

        state.teams = teams
        state.clear_fields()

        logger.info("Roster loaded from %s (%d teams)", file_path, len(teams))
        return f"Teams loaded: {', '.join(t.name for t in teams)}"
