"""Survey tools: add_survey, remove_survey."""

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from ..state import state
from ..models import Coordinate, Survey


def register_survey_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def add_survey(
        team: str,
        start_lon: float,
        start_lat: float,
        end_lon: float,
        end_lat: float,
        field_lon: float,
        field_lat: float,
        bearing: float = 0.0,
    ) -> str:
        """Record a team's surveyed reference line.

        The line through start and end is clipped to the boundary around the
        field point, which must lie inside the boundary.
        **Next:** generate_fields.

        Args:
            team: Team name as it appears in the roster.
            start_lon/start_lat: First point on the surveyed line (degrees).
            end_lon/end_lat: Second point on the surveyed line (degrees).
            field_lon/field_lat: Interior field point (degrees).
            bearing: Label bearing in degrees clockwise from north.
        """
        try:
            survey = Survey(
                team=team,
                start=Coordinate(lon=start_lon, lat=start_lat),
                end=Coordinate(lon=end_lon, lat=end_lat),
                field=Coordinate(lon=field_lon, lat=field_lat),
                bearing=bearing,
            )
        except ValidationError as e:
            return f"Error: {e}"

        state.surveys = {**state.surveys, team: survey}
        state.clear_fields()

        known = {t.name for t in state.teams}
        note = "" if not known or team in known else " (warning: team not in roster)"
        return f"Survey recorded for {team}{note}. {len(state.surveys)} survey(s) total."

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def remove_survey(team: str) -> str:
        """Forget a team's survey.

        Args:
            team: Team name.
        """
        if team not in state.surveys:
            return f"Error: No survey recorded for {team}."
        state.surveys = {k: v for k, v in state.surveys.items() if k != team}
        state.clear_fields()
        return f"Survey removed for {team}. {len(state.surveys)} survey(s) left."
