"""Field tools: clip_line, tessellate_line, generate_fields, get_field."""

import json
import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from ..state import state
from ..models import Coordinate
from ..core.boundary import clip_to_boundary
from ..core.layout import build_fields
from ..core.lines import Segment
from ..core.models import ReferenceLine
from ..core.projection import to_planar
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def _degrees(points) -> list[list[float]]:
    return [[round(p.lon_deg, 8), round(p.lat_deg, 8)] for p in points]


def register_field_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def clip_line(
        start_lon: float,
        start_lat: float,
        end_lon: float,
        end_lat: float,
        field_lon: float,
        field_lat: float,
    ) -> str:
        """Clip a single line to the loaded boundary around an interior point.

        Returns the west and east boundary crossings nearest the field point
        as JSON ([lon, lat] in degrees).
        **Requires:** load_boundary first.

        Args:
            start_lon/start_lat: First point on the line (degrees).
            end_lon/end_lat: Second point on the line (degrees).
            field_lon/field_lat: Interior reference point (degrees).
        """
        try:
            require_state(state, boundary=True)
            reference = ReferenceLine(
                start=Coordinate(lon=start_lon, lat=start_lat).to_angular(),
                end=Coordinate(lon=end_lon, lat=end_lat).to_angular(),
                field=Coordinate(lon=field_lon, lat=field_lat).to_angular(),
            )
        except ValueError as e:
            return f"Error: {e}"

        line = clip_to_boundary(state.boundary, reference)
        if line is None:
            logger.debug("clip_line: no bracketing crossings for field (%s, %s)", field_lon, field_lat)
            return "Error: The boundary does not cross this line on both sides of the field point."
        return json.dumps({
            "west": list(line.west.as_degrees()),
            "east": list(line.east.as_degrees()),
        })

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def tessellate_line(start_lon: float, start_lat: float, end_lon: float, end_lat: float) -> str:
        """Sample the straight Mercator line between two points as a polyline.

        Returns a JSON list of [lon, lat] pairs (degrees), west to east.

        Args:
            start_lon/start_lat: One end (degrees).
            end_lon/end_lat: Other end (degrees).
        """
        try:
            start = Coordinate(lon=start_lon, lat=start_lat).to_angular()
            end = Coordinate(lon=end_lon, lat=end_lat).to_angular()
        except ValidationError as e:
            return f"Error: {e}"
        segment = Segment(a=to_planar(start), b=to_planar(end))
        return json.dumps(_degrees(segment.tessellate()))

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def generate_fields() -> str:
        """Clip every team's survey line to the boundary and lay out its field.

        Teams without a survey are left out. Teams whose line the boundary
        does not cross on both sides of the field point are reported as skipped.
        **Requires:** load_boundary, load_teams and add_survey first.
        **Next:** get_field to read a team's layout, get_status for an overview.
        """
        try:
            require_state(state, boundary=True, teams=True)
        except ValueError as e:
            return f"Error: {e}"

        layouts, skipped = build_fields(
            state.boundary, state.teams, state.surveys, state.layout_params,
        )
        state.layouts = layouts
        state.skipped = skipped

        lines = [f"Generated {len(layouts)} field(s)."]
        for layout in layouts:
            lines.append(
                f"  {layout.team}: {layout.field_length_m:.0f}m, "
                f"bearing {layout.field_bearing:.1f}°, {len(layout.tessellation)} points"
            )
        if skipped:
            lines.append(f"Skipped (boundary does not bracket line): {', '.join(skipped)}")
        return "\n".join(lines)

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_field(team: str) -> str:
        """Return one team's generated field layout as JSON.

        **Requires:** generate_fields first.

        Args:
            team: Team name.
        """
        try:
            require_state(state, layouts=True)
        except ValueError as e:
            return f"Error: {e}"

        layout = state.field_for(team)
        if layout is None:
            return f"Error: No field generated for {team}."

        data = layout.summary()
        data.update({
            "abbr": layout.abbr,
            "color": layout.color,
            "field_box": layout.field_box.model_dump(),
            "label_box": layout.label_box.model_dump(),
            "label_region": layout.label_region.model_dump(),
            "line": _degrees(layout.tessellation),
        })
        return json.dumps(data, indent=2)
