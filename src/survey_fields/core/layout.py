"""Field and label placement from a boundary-clipped survey line."""

import logging

from ..models import Survey, Team
from ..state import LayoutConfig
from .boundary import BoundaryRing, clip_to_boundary
from .geodesy import bearing_from_slope, destination, path_length_m
from .lines import Segment
from .models import AngularPoint, BoundedLine, FieldLayout, LatLonBox
from .projection import to_planar

logger = logging.getLogger(__name__)


def box_around(center: AngularPoint, width_m: float, height_m: float) -> LatLonBox:
    """Box whose edges sit half the width/height away from ``center``."""
    return LatLonBox(
        north=destination(center, 0.0, height_m / 2).lat_deg,
        south=destination(center, 180.0, height_m / 2).lat_deg,
        east=destination(center, 90.0, width_m / 2).lon_deg,
        west=destination(center, 270.0, width_m / 2).lon_deg,
    )


def adjust_width(box: LatLonBox, at: AngularPoint, width_m: float) -> LatLonBox:
    """Re-span the box east-west so it is ``width_m`` wide at latitude of ``at``.

    The box stays centred on its own mid-longitude.
    """
    lon = (box.east + box.west) / 2
    half_span = destination(at, 90.0, width_m / 2).lon_deg - at.lon_deg
    return box.model_copy(update={"east": lon + half_span, "west": lon - half_span})


def clipped_segment(line: BoundedLine) -> Segment:
    return Segment(a=to_planar(line.west), b=to_planar(line.east))


def layout_field(
    team: Team, survey: Survey, line: BoundedLine, config: LayoutConfig
) -> FieldLayout:
    """Place a team's field along its clipped line and its label at the field point."""
    segment = clipped_segment(line)
    tessellation = segment.tessellate()
    field_length = path_length_m(tessellation)
    center = line.midpoint()
    field_point = survey.field.to_angular()

    field_box = adjust_width(
        box_around(center, config.field_width_m, field_length),
        field_point,
        config.field_width_m,
    )
    return FieldLayout(
        team=team.name,
        abbr=team.abbr,
        color=team.color,
        line=line,
        field_box=field_box,
        field_bearing=bearing_from_slope(segment.a.slope(segment.b)),
        field_length_m=field_length,
        tessellation=tessellation,
        label_box=box_around(field_point, config.label_width_m, config.label_height_m),
        label_bearing=survey.bearing,
        label_region=box_around(field_point, config.label_diagonal_m, config.label_diagonal_m),
        center=center,
    )


def build_fields(
    boundary: BoundaryRing,
    teams: list[Team],
    surveys: dict[str, Survey],
    config: LayoutConfig,
) -> tuple[list[FieldLayout], list[str]]:
    """Lay out every surveyed team's field.

    Teams without a survey are passed over. Teams whose line the boundary
    does not bracket are logged and returned in the skipped list.
    """
    fields = []
    skipped = []
    for team in teams:
        survey = surveys.get(team.name)
        if survey is None:
            continue
        line = clip_to_boundary(boundary, survey.to_reference_line())
        if line is None:
            logger.warning("Boundary does not bracket the survey line for %s; skipping", team.name)
            skipped.append(team.name)
            continue
        fields.append(layout_field(team, survey, line, config))

    logger.info("Laid out %d field(s), skipped %d", len(fields), len(skipped))
    return fields, skipped
