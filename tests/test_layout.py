"""Tests for field and label layout."""
import math

import pytest

from survey_fields.core.boundary import BoundaryRing
from survey_fields.core.geodesy import EARTH_RADIUS_M
from survey_fields.core.layout import adjust_width, box_around, build_fields, layout_field
from survey_fields.core.models import AngularPoint, BoundedLine, LatLonBox
from survey_fields.models import Coordinate, Survey, Team
from survey_fields.state import LayoutConfig

SQUARE = BoundaryRing(points=tuple(
    AngularPoint.from_degrees(lon, lat)
    for lon, lat in [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0)]
))


def _survey(team, lat=5.0, field=(5.0, 5.0), bearing=30.0):
    return Survey(
        team=team,
        start=Coordinate(lon=-20.0, lat=lat),
        end=Coordinate(lon=30.0, lat=lat),
        field=Coordinate(lon=field[0], lat=field[1]),
        bearing=bearing,
    )


class TestBoxAround:
    def test_equator_box(self):
        box = box_around(AngularPoint.from_degrees(10.0, 0.0), 1_000.0, 2_000.0)
        assert box.north == pytest.approx(math.degrees(1_000.0 / EARTH_RADIUS_M))
        assert box.south == pytest.approx(-math.degrees(1_000.0 / EARTH_RADIUS_M))
        assert box.east - 10.0 == pytest.approx(math.degrees(500.0 / EARTH_RADIUS_M))
        assert 10.0 - box.west == pytest.approx(math.degrees(500.0 / EARTH_RADIUS_M))

    def test_box_widens_in_longitude_away_from_equator(self):
        equator = box_around(AngularPoint.from_degrees(0.0, 0.0), 1_000.0, 1_000.0)
        north = box_around(AngularPoint.from_degrees(0.0, 60.0), 1_000.0, 1_000.0)
        assert (north.east - north.west) == pytest.approx(2 * (equator.east - equator.west), rel=1e-3)


class TestAdjustWidth:
    def test_keeps_mid_longitude(self):
        box = LatLonBox(north=1.0, south=0.0, east=12.0, west=8.0)
        adjusted = adjust_width(box, AngularPoint.from_degrees(10.0, 0.0), 1_000.0)
        assert (adjusted.east + adjusted.west) / 2 == pytest.approx(10.0)
        assert adjusted.north == 1.0
        assert adjusted.south == 0.0

    def test_uses_span_at_given_latitude(self):
        box = LatLonBox(north=1.0, south=0.0, east=1.0, west=-1.0)
        at_equator = adjust_width(box, AngularPoint.from_degrees(0.0, 0.0), 1_000.0)
        at_sixty = adjust_width(box, AngularPoint.from_degrees(0.0, 60.0), 1_000.0)
        assert at_equator.east == pytest.approx(math.degrees(500.0 / EARTH_RADIUS_M))
        assert (at_sixty.east - at_sixty.west) == pytest.approx(
            2 * (at_equator.east - at_equator.west), rel=1e-3
        )


class TestLayoutField:
    def test_square_scenario(self):
        team = Team(name="Red", abbr="RED", color="#ff0000")
        line = BoundedLine(
            west=AngularPoint.from_degrees(0.0, 5.0),
            east=AngularPoint.from_degrees(10.0, 5.0),
        )
        layout = layout_field(team, _survey("Red"), line, LayoutConfig())

        assert layout.team == "Red"
        assert layout.color == "#FF0000"
        assert layout.field_bearing == pytest.approx(90.0)
        assert layout.label_bearing == 30.0
        assert layout.center.as_degrees() == pytest.approx((5.0, 5.0))
        # Along the parallel at 5 degrees
        expected_length = EARTH_RADIUS_M * math.radians(10.0) * math.cos(math.radians(5.0))
        assert layout.field_length_m == pytest.approx(expected_length, rel=1e-3)
        assert layout.tessellation[0].as_degrees() == pytest.approx((0.0, 5.0), abs=1e-9)
        assert layout.tessellation[-1].as_degrees() == pytest.approx((10.0, 5.0), abs=1e-9)
        # The field box spans the line north-south and is one field wide east-west
        assert layout.field_box.north > 5.0 > layout.field_box.south
        assert (layout.field_box.east + layout.field_box.west) / 2 == pytest.approx(5.0)

    def test_label_boxes_centered_on_field_point(self):
        team = Team(name="Blue", abbr="BLU", color="#0000ff")
        line = BoundedLine(
            west=AngularPoint.from_degrees(0.0, 5.0),
            east=AngularPoint.from_degrees(10.0, 5.0),
        )
        config = LayoutConfig()
        layout = layout_field(team, _survey("Blue", field=(4.0, 6.0)), line, config)
        for box in (layout.label_box, layout.label_region):
            assert (box.east + box.west) / 2 == pytest.approx(4.0)
            assert (box.north + box.south) / 2 == pytest.approx(6.0, abs=1e-6)
        # The region is square with the label's diagonal as its side
        region_height = layout.label_region.north - layout.label_region.south
        label_height = layout.label_box.north - layout.label_box.south
        assert region_height == pytest.approx(
            label_height * config.label_diagonal_m / config.label_height_m, rel=1e-6
        )


class TestBuildFields:
    def test_skips_unsurveyed_and_non_bracketing(self):
        teams = [
            Team(name="A", abbr="A", color="#111111"),
            Team(name="B", abbr="B", color="#222222"),
            Team(name="C", abbr="C", color="#333333"),
        ]
        surveys = {
            "A": _survey("A"),
            "C": _survey("C", lat=50.0),
        }
        fields, skipped = build_fields(SQUARE, teams, surveys, LayoutConfig())
        assert [f.team for f in fields] == ["A"]
        assert skipped == ["C"]

    def test_keeps_roster_order(self):
        teams = [Team(name=n, color="#123456") for n in ("Z", "M", "A")]
        surveys = {n: _survey(n, lat=lat) for n, lat in (("Z", 2.0), ("M", 5.0), ("A", 8.0))}
        fields, skipped = build_fields(SQUARE, teams, surveys, LayoutConfig())
        assert [f.team for f in fields] == ["Z", "M", "A"]
        assert skipped == []
