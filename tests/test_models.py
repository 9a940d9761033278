"""Tests for input Pydantic models."""
import math

import pytest
from pydantic import ValidationError


class TestCoordinate:
    def test_valid_coordinate(self):
        from survey_fields.models import Coordinate
        c = Coordinate(lat=47.6, lon=-122.3)
        assert c.lat == 47.6

    def test_lat_out_of_range(self):
        from survey_fields.models import Coordinate
        with pytest.raises(ValidationError):
            Coordinate(lat=91.0, lon=0.0)

    def test_lon_out_of_range(self):
        from survey_fields.models import Coordinate
        with pytest.raises(ValidationError):
            Coordinate(lat=0.0, lon=-181.0)

    def test_to_angular(self):
        from survey_fields.models import Coordinate
        p = Coordinate(lat=45.0, lon=90.0).to_angular()
        assert p.lat == pytest.approx(math.pi / 4)
        assert p.lon == pytest.approx(math.pi / 2)


class TestTeam:
    def test_color_normalized(self):
        from survey_fields.models import Team
        assert Team(name="Red", color=" #ff00aa ").color == "#FF00AA"

    def test_invalid_color(self):
        from survey_fields.models import Team
        with pytest.raises(ValidationError):
            Team(name="Red", color="red")

    def test_empty_name(self):
        from survey_fields.models import Team
        with pytest.raises(ValidationError):
            Team(name="", color="#000000")


class TestSurvey:
    def _survey(self, **overrides):
        from survey_fields.models import Coordinate, Survey
        data = dict(
            team="Red",
            start=Coordinate(lon=0.0, lat=1.0),
            end=Coordinate(lon=2.0, lat=3.0),
            field=Coordinate(lon=1.0, lat=2.0),
            bearing=45.0,
        )
        data.update(overrides)
        return Survey(**data)

    def test_to_reference_line(self):
        line = self._survey().to_reference_line()
        assert line.start.as_degrees() == pytest.approx((0.0, 1.0))
        assert line.end.as_degrees() == pytest.approx((2.0, 3.0))
        assert line.field.as_degrees() == pytest.approx((1.0, 2.0))
        assert line.bearing == 45.0

    def test_bearing_out_of_range(self):
        with pytest.raises(ValidationError):
            self._survey(bearing=400.0)

    def test_round_trips_through_dict(self):
        from survey_fields.models import Survey
        survey = self._survey()
        assert Survey(**survey.model_dump()) == survey
