"""Session state for the survey-fields MCP server.

Holds everything for the current run: the boundary ring, the team roster,
per-team surveys, layout parameters and the generated field layouts.
"""

import math
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from survey_fields.core.boundary import BoundaryRing
from survey_fields.core.models import FieldLayout
from survey_fields.models import Survey, Team

FEET_TO_M = 0.3048


class LayoutConfig(BaseModel):
    """Field and label sizes, set once and passed to the layout code."""
    model_config = ConfigDict(validate_assignment=True)

    field_width_ft: float = Field(default=160.0, gt=0)
    label_scale: float = Field(default=500.0, gt=0)
    label_height_ft: float = Field(default=360.0, gt=0)

    @property
    def field_width_m(self) -> float:
        return self.field_width_ft * FEET_TO_M

    @property
    def label_width_m(self) -> float:
        return self.field_width_m * self.label_scale

    @property
    def label_height_m(self) -> float:
        return self.label_height_ft * FEET_TO_M * self.label_scale

    @property
    def label_diagonal_m(self) -> float:
        return math.hypot(self.label_width_m, self.label_height_m)


class SessionState(BaseModel):
    boundary: Optional[BoundaryRing] = None
    boundary_source: str = ""
    teams: list[Team] = []
    surveys: dict[str, Survey] = {}
    layout_params: LayoutConfig = Field(default_factory=LayoutConfig)
    layouts: list[FieldLayout] = []
    skipped: list[str] = []

    def clear_fields(self) -> None:
        self.layouts = []
        self.skipped = []

    def field_for(self, team: str) -> Optional[FieldLayout]:
        for field in self.layouts:
            if field.team == team:
                return field
        return None

    def summary(self) -> dict:
        return {
            "boundary": {
                "loaded": self.boundary is not None,
                "vertices": len(self.boundary) if self.boundary is not None else 0,
                "source": self.boundary_source or None,
            },
            "teams": [t.name for t in self.teams],
            "surveys": sorted(self.surveys),
            "layout_params": {
                "field_width_ft": self.layout_params.field_width_ft,
                "label_scale": self.layout_params.label_scale,
                "label_height_ft": self.layout_params.label_height_ft,
            },
            "fields": {
                "generated": [f.team for f in self.layouts],
                "skipped": self.skipped,
            },
        }


# Global session state, one per MCP server process
state = SessionState()
