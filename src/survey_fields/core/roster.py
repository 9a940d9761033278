"""Team roster parsing (``name,abbr,#RRGGBB`` rows under a header)."""

import logging
from typing import Iterable, Optional

from pydantic import ValidationError

from survey_fields.models import Team

logger = logging.getLogger(__name__)


def parse_team_line(line: str) -> Optional[Team]:
    """Parse one roster row, or return None if it is malformed."""
    fields = [f.strip() for f in line.strip().split(",")]
    if len(fields) < 3 or not fields[0]:
        return None
    try:
        return Team(name=fields[0], abbr=fields[1], color=fields[2])
    except ValidationError:
        return None


def load_teams(lines: Iterable[str]) -> list[Team]:
    """Parse a roster, skipping the header row and any malformed rows."""
    teams = []
    for i, line in enumerate(lines):
        if i == 0 or not line.strip():
            continue
        team = parse_team_line(line)
        if team is None:
            logger.warning("Skipping malformed roster row %d: %r", i + 1, line.rstrip())
            continue
        teams.append(team)
    return teams


def load_teams_file(file_path: str) -> list[Team]:
    with open(file_path, "r") as f:
        return load_teams(f)
