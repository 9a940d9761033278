"""Session persistence tools: save_session, load_session."""

import json
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from ..state import state, LayoutConfig
from ..core.boundary import BoundaryRing
from ..core.models import AngularPoint
from ..models import Survey, Team

logger = logging.getLogger(__name__)


def _default_path() -> Path:
    return Path.home() / ".cache" / "survey-fields" / "session.json"


def register_session_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def save_session(path: str | None = None) -> str:
        """Save the current session to a JSON file for later resumption.

        Saves the boundary vertices, roster, surveys and layout params.
        Does NOT save generated fields (re-run generate_fields after loading).
        **Next:** load_session in a future session to restore this configuration.

        Args:
            path: Where to save. Default: ~/.cache/survey-fields/session.json
        """
        save_path = Path(path) if path else _default_path()
        save_path.parent.mkdir(parents=True, exist_ok=True)

        data: dict = {
            "boundary": None,
            "teams": [t.model_dump() for t in state.teams],
            "surveys": [s.model_dump() for s in state.surveys.values()],
            "layout_params": state.layout_params.model_dump(),
        }

        if state.boundary is not None:
            data["boundary"] = {
                "source": state.boundary_source,
                "points": [list(p.as_degrees()) for p in state.boundary.points],
            }

        with open(save_path, "w") as f:
            json.dump(data, f, indent=2)

        logger.info("Session saved to %s", save_path)
        return f"Session saved to {save_path}"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_session(path: str | None = None) -> str:
        """Load a previously saved session from a JSON file.

        Restores the boundary, roster, surveys and layout params. Generated
        fields are cleared.
        **Next:** generate_fields.

        Args:
            path: Path to load from. Default: ~/.cache/survey-fields/session.json
        """
        load_path = Path(path) if path else _default_path()

        if not load_path.exists():
            return f"Error: Session file not found at {load_path}"

        try:
            with open(load_path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            return f"Error: Invalid session file: {e}"

        try:
            boundary = None
            if data.get("boundary"):
                b = data["boundary"]
                boundary = BoundaryRing(points=tuple(
                    AngularPoint.from_degrees(lon, lat) for lon, lat in b["points"]
                ))
            teams = [Team(**t) for t in data.get("teams", [])]
            surveys = {s["team"]: Survey(**s) for s in data.get("surveys", [])}
            layout_params = LayoutConfig(**data.get("layout_params", {}))
        except (ValidationError, KeyError, TypeError, ValueError) as e:
            return f"Error: Invalid session file: {e}"

        state.boundary = boundary
        state.boundary_source = data["boundary"].get("source", "") if boundary is not None else ""
        state.teams = teams
        state.surveys = surveys
        state.layout_params = layout_params
        state.clear_fields()

        restored = []
        if boundary is not None:
            restored.append(f"boundary ({len(boundary)} vertices)")
        restored.append(f"{len(teams)} team(s)")
        restored.append(f"{len(surveys)} survey(s)")
        restored.append("layout_params")

        logger.info("Session loaded from %s", load_path)
        return (
            f"Session restored from {load_path}. "
            f"Restored: {', '.join(restored)}. "
            "Still needed: generate_fields."
        )
