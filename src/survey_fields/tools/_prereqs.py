"""Prerequisite checking helpers for MCP tools."""


def require_state(state, *, boundary: bool = False, teams: bool = False, layouts: bool = False) -> None:
    """Raise ValueError with a descriptive message if required state is not set.

    Usage in a tool:
        try:
            require_state(state, boundary=True, teams=True)
        except ValueError as e:
            return f"Error: {e}"
    """
    if boundary and (state.boundary is None or len(state.boundary) < 2):
        raise ValueError(
            "Load a boundary first with load_boundary (at least two vertices)."
        )
    if teams and not state.teams:
        raise ValueError(
            "Load the team roster first with load_teams."
        )
    if layouts and not state.layouts:
        raise ValueError(
            "Generate fields first with generate_fields."
        )
