"""Layout configuration tool: set_layout_params."""

from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from ..state import state


def register_params_tools(mcp: FastMCP):

    @mcp.tool()
    def set_layout_params(
        field_width_ft: float | None = None,
        label_scale: float | None = None,
        label_height_ft: float | None = None,
    ) -> str:
        """Set field and label sizes.

        Can be called any time before generate_fields.
        **Next:** generate_fields (re-run after changing params to update layouts).

        Args:
            field_width_ft: Width of a drawn field in feet (default 160).
            label_scale: Multiplier from field/label feet to label box size (default 500).
            label_height_ft: Label height in feet before scaling (default 360).
        """
        p = state.layout_params
        for name, value in [
            ("field_width_ft", field_width_ft),
            ("label_scale", label_scale),
            ("label_height_ft", label_height_ft),
        ]:
            if value is not None:
                try:
                    setattr(p, name, value)
                except ValidationError as e:
                    return f"Error: {e}"

        # Clear layouts since params changed
        state.clear_fields()

        return (
            f"Layout params: field {p.field_width_ft}ft wide, "
            f"label scale {p.label_scale}, label height {p.label_height_ft}ft"
        )
