"""MCP server for survey-fields.

Registers all tools and runs via stdio transport.
"""

from mcp.server.fastmcp import FastMCP

from .tools.data import register_data_tools
from .tools.survey import register_survey_tools
from .tools.fields import register_field_tools
from .tools.params import register_params_tools
from .tools.session import register_session_tools
from .tools.status import register_status_tools

mcp = FastMCP(
    "survey-fields",
    instructions="Clip surveyed reference lines to a boundary polygon and lay out fields for map rendering",
)

# Register all tool groups
register_data_tools(mcp)
register_survey_tools(mcp)
register_field_tools(mcp)
register_params_tools(mcp)
register_session_tools(mcp)
register_status_tools(mcp)


def main():
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
