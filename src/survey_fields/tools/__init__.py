"""MCP tool groups. Each module exposes a ``register_*_tools(mcp)`` function."""
