"""
mcp-brewcalc: MCP server for brewing measurement parsing and conversion.
"""
