"""
FastMCP server definition for the brewing calculator.
"""

from fastmcp import FastMCP

from mcp_brewcalc.tools import register_tools

# Create the MCP server
mcp = FastMCP(
    "mcp-brewcalc",
    instructions=(
        "Brewing measurement parsing and unit conversion. "
        "Parse strings such as '5 gal', '20C' or '2.5kg'."
    ),
)

# Register all tools
register_tools(mcp)
