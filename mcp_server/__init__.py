"""
JuriMap MCP Server

This package provides the Model Context Protocol server that exposes the
applicability engine to agents.

The MCP server provides 4 tools:
  1. list_jurisdictions - Registered jurisdictions
  2. map_product - Full applicability report
  3. map_jurisdiction - One jurisdiction's result
  4. explain_risk - Risk classification with evaluated triggers

Usage:
    # Run as MCP server
    python -m mcp_server.server
"""

from .server import (
    explain_risk_impl,
    list_jurisdictions_impl,
    map_jurisdiction_impl,
    map_product_impl,
    mcp,
)

__all__ = [
    "mcp",
    "explain_risk_impl",
    "list_jurisdictions_impl",
    "map_jurisdiction_impl",
    "map_product_impl",
]
