"""
MCP stdio transport.

Framing and the JSON-RPC session are handled by the ``mcp`` SDK; this module
only adapts the tool registry to it.
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from solana_mcp import mcp as catalogue
from solana_mcp.envelope import InvocationResult
from solana_mcp.registry import ToolContract, ToolRegistry
from solana_mcp.solana_rpc import default_client

MCP_SERVER_NAME = "solana-mcp"
MCP_SERVER_VERSION = "1.0.0"
READY_MESSAGE = "Solana MCP server running on stdio"


def to_mcp_tool(contract: ToolContract) -> types.Tool:
    return types.Tool(
        name=contract.name,
        description=contract.description,
        inputSchema=contract.input_schema(),
    )


def to_call_tool_result(result: InvocationResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        isError=result.is_error,
    )


def build_server(registry: ToolRegistry) -> Server:
    server: Server = Server(MCP_SERVER_NAME, version=MCP_SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [to_mcp_tool(contract) for contract in registry.contracts()]

    # The registry does its own argument validation and reports failures in-band.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        result = await catalogue.call_tool(name, arguments, registry=registry)
        return to_call_tool_result(result)

    return server


def announce_ready() -> None:
    """Write the readiness line to stderr whatever the configured log level."""
    print(READY_MESSAGE, file=sys.stderr, flush=True)


async def serve(registry: Optional[ToolRegistry] = None) -> None:
    """Serve tools over stdin/stdout until the host closes the stream."""
    # Registration errors surface here, before stdio is opened.
    registry = registry if registry is not None else catalogue.build_registry()
    server = build_server(registry)
    try:
        async with stdio_server() as (read_stream, write_stream):
            announce_ready()
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await default_client.aclose()
