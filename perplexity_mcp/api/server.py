# perplexity_mcp/api/server.py
import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from perplexity_mcp.config.settings import Settings
from perplexity_mcp.core.bridge import SearchBridge
from perplexity_mcp.core.exceptions import (
    BridgeException,
    InvalidInputException,
    UnknownCapabilityException
)

logger = logging.getLogger(__name__)

SERVER_NAME = "perplexity-ai"
SERVER_VERSION = "0.1.0"

def to_mcp_error(error: BridgeException) -> McpError:
    """Map a bridge failure onto a JSON-RPC error code"""
    if isinstance(error, UnknownCapabilityException):
        code = types.METHOD_NOT_FOUND
    elif isinstance(error, InvalidInputException):
        code = types.INVALID_PARAMS
    else:
        code = types.INTERNAL_ERROR
    envelope = error.to_response()
    return McpError(types.ErrorData(
        code=code,
        message=envelope.error,
        data={"error_code": envelope.error_code}
    ))

async def handle_list_tools(bridge: SearchBridge) -> List[types.Tool]:
    return [
        types.Tool(
            name=descriptor.name,
            description=descriptor.description,
            inputSchema=descriptor.input_schema
        )
        for descriptor in bridge.list_capabilities()
    ]

async def handle_call_tool(
    bridge: SearchBridge,
    name: str,
    arguments: Optional[Dict[str, Any]]
) -> List[types.TextContent]:
    try:
        blocks = await bridge.invoke(name, arguments)
    except BridgeException as e:
        logger.error(f"[MCP Error] {e.error_code}: {e.detail}")
        raise to_mcp_error(e) from e
    return [types.TextContent(type="text", text=block.text) for block in blocks]

def create_server(bridge: SearchBridge) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return await handle_list_tools(bridge)

    # McpError must reach the session to go out as a JSON-RPC error;
    # @server.call_tool() would turn it into an isError result.
    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        content = await handle_call_tool(bridge, request.params.name, request.params.arguments)
        return types.ServerResult(types.CallToolResult(content=content))

    server.request_handlers[types.CallToolRequest] = call_tool

    return server

async def run_stdio(settings: Settings):
    """Serve the bridge over stdio until the host closes the stream"""
    async with SearchBridge(settings) as bridge:
        server = create_server(bridge)
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Perplexity AI MCP server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options()
            )
