"""
MCP stdio server.

Registers the getTransportPolicy tool on a low-level MCP Server and serves
it over stdin/stdout. Logs go to stderr.

Dependencies: mcp, transport_rag.configs, transport_rag.observability
System role: Tool adapter process entry point
"""

import asyncio
import logging
import sys
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from transport_rag.configs import ToolAdapterSettings, get_tool_adapter_settings
from transport_rag.observability.logger import configure_logging

from .rag_client import RAGClient
from .tool import TransportPolicyTool

logger = logging.getLogger(__name__)


def create_server(
    tool: TransportPolicyTool,
    settings: ToolAdapterSettings | None = None,
) -> Server:
    """
    Create the MCP server with the tool registered.

    The SDK validates arguments against the input schema before the tool
    runs and structured results against the output schema afterwards.
    Exceptions raised by the tool are returned as isError results.

    Args:
        tool: Tool to expose
        settings: Adapter settings for the advertised name and version

    Returns:
        Server: Configured low-level MCP server
    """
    settings = settings or get_tool_adapter_settings()
    server = Server(settings.server_name, version=settings.server_version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [tool.definition()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]):
        if name != tool.name:
            raise ValueError(f"Unknown tool: {name}")
        return await tool.call(arguments)

    return server


async def serve(settings: ToolAdapterSettings | None = None) -> None:
    """Connect the stdio transport once and serve until it closes."""
    settings = settings or get_tool_adapter_settings()

    client = RAGClient(
        base_url=settings.rag_base_url,
        query_path=settings.query_path,
        timeout=settings.request_timeout_seconds,
    )
    server = create_server(TransportPolicyTool(client), settings)

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Transport MCP Server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main() -> None:
    """Console entry point; exits with status 1 on a fatal error."""
    settings = get_tool_adapter_settings()
    configure_logging(settings.effective_log_level, stream=sys.stderr)

    try:
        asyncio.run(serve(settings))
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
