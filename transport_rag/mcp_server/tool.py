"""
getTransportPolicy tool.

Dependencies: mcp, transport_rag.mcp_server.rag_client
System role: Tool definition and invocation for the MCP server
"""

from typing import Any

import mcp.types as types

from .rag_client import RAGClient, coerce_answer
from .schemas import TransportPolicyInput, TransportPolicyOutput

TOOL_NAME = "getTransportPolicy"
TOOL_DESCRIPTION = "Query the local RAG system for transport policy answers"


class TransportPolicyTool:
    """Forward transport policy questions to the RAG service."""

    name = TOOL_NAME

    def __init__(self, client: RAGClient) -> None:
        self._client = client

    def definition(self) -> types.Tool:
        """Tool metadata advertised in tools/list."""
        return types.Tool(
            name=TOOL_NAME,
            description=TOOL_DESCRIPTION,
            inputSchema=TransportPolicyInput.model_json_schema(),
            outputSchema=TransportPolicyOutput.model_json_schema(),
        )

    async def call(self, arguments: dict[str, Any]) -> tuple[list[types.TextContent], dict[str, Any]]:
        """
        Invoke the tool.

        Args:
            arguments: Tool arguments, already checked against the input schema

        Returns:
            tuple: Display content and structured content carrying the same answer

        Raises:
            RAGServiceError: The RAG service answered with a failure status
        """
        params = TransportPolicyInput.model_validate(arguments)
        answer = coerce_answer(await self._client.query(params.query))
        output = TransportPolicyOutput(answer=answer)

        return [types.TextContent(type="text", text=output.answer)], output.model_dump()
