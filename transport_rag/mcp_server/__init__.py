"""
MCP tool adapter.

Exposes the RAG query service as one tool, getTransportPolicy, over the
Model Context Protocol stdio transport.
"""

from .rag_client import RAGClient, coerce_answer
from .schemas import TransportPolicyInput, TransportPolicyOutput
from .server import create_server, main, serve
from .tool import TOOL_DESCRIPTION, TOOL_NAME, TransportPolicyTool

__all__ = [
    "RAGClient",
    "TOOL_DESCRIPTION",
    "TOOL_NAME",
    "TransportPolicyInput",
    "TransportPolicyOutput",
    "TransportPolicyTool",
    "coerce_answer",
    "create_server",
    "main",
    "serve",
]
