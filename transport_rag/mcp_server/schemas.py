"""
Tool input/output schemas.

The JSON schemas generated from these models are advertised to MCP
clients as the tool's inputSchema and outputSchema.

Dependencies: pydantic
System role: Tool adapter external contract
"""

from pydantic import BaseModel, Field


class TransportPolicyInput(BaseModel):
    """Arguments of the getTransportPolicy tool."""

    query: str = Field(
        min_length=1,
        description="The transport policy question to answer",
    )


class TransportPolicyOutput(BaseModel):
    """Structured result of the getTransportPolicy tool."""

    answer: str = Field(description="The answer to the transport policy question")
