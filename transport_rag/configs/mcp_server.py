"""
Tool adapter configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Configuration for the MCP stdio server
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from transport_rag.configs.base import BaseSettings


class ToolAdapterSettings(BaseSettings):
    """Settings for the MCP server that forwards tool calls to the RAG service."""

    model_config = SettingsConfigDict(env_prefix="TRANSPORT_MCP_")

    rag_base_url: str = Field(
        default="http://localhost:3001",
        description="Base URL of the RAG query service",
    )
    query_path: str = Field(default="/query", description="Query endpoint path")
    request_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="HTTP timeout for RAG service calls (None waits indefinitely)",
    )

    server_name: str = Field(default="transport-mcp", description="Advertised MCP server name")
    server_version: str = Field(default="1.0.0", description="Advertised MCP server version")


@lru_cache
def get_tool_adapter_settings() -> ToolAdapterSettings:
    """Get cached tool adapter settings instance."""
    return ToolAdapterSettings()
