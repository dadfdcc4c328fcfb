"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from transport_rag.configs.mcp_server import ToolAdapterSettings, get_tool_adapter_settings
from transport_rag.configs.rag_service import RAGServiceSettings, get_rag_service_settings

__all__ = [
    "RAGServiceSettings",
    "ToolAdapterSettings",
    "get_rag_service_settings",
    "get_tool_adapter_settings",
]
