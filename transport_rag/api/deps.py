"""
Dependency injection for API routes.

Dependencies: fastapi, transport_rag.core
System role: Resolves the startup-built RAG service for request handlers
"""

from fastapi import Request

from transport_rag.core.exceptions import ServiceNotReadyError
from transport_rag.core.rag_query import RAGService


def get_rag_service(request: Request) -> RAGService:
    """
    Get the RAG service built during application startup.

    Args:
        request: Incoming request (used to reach app.state)

    Returns:
        RAGService: Initialized query service

    Raises:
        ServiceNotReadyError: Startup has not finished building the index
    """
    service = getattr(request.app.state, "rag_service", None)
    if service is None:
        raise ServiceNotReadyError()
    return service
