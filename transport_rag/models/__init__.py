"""Request/response schemas for the RAG query HTTP API."""

from transport_rag.models.query import ErrorResponse, HealthResponse, QueryRequest, QueryResponse

__all__ = ["ErrorResponse", "HealthResponse", "QueryRequest", "QueryResponse"]
