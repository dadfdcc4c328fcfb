"""
Query domain models and schemas.

Request/response schemas for the query and health endpoints.

Dependencies: pydantic
System role: RAG query API contracts
"""

from pydantic import BaseModel, Field


class QueryRequest(BaseModel):
    """Request schema for a RAG query."""

    query: str | None = Field(default=None, description="Natural-language question")


class QueryResponse(BaseModel):
    """Response schema for an answered query."""

    answer: str = Field(description="Answer grounded in the indexed document")


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses."""

    error: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    chunk_count: int = 0
