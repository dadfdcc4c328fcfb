"""
Health check API endpoint.

Routes: GET /health

Dependencies: transport_rag.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends

from transport_rag.api.deps import get_rag_service
from transport_rag.core.rag_query import RAGService
from transport_rag.models import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(rag_service: RAGService = Depends(get_rag_service)) -> HealthResponse:
    """Report readiness and the size of the in-memory index."""
    return HealthResponse(
        status="healthy",
        message="Index loaded",
        chunk_count=rag_service.index.chunk_count,
    )
