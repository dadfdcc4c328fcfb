"""
RAG query endpoint.

Routes:
- POST /query - Answer a question from the indexed transport policy

Errors are raised as domain exceptions and rendered as {"error": ...}
bodies by the handlers registered in transport_rag.api.main.

Dependencies: transport_rag.core.rag_query
System role: Query HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from transport_rag.api.deps import get_rag_service
from transport_rag.core.rag_query import RAGService
from transport_rag.models import ErrorResponse, QueryRequest, QueryResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["query"])


@router.post(
    "/query",
    response_model=QueryResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def query(
    request: QueryRequest,
    rag_service: RAGService = Depends(get_rag_service),
) -> QueryResponse:
    """
    Answer a query with retrieval-augmented generation.

    Args:
        request: QueryRequest with the question
        rag_service: Injected RAGService

    Returns:
        QueryResponse: Answer text

    Raises:
        InvalidQueryError: Missing or empty query (400)
        RetrievalError / GenerationError: Backend failure (500)
    """
    answer = await rag_service.answer(request.query)
    return QueryResponse(answer=answer)
