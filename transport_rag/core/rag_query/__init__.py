"""RAG query orchestration: retrieval, prompt assembly, generation."""

from .answer import normalize_answer
from .prompt import RAG_PROMPT, build_context, build_prompt
from .service import RAGService, build_chat_model, build_embeddings, build_rag_service

__all__ = [
    "RAG_PROMPT",
    "RAGService",
    "build_chat_model",
    "build_context",
    "build_embeddings",
    "build_prompt",
    "build_rag_service",
    "normalize_answer",
]
