"""
RAG query service.

Holds the built document index and the chat model, and answers one query
at a time: retrieve top-K chunks, assemble the prompt, invoke the model
once, normalize its output. The service is constructed by
build_rag_service() during application startup and injected into the
HTTP handlers; it never mutates after construction.

Dependencies: langchain_ollama, langchain_core, transport_rag.core.ingestion
System role: RAG query orchestration
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_core.runnables import Runnable
from langchain_ollama import ChatOllama, OllamaEmbeddings

from transport_rag.configs import RAGServiceSettings, get_rag_service_settings
from transport_rag.core.exceptions import (
    GenerationError,
    InvalidQueryError,
    RetrievalError,
)
from transport_rag.core.ingestion import DocumentIndex, IngestionPipeline
from transport_rag.core.rag_query.answer import normalize_answer
from transport_rag.core.rag_query.prompt import build_context, build_prompt

logger = logging.getLogger(__name__)


def _error_message(error: Exception) -> str:
    return str(error) or type(error).__name__


class RAGService:
    """Answers natural-language queries grounded in the indexed document."""

    def __init__(
        self,
        index: DocumentIndex,
        llm: Runnable,
        settings: RAGServiceSettings | None = None,
    ) -> None:
        """
        Initialize the service with a fully built index.

        Args:
            index: Read-only document index
            llm: Chat model (or a retry-wrapped chat model)
            settings: Retrieval and prompt settings (uses defaults if None)
        """
        self._index = index
        self._llm = llm
        self._settings = settings or get_rag_service_settings()

    @property
    def index(self) -> DocumentIndex:
        """The document index backing this service."""
        return self._index

    async def answer(self, query: str | None) -> str:
        """
        Answer a query from the indexed document.

        Args:
            query: User question

        Returns:
            str: Normalized model answer

        Raises:
            InvalidQueryError: Query missing or empty (nothing is retrieved)
            RetrievalError: Similarity search failed
            GenerationError: Chat model call failed
        """
        if not query:
            raise InvalidQueryError("Missing query")

        logger.info(f"Query received | query_length={len(query)}")

        try:
            chunks = await self._index.similarity_search(query, k=self._settings.top_k)
        except Exception as e:
            logger.error(f"Retrieval failed: {type(e).__name__}: {e}")
            raise RetrievalError(_error_message(e)) from e

        context = build_context(chunks, self._settings.context_delimiter)
        prompt = build_prompt(context, query, self._settings.unknown_answer)
        logger.info(f"Retrieval complete | chunks={len(chunks)} | context_len={len(context)}")

        try:
            response = await self._llm.ainvoke(prompt)
        except Exception as e:
            logger.error(f"LLM generation failed: {type(e).__name__}: {e}")
            raise GenerationError(_error_message(e), model=self._settings.chat_model) from e

        answer = normalize_answer(response)
        logger.info(f"LLM response received | answer_length={len(answer)}")
        return answer


def build_embeddings(settings: RAGServiceSettings) -> Embeddings:
    """Create the Ollama embedding backend."""
    return OllamaEmbeddings(
        model=settings.embedding_model,
        base_url=settings.ollama_base_url,
    )


def build_chat_model(settings: RAGServiceSettings) -> Runnable:
    """
    Create the Ollama chat model.

    Timeout and retry are opt-in: with default settings the call waits
    indefinitely and a failure is surfaced immediately.

    Args:
        settings: RAG service settings

    Returns:
        Runnable: Chat model, wrapped with retry when llm_max_retries > 0
    """
    client_kwargs = {}
    if settings.llm_timeout_seconds is not None:
        client_kwargs["timeout"] = settings.llm_timeout_seconds

    llm = ChatOllama(
        model=settings.chat_model,
        temperature=settings.temperature,
        base_url=settings.ollama_base_url,
        client_kwargs=client_kwargs,
    )

    if settings.llm_max_retries > 0:
        return llm.with_retry(stop_after_attempt=settings.llm_max_retries + 1)
    return llm


async def build_rag_service(
    settings: RAGServiceSettings | None = None,
    embeddings: Embeddings | None = None,
    llm: Runnable | None = None,
) -> RAGService:
    """
    Run startup ingestion and construct the query service.

    Args:
        settings: RAG service settings (uses defaults if None)
        embeddings: Embedding backend override (Ollama if None)
        llm: Chat model override (Ollama if None)

    Returns:
        RAGService: Service over a fully built index

    Raises:
        DocumentLoadError: Source document missing or unreadable
        EmbeddingError: Embedding backend unreachable or failing
    """
    settings = settings or get_rag_service_settings()
    logger.info("Initializing RAG service...")

    pipeline = IngestionPipeline(
        embeddings=embeddings if embeddings is not None else build_embeddings(settings),
        chunk_size=settings.chunk_size,
        chunk_overlap=settings.chunk_overlap,
        strategy=settings.splitter,
    )
    index = await pipeline.run(settings.document_path)

    if llm is None:
        llm = build_chat_model(settings)
    logger.info(f"Chat model ready: {settings.chat_model}")

    return RAGService(index=index, llm=llm, settings=settings)
