"""
Embedding and indexing task.

Embeds every chunk once through the embedding backend and holds the
(chunk, vector) pairs in a LangChain InMemoryVectorStore. The resulting
DocumentIndex is read-only: it only exposes similarity search.

Dependencies: langchain_core.vectorstores, langchain_core.embeddings
System role: Third stage of startup ingestion, retrieval at query time
"""

import logging

from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore

from transport_rag.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class DocumentIndex:
    """In-memory similarity index over the chunks of one document."""

    def __init__(self, store: InMemoryVectorStore, chunk_count: int) -> None:
        self._store = store
        self._chunk_count = chunk_count

    @property
    def chunk_count(self) -> int:
        """Number of indexed chunks."""
        return self._chunk_count

    async def similarity_search(self, query: str, k: int = 5) -> list[Document]:
        """
        Return the k chunks most similar to the query.

        Args:
            query: Raw query text (embedded with the index's embedding backend)
            k: Number of chunks to return

        Returns:
            list[Document]: Chunks ordered by decreasing cosine similarity
        """
        return await self._store.asimilarity_search(query, k=k)


class IndexingTask:
    """Embed chunks and build the in-memory index."""

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Initialize indexing task.

        Args:
            embeddings: Embedding backend used for chunks and, later, queries
        """
        self._embeddings = embeddings

    async def build(self, chunks: list[Document]) -> DocumentIndex:
        """
        Embed all chunks and build the index.

        Args:
            chunks: Chunk Documents to index

        Returns:
            DocumentIndex: Ready-to-query index

        Raises:
            EmbeddingError: When there is nothing to index or the backend fails
        """
        if not chunks:
            raise EmbeddingError("No chunks to index")

        store = InMemoryVectorStore(embedding=self._embeddings)
        try:
            await store.aadd_documents(chunks)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to generate embeddings: {e}",
                details={"chunk_count": len(chunks)},
            ) from e

        logger.info(f"Indexed {len(chunks)} chunks in memory")
        return DocumentIndex(store, chunk_count=len(chunks))
