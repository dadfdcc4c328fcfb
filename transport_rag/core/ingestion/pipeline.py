"""
Startup ingestion orchestrator.

Coordinates parsing, chunking and indexing as one sequential pipeline.
Any stage failure propagates to the caller: the service must not start.

Dependencies: All ingestion task modules
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import time

from langchain_core.embeddings import Embeddings

from .chunking_task import ChunkingTask
from .indexing_task import DocumentIndex, IndexingTask
from .parsing_task import ParsingTask

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Orchestrate document ingestion: parse -> chunk -> embed+index."""

    def __init__(
        self,
        embeddings: Embeddings,
        chunk_size: int = 800,
        chunk_overlap: int = 200,
        strategy: str = "window",
    ) -> None:
        self._parsing_task = ParsingTask()
        self._chunking_task = ChunkingTask(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            strategy=strategy,
        )
        self._indexing_task = IndexingTask(embeddings)

    async def run(self, file_path: str) -> DocumentIndex:
        """
        Build the index for one document.

        Args:
            file_path: Path to the source PDF

        Returns:
            DocumentIndex: Fully built index

        Raises:
            DocumentLoadError: Document missing or unreadable
            EmbeddingError: Embedding backend failed
        """
        start_time = time.perf_counter()

        # PDF extraction is blocking
        pages = await asyncio.to_thread(self._parsing_task.parse, file_path)
        logger.info(f"PDF loaded: {len(pages)} pages from {file_path}")

        chunks = self._chunking_task.chunk(pages)
        logger.info(f"Chunked into {len(chunks)} segments")

        index = await self._indexing_task.build(chunks)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"Index ready: chunks={index.chunk_count}, elapsed_ms={elapsed_ms:.2f}")
        return index
