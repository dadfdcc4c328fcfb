"""
Startup ingestion: parse the source PDF, split it into chunks and embed
them into an in-memory index.
"""

from .chunking_task import ChunkingTask, SlidingWindowSplitter
from .indexing_task import DocumentIndex, IndexingTask
from .parsing_task import ParsingTask
from .pipeline import IngestionPipeline

__all__ = [
    "ChunkingTask",
    "DocumentIndex",
    "IndexingTask",
    "IngestionPipeline",
    "ParsingTask",
    "SlidingWindowSplitter",
]
