"""
Text chunking task.

Splits page Documents into overlapping chunks. The default splitter cuts
fixed-size character windows whose neighbours share exactly chunk_overlap
characters; the recursive strategy prefers paragraph and sentence
boundaries instead.

Dependencies: langchain_text_splitters
System role: Second stage of startup ingestion
"""

from typing import Any, Literal

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter, TextSplitter


class SlidingWindowSplitter(TextSplitter):
    """Fixed-size character windows advancing by chunk_size - chunk_overlap."""

    def __init__(self, chunk_size: int = 800, chunk_overlap: int = 200, **kwargs: Any) -> None:
        if chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise ValueError(
                f"chunk_overlap must satisfy 0 <= overlap < chunk_size, "
                f"got overlap={chunk_overlap}, chunk_size={chunk_size}"
            )
        super().__init__(chunk_size=chunk_size, chunk_overlap=chunk_overlap, **kwargs)

    def split_text(self, text: str) -> list[str]:
        step = self._chunk_size - self._chunk_overlap
        chunks = []
        start = 0
        while start < len(text):
            end = start + self._chunk_size
            chunks.append(text[start:end])
            if end >= len(text):
                break
            start += step
        return chunks


class ChunkingTask:
    """Split documents into chunks with the configured splitter."""

    def __init__(
        self,
        chunk_size: int = 800,
        chunk_overlap: int = 200,
        strategy: Literal["window", "recursive"] = "window",
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
            strategy: 'window' for exact windows, 'recursive' for separator-aware splits
        """
        if strategy == "recursive":
            self._splitter: TextSplitter = RecursiveCharacterTextSplitter(
                chunk_size=chunk_size,
                chunk_overlap=chunk_overlap,
                add_start_index=True,
                length_function=len,
            )
        elif strategy == "window":
            self._splitter = SlidingWindowSplitter(
                chunk_size=chunk_size,
                chunk_overlap=chunk_overlap,
                add_start_index=True,
            )
        else:
            raise ValueError(f"Unknown chunking strategy: {strategy}")

    def chunk(self, documents: list[Document]) -> list[Document]:
        """
        Split documents into chunks.

        Args:
            documents: LangChain Documents to split

        Returns:
            list[Document]: Non-blank chunks with preserved metadata and start_index

        Raises:
            ValueError: When documents list is empty
        """
        if not documents:
            raise ValueError("No documents to chunk")

        return [
            chunk
            for chunk in self._splitter.split_documents(documents)
            if chunk.page_content.strip()
        ]
