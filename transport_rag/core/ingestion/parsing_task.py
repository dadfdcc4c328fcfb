"""
Document parsing task using LangChain PyPDFLoader.

Converts the source PDF into one LangChain Document per page.

Dependencies: langchain_community.document_loaders
System role: First stage of startup ingestion
"""

from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader
from langchain_core.documents import Document

from transport_rag.core.exceptions import DocumentLoadError


class ParsingTask:
    """Parse PDF documents into LangChain Documents."""

    def parse(self, file_path: str) -> list[Document]:
        """
        Parse PDF document into page-level Documents.

        Args:
            file_path: Path to PDF document

        Returns:
            list[Document]: One Document per page with source/page metadata

        Raises:
            DocumentLoadError: When the file is missing, not a PDF, or has no text
        """
        path = Path(file_path)
        if not path.exists():
            raise DocumentLoadError(f"File not found: {file_path}", file_path)

        if path.suffix.lower() != ".pdf":
            raise DocumentLoadError(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                file_path,
            )

        try:
            documents = PyPDFLoader(str(path)).load()
        except Exception as e:
            raise DocumentLoadError(f"Failed to parse PDF: {e}", file_path) from e

        if not any(doc.page_content.strip() for doc in documents):
            raise DocumentLoadError("PDF document contains no extractable text", file_path)

        return documents
