"""
Test suite for PDF parsing.

Uses a patched PyPDFLoader; no real PDF extraction happens.

System role: Verification of the first ingestion stage
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from langchain_core.documents import Document

from transport_rag.core.exceptions import DocumentLoadError
from transport_rag.core.ingestion import ParsingTask


class TestParsingTask:
    """Test suite for ParsingTask.parse."""

    def test_parse_should_raise_when_file_missing(self, tmp_path: Path) -> None:
        """Test a missing document is a load error carrying the path."""
        missing = tmp_path / "absent.pdf"

        with pytest.raises(DocumentLoadError, match="File not found") as exc_info:
            ParsingTask().parse(str(missing))

        assert exc_info.value.details["file_path"] == str(missing)

    def test_parse_should_reject_non_pdf(self, tmp_path: Path) -> None:
        """Test only PDF files are accepted."""
        # Arrange
        text_file = tmp_path / "policy.txt"
        text_file.write_text("not a pdf")

        # Act / Assert
        with pytest.raises(DocumentLoadError, match="Unsupported file format"):
            ParsingTask().parse(str(text_file))

    def test_parse_should_return_loader_pages(self, temp_pdf_file: Path) -> None:
        """Test pages from the loader are returned unchanged."""
        # Arrange
        pages = [
            Document(page_content="Page one", metadata={"page": 0}),
            Document(page_content="Page two", metadata={"page": 1}),
        ]
        with patch("transport_rag.core.ingestion.parsing_task.PyPDFLoader") as mock_loader_class:
            mock_loader_class.return_value.load.return_value = pages

            # Act
            result = ParsingTask().parse(str(temp_pdf_file))

        # Assert
        assert result == pages
        mock_loader_class.assert_called_once_with(str(temp_pdf_file))

    def test_parse_should_raise_when_no_text_extracted(self, temp_pdf_file: Path) -> None:
        """Test a PDF without extractable text is a load error."""
        with patch("transport_rag.core.ingestion.parsing_task.PyPDFLoader") as mock_loader_class:
            mock_loader_class.return_value.load.return_value = [
                Document(page_content="  ", metadata={"page": 0})
            ]

            with pytest.raises(DocumentLoadError, match="no extractable text"):
                ParsingTask().parse(str(temp_pdf_file))

    def test_parse_should_wrap_loader_failures(self, temp_pdf_file: Path) -> None:
        """Test loader exceptions become DocumentLoadError with the cause chained."""
        # Arrange
        loader = MagicMock()
        loader.load.side_effect = RuntimeError("EOF marker not found")

        with patch(
            "transport_rag.core.ingestion.parsing_task.PyPDFLoader", return_value=loader
        ):
            # Act / Assert
            with pytest.raises(DocumentLoadError, match="EOF marker not found") as exc_info:
                ParsingTask().parse(str(temp_pdf_file))

        assert isinstance(exc_info.value.__cause__, RuntimeError)
