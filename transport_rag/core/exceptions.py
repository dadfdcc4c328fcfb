"""
Exception hierarchy for the transport policy RAG pipeline.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across both processes
"""

from typing import Any


class TransportRAGException(Exception):
    """Base exception for all transport policy RAG errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class DocumentLoadError(TransportRAGException):
    """Raised when the source document cannot be loaded at startup."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document load error.

        Args:
            message: Error message
            file_path: Path of the document that failed to load
            details: Additional context
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, details)


class EmbeddingError(TransportRAGException):
    """Raised when embedding generation fails while building the index."""

    pass


class InvalidQueryError(TransportRAGException):
    """Raised when a query is missing or empty."""

    pass


class RetrievalError(TransportRAGException):
    """Raised when similarity search over the index fails."""

    pass


class GenerationError(TransportRAGException):
    """Raised when the chat model call fails."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize generation error.

        Args:
            message: Error message (the backend's own message)
            model: Chat model that failed
            details: Additional context
        """
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)


class ServiceNotReadyError(TransportRAGException):
    """Raised when a query arrives before the index has been built."""

    def __init__(self, message: str = "RAG service is not initialized") -> None:
        super().__init__(message)


class RAGServiceError(TransportRAGException):
    """Raised by the tool adapter when the RAG service answers with a failure status."""

    def __init__(self, status_code: int, body: str, message: str | None = None) -> None:
        """
        Initialize RAG service error.

        Args:
            status_code: HTTP status returned by the RAG service
            body: Raw response body text
            message: Override for the default "RAG service error" message
        """
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"RAG service error: {status_code} {body}")


class InvalidRAGResponseError(RAGServiceError):
    """Raised when a successful RAG service response carries no answer field."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(
            status_code,
            body,
            message=f"Invalid RAG service response: {status_code} {body}",
        )
