"""
RAG query service configuration settings.

Manages document location, chunking, retrieval, and Ollama model settings
for the indexing and query service, plus the HTTP listener address.

Dependencies: pydantic, pydantic_settings
System role: Configuration for the indexing & query service
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import SettingsConfigDict

from transport_rag.configs.base import BaseSettings


class RAGServiceSettings(BaseSettings):
    """Settings for document ingestion, retrieval and generation."""

    model_config = SettingsConfigDict(env_prefix="RAG_SERVICE_")

    # Source document
    document_path: str = Field(
        default="assets/transport_policy.pdf",
        description="Path to the PDF indexed at startup",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=800,
        gt=0,
        description="Target chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        ge=0,
        description="Overlap between consecutive chunks in characters",
    )
    splitter: Literal["window", "recursive"] = Field(
        default="window",
        description="'window' for exact fixed-size windows, 'recursive' for separator-aware splitting",
    )

    # Retrieval settings
    top_k: int = Field(default=5, gt=0, description="Number of chunks retrieved per query")
    context_delimiter: str = Field(
        default="\n---\n",
        description="Separator placed between retrieved chunks in the prompt context",
    )
    unknown_answer: str = Field(
        default="I don't know.",
        description="Phrase the model must answer with when the context is insufficient",
    )

    # Ollama backends
    ollama_base_url: str | None = Field(
        default=None,
        description="Ollama server URL (library default when unset)",
    )
    embedding_model: str = Field(default="nomic-embed-text", description="Ollama embedding model")
    chat_model: str = Field(default="qwen2.5:1.5b", description="Ollama chat model")
    temperature: float = Field(default=0.3, ge=0.0, description="Chat model temperature")
    llm_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout for generation calls (None waits indefinitely)",
    )
    llm_max_retries: int = Field(
        default=0,
        ge=0,
        description="Extra generation attempts after a failure (0 disables retry)",
    )

    # HTTP listener
    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=3001, description="Bind port")

    @model_validator(mode="after")
    def _check_overlap(self) -> "RAGServiceSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than "
                f"chunk_size ({self.chunk_size})"
            )
        return self


@lru_cache
def get_rag_service_settings() -> RAGServiceSettings:
    """
    Get cached RAG service settings instance.

    Returns:
        RAGServiceSettings: Singleton settings loaded from environment
    """
    return RAGServiceSettings()
