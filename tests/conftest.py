"""
Shared test fixtures and configuration for entire test suite.

Provides: Fake embedding/chat backends, settings, index factory, sample
documents, temp files.
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest
from langchain_core.documents import Document
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult
from pydantic import Field

from transport_rag.configs import RAGServiceSettings
from transport_rag.core.ingestion import IndexingTask


class EchoQueryChatModel(BaseChatModel):
    """Chat model stub answering with its prompt's QUERY line and CONTEXT block."""

    prompts: list[str] = Field(default_factory=list)

    @property
    def _llm_type(self) -> str:
        return "echo-query"

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> ChatResult:
        prompt = messages[-1].content
        self.prompts.append(prompt)

        context = prompt.split("CONTEXT:", 1)[1].split("QUERY:", 1)[0].strip()
        query_line = prompt.split("QUERY:", 1)[1].strip().splitlines()[0]
        answer = f"QUERY: {query_line} | CONTEXT: {context}"
        return ChatResult(generations=[ChatGeneration(message=AIMessage(content=answer))])


class StaticChatModel(BaseChatModel):
    """Chat model stub returning a fixed content value (string or parts list)."""

    content: Any = ""
    calls: int = 0

    @property
    def _llm_type(self) -> str:
        return "static"

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> ChatResult:
        self.calls += 1
        return ChatResult(generations=[ChatGeneration(message=AIMessage(content=self.content))])


class FailingChatModel(BaseChatModel):
    """Chat model stub that always raises."""

    error_message: str = "connection refused"
    calls: int = 0

    @property
    def _llm_type(self) -> str:
        return "failing"

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> ChatResult:
        self.calls += 1
        raise ConnectionError(self.error_message)


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Provide deterministic fake embeddings (same text, same vector)."""
    return DeterministicFakeEmbedding(size=64)


@pytest.fixture
def echo_llm() -> EchoQueryChatModel:
    """Provide chat model that echoes its prompt's query and context."""
    return EchoQueryChatModel()


@pytest.fixture
def static_llm_factory():
    """Provide factory for chat models returning fixed content."""

    def _factory(content: Any) -> StaticChatModel:
        return StaticChatModel(content=content)

    return _factory


@pytest.fixture
def failing_llm() -> FailingChatModel:
    """Provide chat model whose every call fails."""
    return FailingChatModel()


@pytest.fixture
def rag_settings(tmp_path: Path) -> RAGServiceSettings:
    """Provide RAG service settings with test-local defaults."""
    return RAGServiceSettings(
        document_path=str(tmp_path / "transport_policy.pdf"),
        chunk_size=800,
        chunk_overlap=200,
        top_k=5,
    )


@pytest.fixture
def policy_texts() -> list[str]:
    """Provide short transport policy passages."""
    return [
        "The speed limit is 60 km/h.",
        "Buses have priority at signalised junctions.",
        "Cyclists must use dedicated lanes where available.",
        "Freight deliveries are restricted to 6am-10am in the city centre.",
        "Parking permits are issued annually by the council.",
        "Electric vehicles may use bus lanes outside peak hours.",
        "Taxi ranks are located at every railway station.",
    ]


@pytest.fixture
def index_factory(fake_embeddings: DeterministicFakeEmbedding):
    """Provide async factory building a DocumentIndex from raw texts."""

    async def _build(texts: list[str], embeddings=None):
        chunks = [
            Document(page_content=text, metadata={"source": "transport_policy.pdf", "page": 0})
            for text in texts
        ]
        return await IndexingTask(embeddings or fake_embeddings).build(chunks)

    return _build


@pytest.fixture
def sample_pages() -> list[Document]:
    """Provide page-level Documents as produced by the PDF loader."""
    return [
        Document(
            page_content="Section 1. General provisions. " * 40,
            metadata={"source": "transport_policy.pdf", "page": 0},
        ),
        Document(
            page_content="Section 2. Speed limits. The speed limit is 60 km/h. " * 30,
            metadata={"source": "transport_policy.pdf", "page": 1},
        ),
    ]


@pytest.fixture
def temp_pdf_file():
    """
    Create a temporary PDF-like file for testing.

    Yields:
        Path: Path to temporary PDF file
    """
    with tempfile.NamedTemporaryFile(suffix=".pdf", delete=False) as f:
        temp_path = Path(f.name)
        f.write(b"%PDF-1.4\n")
        f.write(b"1 0 obj\n<< >>\nendobj\n")

    yield temp_path

    if temp_path.exists():
        temp_path.unlink()
