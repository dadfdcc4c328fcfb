"""
Tool adapter test fixtures.

Provides: RAG backend simulated with httpx.MockTransport.
System role: Adapter test infrastructure
"""

import httpx
import pytest

from transport_rag.mcp_server import RAGClient


@pytest.fixture
def rag_backend():
    """
    Provide factory for RAG clients backed by a canned HTTP response.

    The returned client records every request it sends in ``requests``.
    """

    def _factory(status_code: int = 200, payload=None, text: str | None = None) -> RAGClient:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=payload)

        client = RAGClient(
            base_url="http://rag.test:3001",
            transport=httpx.MockTransport(handler),
        )
        client.requests = requests
        return client

    return _factory

