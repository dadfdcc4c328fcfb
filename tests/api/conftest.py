"""
API test fixtures.

Provides: Application factory wiring stub backends into the lifespan.
System role: HTTP-level test infrastructure
"""

import pytest

from transport_rag.api.main import create_app
from transport_rag.core.rag_query import RAGService


@pytest.fixture
def app_factory(index_factory, rag_settings):
    """Provide factory building an app whose startup indexes the given texts."""

    def _factory(llm, texts=None):
        async def service_factory(settings):
            index = await index_factory(texts or ["The speed limit is 60 km/h."])
            return RAGService(index=index, llm=llm, settings=settings)

        return create_app(rag_settings, service_factory=service_factory)

    return _factory
