"""
HTTP client for the RAG query service.

Dependencies: httpx
System role: Forwards tool invocations to POST /query
"""

import json
import logging
from typing import Any

import httpx

from transport_rag.core.exceptions import InvalidRAGResponseError, RAGServiceError

logger = logging.getLogger(__name__)


def coerce_answer(value: Any) -> str:
    """Return string answers unchanged and JSON-serialize anything else."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


class RAGClient:
    """Stateless client: one AsyncClient per query."""

    def __init__(
        self,
        base_url: str,
        query_path: str = "/query",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            base_url: RAG service base URL, e.g. http://localhost:3001
            query_path: Path of the query endpoint
            timeout: Request timeout in seconds (None disables it)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._base_url = base_url
        self._query_path = query_path
        self._timeout = timeout
        self._transport = transport

    async def query(self, question: str) -> Any:
        """
        Ask the RAG service a question.

        Args:
            question: Transport policy question

        Returns:
            Any: The "answer" field of the response body, as decoded

        Raises:
            RAGServiceError: The service answered with a non-2xx status
            InvalidRAGResponseError: The body is not a JSON object with an answer
            httpx.HTTPError: The service could not be reached
        """
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(self._query_path, json={"query": question})

        if not response.is_success:
            raise RAGServiceError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise InvalidRAGResponseError(response.status_code, response.text) from e
        logger.info(f"RAG Response: {data}")

        if not isinstance(data, dict) or "answer" not in data:
            raise InvalidRAGResponseError(response.status_code, response.text)
        return data["answer"]
