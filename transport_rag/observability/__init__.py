"""
Observability module.

Provides logging configuration and HTTP request logging middleware.
"""

from transport_rag.observability.logger import configure_logging

__all__ = ["configure_logging"]
