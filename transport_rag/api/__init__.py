"""HTTP API for the RAG query service."""
