"""Core domain logic: document ingestion and RAG query orchestration."""
