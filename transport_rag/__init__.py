"""
Transport policy RAG.

Two processes: an HTTP retrieval-augmented query service over the transport
policy document, and an MCP stdio server exposing it as a single tool.
"""

__version__ = "1.0.0"
