"""
RAG answer prompt.

Defines the prompt template for grounded transport policy answers and
the helpers that assemble retrieved chunks into its context.

Dependencies: langchain_core.prompts
System role: Prompt template for the generation backend
"""

from langchain_core.documents import Document
from langchain_core.prompts import PromptTemplate

RAG_PROMPT = PromptTemplate.from_template(
    """
You are an expert Transport Policy assistant.
Answer ONLY using the provided CONTEXT.
If the answer is not present, respond "{unknown_answer}"

CONTEXT:
{context}

QUERY:
{query}
"""
)


def build_context(chunks: list[Document], delimiter: str = "\n---\n") -> str:
    """
    Join retrieved chunk texts, in relevance order, into one context string.

    Args:
        chunks: Retrieved chunks, most relevant first
        delimiter: Separator placed between chunks

    Returns:
        str: Context block for the prompt
    """
    return delimiter.join(chunk.page_content for chunk in chunks)


def build_prompt(context: str, query: str, unknown_answer: str = "I don't know.") -> str:
    """
    Render the generation prompt.

    Args:
        context: Assembled context block
        query: Original user query, embedded verbatim
        unknown_answer: Phrase to use when the context is insufficient

    Returns:
        str: Prompt text sent to the chat model
    """
    return RAG_PROMPT.format(context=context, query=query, unknown_answer=unknown_answer)
