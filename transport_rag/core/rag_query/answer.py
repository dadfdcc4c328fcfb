"""
Chat model response normalization.

Dependencies: langchain_core.messages
System role: Turns model output into the single answer string returned over HTTP
"""

from typing import Any

from langchain_core.messages import BaseMessage


def _part_text(part: Any) -> str:
    if isinstance(part, str):
        return part
    if isinstance(part, dict):
        text = part.get("text")
    else:
        text = getattr(part, "text", None)
    return "" if text is None else str(text)


def normalize_answer(response: Any) -> str:
    """
    Normalize a chat model response into one string.

    Multi-part content (a list of strings and content blocks) is reduced to
    the text of each part, joined with newlines. Parts without text
    contribute an empty line. Any other content is coerced with str().

    Args:
        response: AIMessage returned by the model, or its raw content

    Returns:
        str: Answer text
    """
    content = response.content if isinstance(response, BaseMessage) else response

    if isinstance(content, list):
        return "\n".join(_part_text(part) for part in content)
    if content is None:
        return ""
    return str(content)
