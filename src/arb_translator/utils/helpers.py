"""Utility functions for batching and parsing provider responses."""

import json
import re
from typing import Any, List, Sequence

from ..errors import ResponseParseError, ResponseShapeError

CODE_FENCE_RE = re.compile(r"```[A-Za-z]*[ \t]*\n?(.*?)```", re.DOTALL)


def split_into_batches(values: Sequence[str], size: int) -> List[List[str]]:
    """
    Partition values into contiguous batches.

    Args:
        values: Strings in document order
        size: Maximum batch length

    Returns:
        Batches whose concatenation equals ``values``; every batch but the
        last has exactly ``size`` items. Empty input yields no batches.
    """
    if size <= 0:
        raise ValueError(f"Batch size must be positive, got {size}")
    return [list(values[i:i + size]) for i in range(0, len(values), size)]


def strip_code_fences(text: str) -> str:
    """Extract the payload of a ```/```json fenced block, ignoring surrounding prose."""
    cleaned = text.strip()
    if cleaned.startswith("["):
        return cleaned
    match = CODE_FENCE_RE.search(cleaned)
    if match:
        return match.group(1).strip()
    if cleaned.startswith("```"):
        # Unterminated fence: drop the opening line
        first_newline = cleaned.find("\n")
        cleaned = cleaned[first_newline + 1:] if first_newline != -1 else cleaned[3:]
    return cleaned.strip()


def response_text(response: Any) -> str:
    """Flatten a chat model response into plain text."""
    content = getattr(response, "content", response)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts)
    return str(content)


def parse_translation_array(text: str, expected_length: int) -> List[str]:
    """
    Parse a provider payload into a list of translated strings.

    Args:
        text: Raw response text, optionally wrapped in a code fence
        expected_length: Length of the batch that was sent

    Returns:
        Translations in batch order

    Raises:
        ResponseParseError: If the payload is not valid JSON
        ResponseShapeError: If it is not an array of ``expected_length`` strings
    """
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Response is not valid JSON: {e}; got: {cleaned[:100]}") from e

    if not isinstance(data, list):
        raise ResponseShapeError(f"Expected a JSON array, got {type(data).__name__}")
    if len(data) != expected_length:
        raise ResponseShapeError(
            f"Expected {expected_length} translations, got {len(data)}"
        )
    for index, item in enumerate(data):
        if not isinstance(item, str):
            raise ResponseShapeError(
                f"Translation at index {index} is {type(item).__name__}, not a string"
            )
    return data
