"""Text transformation utilities."""

from numbers import Real
from typing import Any

from utilkit.constants import (
    SLUG_HYPHEN_RUNS,
    SLUG_INVALID_CHARS,
    SLUG_WHITESPACE,
    TRUNCATE_ELLIPSIS,
)


def capitalize(text: Any) -> str:
    """
    Capitalize the first letter of each space-separated word.

    The rest of every word is lowercased. Runs of spaces are kept.

    Args:
        text: Input string

    Returns:
        Capitalized string, or "" for missing or non-string input
    """
    if not isinstance(text, str) or not text:
        return ""

    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def truncate(text: Any, max_len: Any) -> str:
    """
    Shorten a string to max_len characters, ending with "..." when cut.

    Args:
        text: Input string
        max_len: Maximum length of the result

    Returns:
        The original string if it fits, otherwise the truncated string.
        Limits under 3 characters are cut without an ellipsis.
    """
    if not isinstance(text, str) or not text:
        return ""
    if isinstance(max_len, bool) or not isinstance(max_len, Real) or not max_len > 0:
        return ""

    if len(text) <= max_len:
        return text

    limit = int(max_len)
    if limit < len(TRUNCATE_ELLIPSIS):
        return text[:limit]
    return text[: limit - len(TRUNCATE_ELLIPSIS)] + TRUNCATE_ELLIPSIS


def slugify(text: Any) -> str:
    """
    Convert a string to a URL-friendly slug.

    Example:
        slugify("Hello, World!") -> "hello-world"
    """
    if not isinstance(text, str) or not text:
        return ""

    slug = text.lower().strip()
    slug = SLUG_WHITESPACE.sub("-", slug)
    slug = SLUG_INVALID_CHARS.sub("-", slug)
    slug = SLUG_HYPHEN_RUNS.sub("-", slug)
    return slug.strip("-")
