"""Array utilities for common list operations.

Lists and tuples count as arrays. Results are always new lists.
"""

from typing import Any, List

from utilkit.exceptions import InvalidArgumentError
from utilkit.logging_config import get_logger

logger = get_logger(__name__)

ARRAY_TYPES = (list, tuple)


def unique(arr: Any) -> List[Any]:
    """
    Remove duplicates while preserving the order of first occurrence.

    Args:
        arr: Input list (or tuple)

    Returns:
        New list without duplicates, or [] for missing/non-list input

    Example:
        unique([1, 2, 2, 3, 1, 4]) -> [1, 2, 3, 4]
    """
    if not isinstance(arr, ARRAY_TYPES):
        return []

    seen = set()
    seen_unhashable = []
    result = []

    for item in arr:
        # bools stay distinct from the ints they compare equal to
        key = (type(item) is bool, item)
        try:
            if key in seen:
                continue
            seen.add(key)
        except TypeError:
            # Lists, dicts and other unhashable values fall back to equality
            if item in seen_unhashable:
                continue
            seen_unhashable.append(item)
        result.append(item)

    return result


def flatten(arr: Any) -> List[Any]:
    """
    Recursively flatten nested lists and tuples into a single-level list.

    Args:
        arr: Input list, nested to any depth

    Returns:
        Flattened list, or [] for missing/non-list input

    Example:
        flatten([1, [2, [3, 4], 5]]) -> [1, 2, 3, 4, 5]
    """
    if not isinstance(arr, ARRAY_TYPES):
        return []

    result = []
    for item in arr:
        if isinstance(item, ARRAY_TYPES):
            result.extend(flatten(item))
        else:
            result.append(item)

    return result


def chunk(arr: Any, size: int) -> List[List[Any]]:
    """
    Split a list into chunks of `size` items; the last chunk holds the remainder.

    Args:
        arr: Input list
        size: Chunk size, a positive integer

    Returns:
        List of chunks, or [] for missing/non-list input

    Raises:
        InvalidArgumentError: If size is not a positive integer

    Example:
        chunk([1, 2, 3, 4, 5], 2) -> [[1, 2], [3, 4], [5]]
    """
    if not isinstance(arr, ARRAY_TYPES):
        return []

    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        logger.debug(f"Rejected chunk size {size!r}")
        raise InvalidArgumentError("chunk", "size", "Chunk size must be a positive integer")

    items = list(arr)
    return [items[i:i + size] for i in range(0, len(items), size)]
