"""String validation utilities.

Every validator returns a bool and treats missing or non-string input as
invalid instead of raising.
"""

import math
from numbers import Real
from typing import Any

from utilkit.constants import ALPHANUMERIC_PATTERN, EMAIL_PATTERN, URL_PATTERN


def _is_length_limit(value: Any) -> bool:
    """Check that a length bound is a finite, non-negative number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    # only floats can be infinite; huge ints must not be converted
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value >= 0


def is_email(value: Any) -> bool:
    """
    Check whether a string looks like an email address.

    Local part: letters, digits, dots, hyphens and underscores.
    Domain: letters, digits, dots and hyphens, ending in a TLD of 2+ letters.

    Args:
        value: Value to validate

    Returns:
        True if the value is a non-empty string in email format
    """
    if not isinstance(value, str) or not value:
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_url(value: Any) -> bool:
    """
    Check whether a string looks like an http, https, ftp or ftps URL.

    Args:
        value: Value to validate

    Returns:
        True if the value has a supported scheme, a dotted host and an
        optional port and path
    """
    if not isinstance(value, str) or not value:
        return False
    return URL_PATTERN.fullmatch(value) is not None


def is_alphanumeric(value: Any) -> bool:
    """Check whether a string contains only ASCII letters and digits."""
    if not isinstance(value, str) or not value:
        return False
    return ALPHANUMERIC_PATTERN.fullmatch(value) is not None


def min_length(value: Any, minimum: Any) -> bool:
    """
    Check that a string is at least `minimum` characters long.

    Args:
        value: String to check
        minimum: Minimum length (finite, non-negative)

    Returns:
        False for non-strings or an invalid bound
    """
    if not isinstance(value, str) or not _is_length_limit(minimum):
        return False
    return len(value) >= minimum


def max_length(value: Any, maximum: Any) -> bool:
    """
    Check that a string is at most `maximum` characters long.

    Args:
        value: String to check
        maximum: Maximum length (finite, non-negative)

    Returns:
        False for non-strings or an invalid bound
    """
    if not isinstance(value, str) or not _is_length_limit(maximum):
        return False
    return len(value) <= maximum
