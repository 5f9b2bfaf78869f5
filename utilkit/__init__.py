"""
utilkit - Pure utility functions for strings, arrays, numbers and dates
"""

from .__version__ import __version__
from .exceptions import UtilKitError, InvalidArgumentError
from .formatters import (
    DateLike,
    to_datetime,
    is_valid_date,
    pad_zero,
    format_date,
    time_ago,
    days_between,
    capitalize,
    truncate,
    slugify,
)
from .validators import is_email, is_url, is_alphanumeric, min_length, max_length
from .arrays import unique, flatten, chunk
from .math_utils import (
    clamp,
    lerp,
    round_to,
    is_even,
    is_odd,
    sum_numbers,
    average,
    add,
    multiply,
    factorial,
)

__all__ = [
    "__version__",
    # Errors
    "UtilKitError",
    "InvalidArgumentError",
    # Dates
    "DateLike",
    "to_datetime",
    "is_valid_date",
    "pad_zero",
    "format_date",
    "time_ago",
    "days_between",
    # Text
    "capitalize",
    "truncate",
    "slugify",
    # Validation
    "is_email",
    "is_url",
    "is_alphanumeric",
    "min_length",
    "max_length",
    # Arrays
    "unique",
    "flatten",
    "chunk",
    # Numbers
    "clamp",
    "lerp",
    "round_to",
    "is_even",
    "is_odd",
    "sum_numbers",
    "average",
    "add",
    "multiply",
    "factorial",
]
