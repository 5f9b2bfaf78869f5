"""Formatting utilities for utilkit.

This package provides the formatting functions, organized into logical modules:
- date: Date coercion, formatting, relative time and day differences
- text: Capitalization, truncation and slugs
"""

# Date formatters
from .date import (
    DateLike,
    to_datetime,
    is_valid_date,
    pad_zero,
    format_date,
    time_ago,
    days_between,
)

# Text formatters
from .text import capitalize, truncate, slugify

__all__ = [
    # Date
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
]
