"""Shared constants for utilkit."""

import re
from typing import List


# Time arithmetic
MS_PER_SECOND = 1000
MS_PER_DAY = 24 * 60 * 60 * MS_PER_SECOND
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30  # Fixed threshold, no calendar correction
DAYS_PER_YEAR = 365
JUST_NOW_SECONDS = 10
JUST_NOW = "just now"


# Date pattern tokens, longest first so "YYYY" wins over "YY", "MM" over "M", ...
DATE_TOKEN_PATTERN = re.compile(r"YYYY|YY|MM|M|DD|D|HH|H|mm|m|ss|s")


# Validation patterns
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
URL_PATTERN = re.compile(
    r"(https?|ftp|ftps)://(www\.)?[a-zA-Z0-9-]+(\.[a-zA-Z0-9-]+)+(:[0-9]{1,5})?(/.*)?"
)
ALPHANUMERIC_PATTERN = re.compile(r"[a-zA-Z0-9]+")


# Slug cleanup passes
SLUG_WHITESPACE = re.compile(r"\s+")
SLUG_INVALID_CHARS = re.compile(r"[^a-z0-9-]")
SLUG_HYPHEN_RUNS = re.compile(r"-+")


# Rounding beyond this many decimals exceeds float precision
MAX_ROUND_DECIMALS = 15

TRUNCATE_ELLIPSIS = "..."


# Demo sections, in display order
DEMO_SECTIONS: List[str] = ["dates", "strings", "text", "arrays", "numbers"]

SECTION_TITLES = {
    "dates": "Dates",
    "strings": "String validation",
    "text": "Text transforms",
    "arrays": "Arrays",
    "numbers": "Numbers",
}

DEFAULT_DATE_PATTERN = "YYYY-MM-DD HH:mm:ss"
DEFAULT_CHUNK_SIZE = 3
