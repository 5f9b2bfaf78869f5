"""Configuration handling for the utilkit demo"""

from dataclasses import dataclass, field
from typing import List, Optional

from utilkit.constants import DEFAULT_CHUNK_SIZE, DEFAULT_DATE_PATTERN, DEMO_SECTIONS
from utilkit.formatters.date import is_valid_date


@dataclass
class Config:
    """Configuration for the utilkit demo with validation."""

    # Which catalogue sections to show
    sections: List[str] = field(default_factory=lambda: list(DEMO_SECTIONS))

    # Sample parameters
    date_pattern: str = DEFAULT_DATE_PATTERN
    chunk_size: int = DEFAULT_CHUNK_SIZE
    reference_time: Optional[str] = None  # None = current time

    # Output
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_sections()
        self._validate_date_pattern()
        self._validate_chunk_size()
        self._validate_reference_time()

    def _validate_sections(self):
        """Validate sections are known and non-empty, dropping duplicates."""
        if not isinstance(self.sections, list):
            raise ValueError("sections must be a list")
        if not self.sections:
            raise ValueError("sections cannot be empty")

        unknown = [s for s in self.sections if s not in DEMO_SECTIONS]
        if unknown:
            raise ValueError(f"sections must be drawn from {DEMO_SECTIONS}, got {unknown}")

        self.sections = list(dict.fromkeys(self.sections))

    def _validate_date_pattern(self):
        """Validate date_pattern is not empty."""
        if not isinstance(self.date_pattern, str) or not self.date_pattern:
            raise ValueError("date_pattern cannot be empty")

    def _validate_chunk_size(self):
        """Validate chunk_size is a positive integer."""
        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, int) or self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be a positive integer, got {self.chunk_size!r}")

    def _validate_reference_time(self):
        """Validate reference_time parses as a date when given."""
        if self.reference_time is not None and not is_valid_date(self.reference_time):
            raise ValueError(f"reference_time is not a valid date: '{self.reference_time}'")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "sections": self.sections,
            "date_pattern": self.date_pattern,
            "chunk_size": self.chunk_size,
            "reference_time": self.reference_time,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "sections",
            "date_pattern",
            "chunk_size",
            "reference_time",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
