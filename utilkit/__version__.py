"""Version information for utilkit."""

__version__ = "0.1.0"
