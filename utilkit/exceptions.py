"""Custom exceptions for utilkit"""

from typing import Optional


class UtilKitError(Exception):
    """Base exception for all utilkit errors."""
    pass


class InvalidArgumentError(UtilKitError, ValueError):
    """Exception raised when a control argument breaks a function's contract.

    Only structurally invalid control arguments (chunk sizes, decimal counts,
    bounds) raise this. Absent or malformed data never does.
    """

    def __init__(self, function: str, argument: str, message: Optional[str] = None):
        self.function = function
        self.argument = argument
        self.message = message

        error_msg = f"{function}: invalid argument '{argument}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
