"""
HTTP-facing error types.

The generator itself never raises; these only cover request validation
and unexpected failures surfaced by the route layer.
"""

from __future__ import annotations


class AvatarAPIError(Exception):
    """Error carrying the status code and envelope fields for a response."""

    def __init__(self, status_code: int, error: str, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.message = message


class InvalidSize(AvatarAPIError):
    """Raised when ``?size`` is not an integer within the configured bounds."""

    def __init__(self, min_size: int, max_size: int) -> None:
        super().__init__(
            400,
            "Invalid size",
            f"Size must be a number between {min_size} and {max_size}",
        )
