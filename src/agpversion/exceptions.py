"""Exceptions raised by agpversion."""

from typing import Self


class AGPVersionError(Exception):
    """Base exception for all agpversion errors."""


class InvalidVersionError(AGPVersionError, ValueError):
    """Raised when a version string cannot be parsed.

    Attributes:
        version: The offending version string.
    """

    def __init__(self: Self, version: str, reason: str | None = None) -> None:
        """Initialize the error.

        Args:
            version: The version string that failed to parse.
            reason: Optional detail appended to the message.
        """
        self.version = version
        message = f"Invalid AGP version format: {version!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class IncompatibleVersionError(AGPVersionError):
    """Raised when the AGP version in use is older than the supported minimum."""

    def __init__(self: Self, found: object, minimum: object) -> None:
        """Initialize the error.

        Args:
            found: The AGP version in use.
            minimum: The minimum supported AGP version.
        """
        self.found = found
        self.minimum = minimum
        super().__init__(
            "This plugin is only compatible with Android Gradle plugin (AGP) "
            f"version {minimum} or higher (found {found})."
        )
