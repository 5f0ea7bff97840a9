"""Models the Android Gradle Plugin version compared by the plugin."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Self

from .exceptions import InvalidVersionError

_NUMBER = re.compile(r"[0-9]+")


class Ordering(Enum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True, order=True)
class SimpleAGPVersion:
    """Coarse AGP version made of its major and minor components.

    Patch numbers and pre-release suffixes are dropped on parse, so two
    versions that differ only in those compare equal.

    Attributes:
        major: Major version number.
        minor: Minor version number.
    """

    major: int
    minor: int

    def __post_init__(self: Self) -> None:
        """Reject negative components."""
        if self.major < 0 or self.minor < 0:
            raise InvalidVersionError(
                f"{self.major}.{self.minor}", "components must be non-negative"
            )

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse an AGP version string.

        Accepts "major.minor", "major.minor.patch" and
        "major.minor.patch-suffix". A suffix attached directly to the minor
        component ("4.2-beta") is stripped as well.

        Args:
            version_str: Version string to parse.

        Returns:
            Parsed SimpleAGPVersion instance.

        Raises:
            InvalidVersionError: If fewer than two components are present or
                either of the first two is not a non-negative integer.
        """
        parts = version_str.strip().split(".")
        if len(parts) < 2:  # noqa: PLR2004
            raise InvalidVersionError(version_str, "expected major.minor")

        major, minor = parts[0], parts[1].split("-", 1)[0]
        if not _NUMBER.fullmatch(major) or not _NUMBER.fullmatch(minor):
            raise InvalidVersionError(version_str, "major and minor must be integers")

        try:
            return cls(int(major), int(minor))
        except InvalidVersionError:
            raise
        except ValueError as e:
            raise InvalidVersionError(version_str, "component too large") from e

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "major.minor".
        """
        return f"{self.major}.{self.minor}"

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return f"SimpleAGPVersion({self.major}, {self.minor})"


def compare(a: SimpleAGPVersion, b: SimpleAGPVersion) -> Ordering:
    """Compare two versions on (major, minor).

    Args:
        a: Left-hand version.
        b: Right-hand version.

    Returns:
        Ordering of a relative to b.
    """
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL
