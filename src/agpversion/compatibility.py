"""Minimum AGP version gate run by the build plugin before it applies."""

import logging

from .exceptions import IncompatibleVersionError
from .model_version import SimpleAGPVersion

logger = logging.getLogger(__name__)

MINIMUM_SUPPORTED_VERSION = SimpleAGPVersion(7, 0)


def _coerce(version: str | SimpleAGPVersion) -> SimpleAGPVersion:
    return SimpleAGPVersion.parse(version) if isinstance(version, str) else version


def check_compatibility(
    found: str | SimpleAGPVersion,
    minimum: str | SimpleAGPVersion = MINIMUM_SUPPORTED_VERSION,
) -> SimpleAGPVersion:
    """Ensure the AGP version in use is at least the supported minimum.

    Args:
        found: AGP version in use, as a string or SimpleAGPVersion.
        minimum: Lowest supported AGP version.

    Returns:
        The parsed version in use.

    Raises:
        InvalidVersionError: If either version string cannot be parsed.
        IncompatibleVersionError: If found is older than minimum.

    Example:
        >>> check_compatibility("7.4.2", "7.0")
        SimpleAGPVersion(7, 4)
    """
    found_ver = _coerce(found)
    minimum_ver = _coerce(minimum)

    if found_ver < minimum_ver:
        logger.warning(
            "AGP %s is older than the minimum supported %s", found_ver, minimum_ver
        )
        raise IncompatibleVersionError(found_ver, minimum_ver)

    logger.debug("AGP %s satisfies minimum %s", found_ver, minimum_ver)
    return found_ver


def is_compatible(
    found: str | SimpleAGPVersion,
    minimum: str | SimpleAGPVersion = MINIMUM_SUPPORTED_VERSION,
) -> bool:
    """Return whether found is at least minimum.

    Parse errors still propagate.
    """
    return _coerce(found) >= _coerce(minimum)
