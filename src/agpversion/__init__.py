"""agpversion - coarse Android Gradle Plugin version parsing and comparison.

Parses AGP version strings into comparable (major, minor) values and checks
them against a minimum supported version.
"""

from ._version import __version__
from .compatibility import (
    MINIMUM_SUPPORTED_VERSION,
    check_compatibility,
    is_compatible,
)
from .exceptions import (
    AGPVersionError,
    IncompatibleVersionError,
    InvalidVersionError,
)
from .model_version import Ordering, SimpleAGPVersion, compare

__all__ = [
    "MINIMUM_SUPPORTED_VERSION",
    "AGPVersionError",
    "IncompatibleVersionError",
    "InvalidVersionError",
    "Ordering",
    "SimpleAGPVersion",
    "__version__",
    "check_compatibility",
    "compare",
    "is_compatible",
]
