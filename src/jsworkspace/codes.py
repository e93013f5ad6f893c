"""Error code constants for jsworkspace discovery results.

These constants prevent stringly-typed error codes and let callers
branch on the kind of failure behind a Broken or Missing outcome.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Discovery failure codes."""

    # Locator (not user-facing, other ecosystems may still match)
    NOT_FOUND = "NOT_FOUND"

    # Normalizer (user-facing, the directory IS a JS project)
    MANIFEST_READ_ERROR = "MANIFEST_READ_ERROR"
    MANIFEST_PARSE_ERROR = "MANIFEST_PARSE_ERROR"
    NAMELESS_PACKAGE = "NAMELESS_PACKAGE"
    BUILD_INFO_PARSE_ERROR = "BUILD_INFO_PARSE_ERROR"
    AUTO_INCLUDE_ERROR = "AUTO_INCLUDE_ERROR"
