"""Exception hierarchy for the design token build.

All build exceptions inherit from DesignTokenError. This allows catching
every build failure with a single base class while preserving specificity
for individual error types.

Tokens that are filtered out and colors that cannot be parsed are not
errors and never raise.
"""

from collections.abc import Sequence
from typing import Any


class DesignTokenError(Exception):
    """Base exception for all design token build errors.

    Includes an error_code for machine-readable reporting and extra context.
    """

    error_code: str = "DESIGN_TOKEN_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured reporting."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(DesignTokenError):
    """Base exception for build configuration errors."""

    error_code = "CONFIGURATION_ERROR"


class UnknownTransformError(ConfigurationError):
    """Raised when a platform names a transform that is not registered."""

    error_code = "UNKNOWN_TRANSFORM"

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown transform: {name}",
            context={"transform": name},
        )


class UnknownTransformGroupError(ConfigurationError):
    """Raised when a platform names a transform group that is not registered."""

    error_code = "UNKNOWN_TRANSFORM_GROUP"

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown transform group: {name}",
            context={"transform_group": name},
        )


class UnknownFilterError(ConfigurationError):
    """Raised when a file names a filter that is not registered."""

    error_code = "UNKNOWN_FILTER"

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown filter: {name}",
            context={"filter": name},
        )


class UnknownFormatError(ConfigurationError):
    """Raised when a file names a format that is not registered."""

    error_code = "UNKNOWN_FORMAT"

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown format: {name}",
            context={"format": name},
        )


class UnknownPlatformError(ConfigurationError):
    """Raised when a build is requested for a platform missing from the config."""

    error_code = "UNKNOWN_PLATFORM"

    def __init__(self, name: str, available: Sequence[str]) -> None:
        super().__init__(
            f"Unknown platform: {name} (available: {', '.join(available) or 'none'})",
            context={"platform": name, "available": list(available)},
        )


# =============================================================================
# Token Source Errors
# =============================================================================


class TokenSourceError(DesignTokenError):
    """Raised when a token source file cannot be read or parsed."""

    error_code = "TOKEN_SOURCE_ERROR"

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(
            f"Cannot load tokens from {source}: {reason}",
            context={"source": source, "reason": reason},
        )


# =============================================================================
# Token Name Errors
# =============================================================================


class TokenNameError(DesignTokenError):
    """Base exception for resolved token names unusable in an output file."""

    error_code = "TOKEN_NAME_ERROR"


class EmptyTokenNameError(TokenNameError):
    """Raised when a token's name resolves to an empty string."""

    error_code = "EMPTY_TOKEN_NAME"

    def __init__(self, path: Sequence[str], destination: str) -> None:
        joined = "/".join(path)
        super().__init__(
            f"Token {joined or '<unnamed>'} resolves to an empty name in {destination}",
            context={"path": list(path), "destination": destination},
        )


class NameCollisionError(TokenNameError):
    """Raised when two tokens resolve to the same name within one output file."""

    error_code = "NAME_COLLISION"

    def __init__(
        self,
        name: str,
        first_path: Sequence[str],
        second_path: Sequence[str],
        destination: str,
    ) -> None:
        super().__init__(
            f"Tokens {'/'.join(first_path)} and {'/'.join(second_path)} "
            f"both resolve to '{name}' in {destination}",
            context={
                "name": name,
                "paths": ["/".join(first_path), "/".join(second_path)],
                "destination": destination,
            },
        )
