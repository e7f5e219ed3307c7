"""Base exception classes for udotenv.

All udotenv exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery
"""

from typing import Any, Dict, List, Optional, Sequence


class UdotenvError(Exception):
    """Base exception for all udotenv errors.

    Attributes:
        code: Machine-readable error code (e.g., "DUPLICATE_OVERLOAD_FLAG")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(UdotenvError):
    """Base for errors in how the caller configured udotenv."""

    pass


class ArgumentError(UdotenvError):
    """Base for errors in the command line a program was invoked with."""

    pass


class LoadError(UdotenvError):
    """Base for errors raised while applying env files."""

    pass


class MultipleConfigurationsProvided(ConfigurationError):
    """Raised when more than one Config is passed to ``new()``."""

    def __init__(self, count: int):
        super().__init__(
            code="MULTIPLE_CONFIGURATIONS",
            message="only one config may be passed",
            details={"count": count},
        )
        self.count = count


class DuplicateOverloadFlag(ArgumentError):
    """Raised when the overload role is given more than once on a command line."""

    def __init__(self, flag: str, position: int):
        super().__init__(
            code="DUPLICATE_OVERLOAD_FLAG",
            message="only one overload flag may be passed",
            details={"flag": flag, "position": position},
        )
        self.flag = flag
        self.position = position


class EnvFileLoadError(LoadError):
    """Raised when one of the requested env files cannot be read or parsed.

    The details carry every path that was requested together with the one
    that failed, so the caller can report the whole invocation.
    """

    def __init__(self, paths: Sequence[str], failed_path: str, reason: str):
        super().__init__(
            code="ENV_FILE_LOAD_ERROR",
            message=f"error loading env file '{failed_path}': {reason}",
            details={"paths": list(paths), "failed_path": failed_path},
        )
        self.paths: List[str] = list(paths)
        self.failed_path = failed_path


class FlagParseError(ArgumentError):
    """Raised when the flag parser rejects the preprocessed command line."""

    def __init__(self, reason: str, args: Sequence[str]):
        super().__init__(
            code="FLAG_PARSE_ERROR",
            message=f"invalid command line: {reason}",
            details={"args": list(args)},
        )
        self.reason = reason
