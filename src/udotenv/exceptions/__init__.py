"""Exceptions raised by udotenv.

Every error is fatal for the invocation that produced it; none are retried.
The caller decides whether to terminate the process.

Usage:
    from udotenv.exceptions import (
        UdotenvError,
        DuplicateOverloadFlag,
        EnvFileLoadError,
        MultipleConfigurationsProvided,
    )
"""

from udotenv.exceptions.base import (
    ArgumentError,
    ConfigurationError,
    DuplicateOverloadFlag,
    EnvFileLoadError,
    FlagParseError,
    LoadError,
    MultipleConfigurationsProvided,
    UdotenvError,
)

__all__ = [
    # Base exceptions
    "UdotenvError",
    "ConfigurationError",
    "ArgumentError",
    "LoadError",
    # Concrete errors
    "MultipleConfigurationsProvided",
    "DuplicateOverloadFlag",
    "FlagParseError",
    "EnvFileLoadError",
]
