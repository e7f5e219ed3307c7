"""udotenv - load env files named on the command line.

Flags (aliases are configurable):
- -envs / -e PATH: env file to load, repeatable; PATH defaults to .env
- -env-overload / -eo / -o: overwrite variables that are already set

Modules:
- preprocess: command-line rewriting done before flag parsing
- config: flag configuration and the env file loader
- logger: structured logging
- exceptions: structured error classes
"""

__version__ = "1.0.0"

from udotenv.config import (
    Config,
    EnvFileLoader,
    FlagRole,
    FlagRoleTable,
    get_default_config,
    load_env_files,
)

from udotenv.exceptions import (
    UdotenvError,
    ConfigurationError,
    ArgumentError,
    LoadError,
    MultipleConfigurationsProvided,
    DuplicateOverloadFlag,
    EnvFileLoadError,
    FlagParseError,
)

from udotenv.logger import (
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)

from udotenv.preprocess import preprocess_args

from udotenv.udotenv import (
    FlagParser,
    UdotEnv,
    load_from_args,
    new,
    register_flags,
)

__all__ = [
    "__version__",
    # Entry points
    "UdotEnv",
    "FlagParser",
    "new",
    "load_from_args",
    "register_flags",
    "preprocess_args",
    # Config
    "Config",
    "FlagRole",
    "FlagRoleTable",
    "get_default_config",
    "EnvFileLoader",
    "load_env_files",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "UdotenvError",
    "ConfigurationError",
    "ArgumentError",
    "LoadError",
    "MultipleConfigurationsProvided",
    "DuplicateOverloadFlag",
    "EnvFileLoadError",
    "FlagParseError",
]
