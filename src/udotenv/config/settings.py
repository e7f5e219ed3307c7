"""Dataclass-based settings for udotenv.

Holds the flag aliases recognised on the command line, the default env file
path, and the flag-role lookup table built from them.

Design principles:
- Built once at startup and not mutated afterwards
- Environment variable overrides with sensible defaults
- Lookup by flag name with leading dashes stripped
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional

DEFAULT_ENV_PATH = ".env"
DEFAULT_ENV_FLAGS = ("envs", "e")
DEFAULT_OVERLOAD_FLAGS = ("env-overload", "eo", "o")

_TRUE_VALUES = {"1", "true", "yes", "on"}


class FlagRole(Enum):
    """Semantic role of a recognised command-line flag."""

    ENV_FILE = "env-file"
    OVERLOAD = "overload"


def _split_flags(value: str) -> List[str]:
    return [part.strip().lstrip("-") for part in value.split(",") if part.strip()]


@dataclass
class Config:
    """Command-line flag configuration

    Attributes:
        env_flags: Aliases naming an env file to load (without leading dashes)
        overload_flags: Aliases enabling overwrite of existing variables
        default_env_path: Path used when an env flag is given without a value
        overload_by_default: Initial value of the overload flag
    """

    env_flags: List[str] = field(default_factory=lambda: list(DEFAULT_ENV_FLAGS))
    overload_flags: List[str] = field(default_factory=lambda: list(DEFAULT_OVERLOAD_FLAGS))
    default_env_path: str = DEFAULT_ENV_PATH
    overload_by_default: bool = False

    @classmethod
    def from_env(
        cls,
        prefix: str = "UDOTENV",
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Config":
        """Load flag configuration from environment variables

        Args:
            prefix: Environment variable prefix
            environ: Mapping to read from (default: os.environ)

        Environment variables:
            {prefix}_ENV_FLAGS: Comma separated env-file aliases
            {prefix}_OVERLOAD_FLAGS: Comma separated overload aliases
            {prefix}_DEFAULT_ENV_PATH: Default env file path
            {prefix}_OVERLOAD_BY_DEFAULT: "true" to overload unless told otherwise
        """
        env = os.environ if environ is None else environ
        config = cls()

        env_flags = env.get(f"{prefix}_ENV_FLAGS")
        if env_flags:
            config.env_flags = _split_flags(env_flags)

        overload_flags = env.get(f"{prefix}_OVERLOAD_FLAGS")
        if overload_flags:
            config.overload_flags = _split_flags(overload_flags)

        config.default_env_path = env.get(f"{prefix}_DEFAULT_ENV_PATH", DEFAULT_ENV_PATH)
        config.overload_by_default = (
            env.get(f"{prefix}_OVERLOAD_BY_DEFAULT", "false").strip().lower() in _TRUE_VALUES
        )
        return config

    def resolved(self) -> "Config":
        """Return a copy with an empty default_env_path replaced by ``.env``."""
        return Config(
            env_flags=list(self.env_flags),
            overload_flags=list(self.overload_flags),
            default_env_path=self.default_env_path or DEFAULT_ENV_PATH,
            overload_by_default=self.overload_by_default,
        )


def get_default_config() -> Config:
    """Return a Config with the built-in aliases and ``.env`` as default path."""
    return Config()


class FlagRoleTable(Mapping[str, FlagRole]):
    """Alias to role lookup, built once from a Config.

    Env-file aliases are registered first and overload aliases second, so an
    alias listed for both roles resolves to OVERLOAD.
    """

    def __init__(self, env_flags: List[str], overload_flags: List[str]):
        table: Dict[str, FlagRole] = {}
        for alias in env_flags:
            table[alias] = FlagRole.ENV_FILE
        for alias in overload_flags:
            table[alias] = FlagRole.OVERLOAD
        self._table = table

    @classmethod
    def from_config(cls, config: Config) -> "FlagRoleTable":
        return cls(config.env_flags, config.overload_flags)

    def __getitem__(self, alias: str) -> FlagRole:
        return self._table[alias]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def resolve(self, token: str) -> Optional[FlagRole]:
        """Resolve a command-line token such as ``-envs`` or ``--e`` to its role.

        The token is looked up with one leading dash stripped, then with two.
        Returns None for tokens that name no registered alias.
        """
        role = self._table.get(token[1:])
        if role is None and token.startswith("--"):
            role = self._table.get(token[2:])
        return role

    def aliases(self, role: FlagRole) -> List[str]:
        return [alias for alias, r in self._table.items() if r is role]
