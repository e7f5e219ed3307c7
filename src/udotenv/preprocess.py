"""Rewrite a command line before flag parsing.

An env-file flag may be given without a value, in which case the default env
path is implied. A conventional flag parser would instead take the next flag
as the value, or fail when the flag is last. ``preprocess_args`` inserts the
default path right after such flags so the parser sees an explicit value.

Example:
    >>> table = FlagRoleTable(["envs", "e"], ["env-overload", "eo", "o"])
    >>> preprocess_args(["prog", "-envs", "-o"], table, ".env")
    ['prog', '-envs', '.env', '-o']
"""

from typing import List, Optional, Sequence

from udotenv.config.settings import FlagRole, FlagRoleTable
from udotenv.exceptions import DuplicateOverloadFlag
from udotenv.logger import Logger, get_logger


def _is_flag(token: str) -> bool:
    return token.startswith("-") and len(token) >= 2


def preprocess_args(
    argv: Sequence[str],
    table: FlagRoleTable,
    default_env_path: str,
    logger: Optional[Logger] = None,
) -> List[str]:
    """Return a copy of ``argv`` with default env paths inserted.

    ``argv[0]`` is the program name and is copied without inspection.

    Args:
        argv: Raw command line
        table: Alias to role lookup
        default_env_path: Value inserted after an env-file flag lacking one
        logger: Logger for debug output

    Returns:
        The rewritten argument list.

    Raises:
        DuplicateOverloadFlag: If more than one overload flag is present.
    """
    if len(argv) <= 1:
        return list(argv)

    log = logger or get_logger()
    out: List[str] = [argv[0]]
    overload_seen = False

    for i in range(1, len(argv)):
        token = argv[i]
        out.append(token)
        if not _is_flag(token):
            continue

        # -o=false and -envs=path carry their value attached
        name, attached, _ = token.partition("=")
        role = table.resolve(name)
        if role is FlagRole.OVERLOAD:
            if overload_seen:
                raise DuplicateOverloadFlag(token, i)
            overload_seen = True
        elif role is FlagRole.ENV_FILE and not attached:
            is_last = i == len(argv) - 1
            if is_last or argv[i + 1].startswith("-"):
                out.append(default_env_path)
                log.debug("Inserted default env path", flag=token, position=i, path=default_env_path)

    return out


__all__ = ["preprocess_args"]
