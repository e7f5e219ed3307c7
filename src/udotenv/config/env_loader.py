"""Apply dotenv files to an environment mapping.

Files are parsed with python-dotenv and applied in the order given:
- overload=False: keys already present are kept, so the first file to set
  a key wins and pre-existing variables are never replaced
- overload=True: later files replace earlier ones and pre-existing values

Every file is parsed before anything is applied.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, MutableMapping, Optional, Sequence

from dotenv import dotenv_values

from udotenv.exceptions import EnvFileLoadError
from udotenv.logger import Logger, get_logger


class EnvFileLoader:
    """Load a list of env files into an environment mapping."""

    def __init__(
        self,
        paths: Sequence[str | Path],
        overload: bool = False,
        logger: Optional[Logger] = None,
    ) -> None:
        self.paths: List[str] = [str(p) for p in paths]
        self.overload = overload
        self.logger = logger or get_logger()

    def _read(self, path: str) -> Dict[str, str]:
        if not Path(path).is_file():
            raise EnvFileLoadError(self.paths, path, "file not found")
        try:
            values = dotenv_values(path, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise EnvFileLoadError(self.paths, path, str(exc)) from exc
        # Keys declared without a value come back as None
        return {k: v for k, v in values.items() if v is not None}

    def load(self, environ: Optional[MutableMapping[str, str]] = None) -> Dict[str, str]:
        """Apply the env files to ``environ`` (default: os.environ).

        Returns:
            The keys written and their new values.

        Raises:
            EnvFileLoadError: If any file is missing or cannot be read.
        """
        if not self.paths:
            return {}

        target = os.environ if environ is None else environ

        try:
            parsed = [self._read(path) for path in self.paths]
        except EnvFileLoadError as exc:
            self.logger.error("Failed to load env files", paths=self.paths, failed_path=exc.failed_path)
            raise

        written: Dict[str, str] = {}
        for values in parsed:
            for key, value in values.items():
                if self.overload or key not in target:
                    target[key] = value
                    written[key] = value

        self.logger.info(
            "Loaded env files",
            paths=self.paths,
            overload=self.overload,
            keys=len(written),
        )
        return written


def load_env_files(
    paths: Sequence[str | Path],
    overload: bool = False,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """Shortcut for ``EnvFileLoader(paths, overload).load(environ)``."""
    return EnvFileLoader(paths, overload).load(environ)


__all__ = ["EnvFileLoader", "load_env_files"]
