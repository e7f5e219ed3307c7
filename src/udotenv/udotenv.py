"""Command-line driven env file loading.

Typical use at the top of a program:

    import udotenv

    env = udotenv.new()   # registers the flags and parses sys.argv
    env.load()            # applies -envs files to os.environ

or, with a parser the program already owns:

    parser = udotenv.FlagParser()
    parser.add_argument("--verbose", action="store_true")
    env = udotenv.new(parser=parser)
    env.load()
    args = parser.parse_args(env.args[1:])
"""

import argparse
import sys
from dataclasses import dataclass, field
from typing import Dict, List, MutableMapping, Optional, Sequence

from udotenv.config import Config, EnvFileLoader, FlagRole, FlagRoleTable, get_default_config
from udotenv.exceptions import FlagParseError, MultipleConfigurationsProvided
from udotenv.logger import Logger, get_logger
from udotenv.preprocess import preprocess_args

ENV_FILES_DEST = "udotenv_env_files"
OVERLOAD_DEST = "udotenv_overload"

# Values accepted in the attached form of the overload flag, e.g. -o=false
TRUE_LITERALS = ("1", "t", "T", "true", "TRUE", "True")
FALSE_LITERALS = ("0", "f", "F", "false", "FALSE", "False")


class FlagParser(argparse.ArgumentParser):
    """ArgumentParser that raises argparse.ArgumentError instead of exiting.

    Host programs passing their own parser to ``new()`` should use this class
    so that a bad command line surfaces as a FlagParseError.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("allow_abbrev", False)
        kwargs.setdefault("exit_on_error", False)
        super().__init__(*args, **kwargs)

    def error(self, message: str):
        raise argparse.ArgumentError(None, message)


def _option_strings(aliases: Sequence[str], values: Sequence[str] = ("",)) -> List[str]:
    options: List[str] = []
    for alias in aliases:
        for dashes in ("-", "--"):
            options.extend(f"{dashes}{alias}{value}" for value in values)
    return options


def register_flags(parser: argparse.ArgumentParser, config: Config) -> None:
    """Register the env-file and overload aliases of ``config`` on ``parser``.

    Every alias is accepted with one or two leading dashes. The overload flag
    never takes the next token as its value; an explicit value is only
    accepted attached, as in ``-o=false``.
    """
    table = FlagRoleTable.from_config(config)

    env_aliases = table.aliases(FlagRole.ENV_FILE)
    if env_aliases:
        parser.add_argument(
            *_option_strings(env_aliases),
            dest=ENV_FILES_DEST,
            action="append",
            metavar="PATH",
            help=f"env file to load, may be repeated (default path: {config.default_env_path})",
        )

    overload_aliases = table.aliases(FlagRole.OVERLOAD)
    if overload_aliases:
        parser.add_argument(
            *_option_strings(overload_aliases),
            dest=OVERLOAD_DEST,
            action="store_true",
            default=config.overload_by_default,
            help="overwrite environment variables that are already set (or -o=false)",
        )
        # The attached forms are registered as option strings of their own
        for const, literals in ((True, TRUE_LITERALS), (False, FALSE_LITERALS)):
            parser.add_argument(
                *_option_strings(overload_aliases, [f"={v}" for v in literals]),
                dest=OVERLOAD_DEST,
                action="store_const",
                const=const,
                default=config.overload_by_default,
                help=argparse.SUPPRESS,
            )


@dataclass
class UdotEnv:
    """State of one invocation: config, rewritten arguments and parsed flags.

    Attributes:
        config: Effective configuration
        parser: Parser the flags were registered on
        args: Preprocessed argument list (program name first)
        env_files: Env file paths accumulated from the command line
        overload: Whether loaded values replace existing variables
        extra_args: Arguments the parser did not recognise
    """

    config: Config
    parser: argparse.ArgumentParser
    args: List[str]
    env_files: List[str] = field(default_factory=list)
    overload: bool = False
    extra_args: List[str] = field(default_factory=list)
    logger: Logger = field(default_factory=get_logger, repr=False)

    def _reject_short_flag_clashes(self) -> None:
        # argparse reads -output as -o plus "utput" and -env as -e plus "nv"
        table = FlagRoleTable.from_config(self.config)
        short = {f"-{alias}" for alias in table if len(alias) == 1}
        for token in self.args[1:]:
            if token == "--":
                return
            name = token.partition("=")[0]
            if not token.startswith("-") or token.startswith("--") or len(name) <= 2:
                continue
            if table.resolve(name) is None and token[:2] in short:
                raise FlagParseError(f"unknown flag {token} clashes with {token[:2]}", self.args)

    def parse(self) -> argparse.Namespace:
        """Parse the preprocessed arguments and record env files and overload.

        Raises:
            FlagParseError: If the arguments are rejected. A host parser that
                is not a FlagParser may still exit on its own errors.
        """
        self._reject_short_flag_clashes()
        try:
            namespace, extra = self.parser.parse_known_args(self.args[1:])
        except argparse.ArgumentError as exc:
            raise FlagParseError(str(exc), self.args) from exc

        self.env_files = list(getattr(namespace, ENV_FILES_DEST, None) or [])
        self.overload = bool(getattr(namespace, OVERLOAD_DEST, self.config.overload_by_default))
        self.extra_args = extra
        self.logger.debug(
            "Parsed env flags",
            env_files=self.env_files,
            overload=self.overload,
        )
        return namespace

    def load(self, environ: Optional[MutableMapping[str, str]] = None) -> Dict[str, str]:
        """Apply the accumulated env files to ``environ`` (default: os.environ).

        Does nothing when no env file flag was given.
        """
        return EnvFileLoader(self.env_files, self.overload, logger=self.logger).load(environ)


def new(
    *configs: Config,
    argv: Optional[Sequence[str]] = None,
    parser: Optional[argparse.ArgumentParser] = None,
    parse_flags: bool = True,
    logger: Optional[Logger] = None,
) -> UdotEnv:
    """Register the env flags, rewrite ``argv`` and optionally parse it.

    Args:
        *configs: At most one Config; the defaults are used when none is given
        argv: Command line including the program name (default: sys.argv)
        parser: Parser to register the flags on (default: a new parser)
        parse_flags: Parse the rewritten arguments immediately
        logger: Logger for debug and load output

    Returns:
        The UdotEnv for this invocation.

    Raises:
        MultipleConfigurationsProvided: If more than one Config is passed.
        DuplicateOverloadFlag: If more than one overload flag is present.
        FlagParseError: If parse_flags is set and the arguments are rejected.
    """
    if len(configs) > 1:
        raise MultipleConfigurationsProvided(len(configs))
    config = configs[0].resolved() if configs else get_default_config()

    log = logger or get_logger()
    if parser is None:
        parser = FlagParser()
    register_flags(parser, config)

    raw = list(sys.argv if argv is None else argv)
    args = preprocess_args(raw, FlagRoleTable.from_config(config), config.default_env_path, logger=log)

    env = UdotEnv(
        config=config,
        parser=parser,
        args=args,
        overload=config.overload_by_default,
        logger=log,
    )
    if parse_flags:
        env.parse()
    return env


def load_from_args(
    *configs: Config,
    argv: Optional[Sequence[str]] = None,
    environ: Optional[MutableMapping[str, str]] = None,
) -> UdotEnv:
    """Register, parse and load in one call. Returns the UdotEnv used."""
    env = new(*configs, argv=argv)
    env.load(environ)
    return env


__all__ = [
    "UdotEnv",
    "FlagParser",
    "new",
    "load_from_args",
    "register_flags",
    "ENV_FILES_DEST",
    "OVERLOAD_DEST",
]
