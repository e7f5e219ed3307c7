#!/usr/bin/env python3
"""Load env files named on the command line and show what was set.

Usage:
    python show_env.py [-envs [PATH]]... [-env-overload] [--json] [KEY ...]

Examples:
    # Load ./.env and list the variables it set
    python show_env.py -envs

    # Load two files, the second overriding the first and the environment
    python show_env.py -envs base.env -envs local.env -o

    # Print selected keys as JSON
    python show_env.py -e prod.env --json DATABASE_URL LOG_LEVEL

Environment Variables:
    UDOTENV_ENV_FLAGS         Comma separated env-file aliases
    UDOTENV_OVERLOAD_FLAGS    Comma separated overload aliases
    UDOTENV_DEFAULT_ENV_PATH  Path used when an env flag has no value
    UDOTENV_LOG_LEVEL         Logging level for udotenv itself
"""

import argparse
import json
import os
import sys
from typing import Dict, List, Optional

from udotenv import Config, FlagParser, UdotenvError, new


def build_parser() -> argparse.ArgumentParser:
    parser = FlagParser(description="Load env files named on the command line and show what was set")
    parser.add_argument("--json", action="store_true", help="Print a JSON object instead of KEY=VALUE lines")
    parser.add_argument("keys", nargs="*", help="Only show these keys (default: every key written)")
    return parser


def select(written: Dict[str, str], keys: List[str]) -> Dict[str, Optional[str]]:
    if not keys:
        return dict(sorted(written.items()))
    return {key: os.environ.get(key) for key in keys}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        env = new(Config.from_env(), argv=argv or sys.argv, parser=parser, parse_flags=False)
        args = env.parse()
        if env.extra_args:
            print(f"Error: unrecognized arguments: {' '.join(env.extra_args)}", file=sys.stderr)
            return 1
        written = env.load()
    except UdotenvError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    values = select(written, args.keys)

    if args.json:
        print(json.dumps(values, indent=2))
    else:
        for key, value in values.items():
            print(f"{key}={'' if value is None else value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
