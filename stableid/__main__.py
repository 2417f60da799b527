"""
stableid.__main__

CLI entry point: parse args, dispatch to IdGenerator, print one line per input.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Callable, Optional

from stableid.errors import StableIdError
from stableid.identifier import IdGenerator
from stableid.misc.logger import logger, set_level
from stableid.models.configuration import Configuration
from stableid.models.identifier import parse_identifier


def _build_parser(config: Configuration) -> argparse.ArgumentParser:
    schemes = "/".join(config.allowed_schemes)
    p = argparse.ArgumentParser(
        prog="stableid",
        description=f"Generate stable ids for file paths and {schemes} URIs.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log every generated id (TRACE).")
    p.add_argument(
        "--log-level",
        default=None,
        help="Log level name, overrides STABLEID_LOG_LEVEL.",
    )

    sub = p.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("path", help="Id for one or more files (directories are rejected).")
    sp.add_argument("inputs", nargs="+", metavar="FILE")

    su = sub.add_parser("uri", help=f"Id for one or more {schemes} URIs.")
    su.add_argument("inputs", nargs="+", metavar="URI")

    sx = sub.add_parser("parse", help="Print the fields of one or more ids as JSON.")
    sx.add_argument("inputs", nargs="+", metavar="ID")

    return p


def _run_each(inputs: list[str], fn: Callable[[str], str]) -> int:
    failed = 0
    for item in inputs:
        try:
            print(fn(item))
        except (StableIdError, OSError) as ex:
            logger.error(f"{item}: {ex}")
            failed += 1
    return 1 if failed else 0


def main(argv: Optional[list[str]] = None) -> int:
    config = Configuration()
    args = _build_parser(config).parse_args(argv)
    if args.log_level:
        config.log_level = args.log_level
    try:
        set_level("TRACE" if args.verbose else config.log_level)
    except ValueError as ex:
        logger.error(str(ex))
        return 2

    gen = IdGenerator(config)

    if args.command == "path":
        return _run_each(args.inputs, gen.generate_id_from_path)
    if args.command == "uri":
        return _run_each(args.inputs, gen.generate_id_from_uri)
    return _run_each(args.inputs, lambda s: json.dumps(parse_identifier(s).to_dict()))


if __name__ == "__main__":
    sys.exit(main())
