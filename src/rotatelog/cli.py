#!/usr/bin/env python3
"""
rotatelog command line.

Flags follow the classic rotate_log script:

  rotatelog -d /var/log/app/archive -i /var/log/app/current.log -c -p 30

Stages run in a fixed order (compress, delete text, move, purge by
count, purge by size); see rotatelog.runner.
"""

from __future__ import annotations

import argparse
import sys

USAGE = """\
Usage: {prog} [-ct] [-d dir] [-i file] [-m size(MB)] [-p count]
  -c ... compress old log files
  -d ... set directory to move log to
  -i ... input log file to process
  -m ... purge old log files that exceed this size threshold
  -p ... purge old log files that exceed this count threshold
  -t ... delete all text files in target directory
"""

PROG = "rotatelog"


def print_usage(file=None) -> None:
    print(USAGE.format(prog=PROG), end="", file=file or sys.stderr)


def _non_negative_int(raw: str) -> int:
    try:
        v = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}")
    if v < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {v}")
    return v


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s [-ct] [-d dir] [-i file] [-m size(MB)] [-p count]",
        add_help=False,
    )

    p.add_argument("-c", dest="compress", action="store_true")
    p.add_argument("-d", dest="output_dir", metavar="dir")
    p.add_argument("-h", dest="help", action="store_true")
    p.add_argument("-i", dest="input_file", metavar="file")
    p.add_argument("-m", dest="purge_size", metavar="size", type=_non_negative_int)
    p.add_argument("-p", dest="purge_limit", metavar="count", type=_non_negative_int)
    p.add_argument("-t", dest="delete_text", action="store_true")

    p.add_argument("-v", "--verbose", action="store_true", help="Debug output")
    p.add_argument("-q", "--quiet", action="store_true", help="No console output")

    return p


def main(argv: list[str] | None = None) -> int:
    from rotatelog.bootstrap import bootstrap_base_env, bootstrap_run_context

    # Load .env and base environment early
    bootstrap_base_env()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help:
        print_usage()
        return 1

    bootstrap_run_context(verbose=args.verbose, quiet=args.quiet)

    # Initialize logging AFTER run-context env stamping
    from rotatelog.logger import get_logger, init_logging

    init_logging()
    log = get_logger("rotatelog.cli")

    from rotatelog.archive.errors import DirectoryOpenError
    from rotatelog.config import load_config
    from rotatelog.env import ConfigError, get_env
    from rotatelog.runner import run

    try:
        log.debug(f"Environment: {get_env().as_dict()}")
        config = load_config(
            output_dir=args.output_dir,
            compress=args.compress,
            delete_text=args.delete_text,
            input_file=args.input_file,
            purge_limit=args.purge_limit,
            purge_size=args.purge_size,
        )
    except ConfigError as e:
        # Bypasses the console gate so -q still explains the failure
        print(f"Error: {e}", file=sys.stderr)
        log.debug(f"Config error: {e}")
        print_usage()
        return 1

    try:
        outcome = run(config)
    except DirectoryOpenError as e:
        log.error(str(e))
        return 1
    except KeyboardInterrupt:
        return 130

    log.debug(f"Run finished: {outcome.overall.value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
