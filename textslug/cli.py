"""Minimal CLI wrapper around *textslug.transform* – enough for scripts & demos."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Iterable, TextIO

from .log import setup_logger
from .transform import idify, slugify

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "TEXTSLUG_LOG_LEVEL"


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------


def _convert_lines(lines: Iterable[str], func: Callable[[str], str], out: TextIO) -> int:
    count = 0
    for line in lines:
        print(func(line.rstrip("\r\n")), file=out)
        count += 1
    return count


def _run(args: argparse.Namespace, func: Callable[[str], str]) -> None:
    if args.text:
        print(func(" ".join(args.text)))
        return

    if args.file is None or args.file == "-":
        count = _convert_lines(sys.stdin, func, sys.stdout)
        logger.info("Converted %d line(s) from stdin", count)
        return

    path = Path(args.file).expanduser()
    if not path.is_file():
        sys.exit(f"error: input file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as fh:
            count = _convert_lines(fh, func, sys.stdout)
    except (OSError, UnicodeDecodeError) as exc:
        sys.exit(f"error: cannot read {path}: {exc}")

    logger.info("Converted %d line(s) from %s", count, path)


# ---------------------------------------------------------------------------
# Sub-command implementations
# ---------------------------------------------------------------------------


def _cmd_slug(args: argparse.Namespace) -> None:  # noqa: D401 – CLI entry
    """Print the slug form of the input."""

    _run(args, slugify)


def _cmd_id(args: argparse.Namespace) -> None:  # noqa: D401 – CLI entry
    """Print the identifier form of the input."""

    _run(args, idify)


# ---------------------------------------------------------------------------
# Top-level argument parser
# ---------------------------------------------------------------------------


def _add_input_args(sp: argparse.ArgumentParser) -> None:
    sp.add_argument("text", nargs="*", help="text to convert (joined with spaces)")
    sp.add_argument(
        "--file",
        help="convert each line of this file instead ('-' reads stdin)",
    )


def _build_parser() -> argparse.ArgumentParser:  # noqa: D401 – util
    p = argparse.ArgumentParser(prog="textslug", description="textslug – slugs and identifiers from text")
    p.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV, "WARNING"),
        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    p.add_argument("--log-file", help="also write log records to this file")

    sub = p.add_subparsers(dest="cmd", required=True)

    # textslug slug
    sp = sub.add_parser("slug", help="URL-safe slug (keeps - _ ~ .)")
    _add_input_args(sp)
    sp.set_defaults(func=_cmd_slug)

    # textslug id
    sp = sub.add_parser("id", help="strict identifier (keeps - _)")
    _add_input_args(sp)
    sp.set_defaults(func=_cmd_id)

    return p


def main(argv: list[str] | None = None) -> None:  # noqa: D401 – CLI entry
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logger(args.log_level, args.log_file)
    args.func(args)


if __name__ == "__main__":  # pragma: no cover
    main()
