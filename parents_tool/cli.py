from __future__ import annotations

import argparse
import logging
import shutil
import sys

from . import __version__
from .ancestors import parents_of_paths
from .app_logging import init_app_logging
from .constants import CAT_CHUNK_SIZE, ENV_SKIP
from .multi_reader import SourceError
from .sources import iter_lines, select_source
from .util import env_int


_LOG = logging.getLogger("parents_tool")


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _cmd_parents(args: argparse.Namespace) -> int:
    """Print every parent of each path, e.g. /usr/bin/tail => /usr /usr/bin /usr/bin/tail."""
    init_app_logging(component="parents")

    paths = list(args.paths or [])
    if not paths:
        try:
            paths = list(iter_lines(select_source(args.input or [])))
        except SourceError as e:
            raise SystemExit(f"parents: {e}") from e
    _LOG.debug("expanding %d path(s) with skip=%d", len(paths), args.skip)

    print("\n".join(parents_of_paths(paths, args.skip)))
    return 0


def _cmd_cat(args: argparse.Namespace) -> int:
    """Concatenate files (or stdin) to stdout."""
    init_app_logging(component="cat")

    out = sys.stdout.buffer
    try:
        with select_source(args.files or []) as src:
            shutil.copyfileobj(src, out, CAT_CHUNK_SIZE)
    except SourceError as e:
        raise SystemExit(f"cat: {e}") from e
    out.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="parents_tool",
        description="Print every parent of the paths provided, e.g. /usr/bin/tail => /usr /usr/bin /usr/bin/tail.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_par = sub.add_parser("parents", help="Print every parent of each path.")
    p_par.add_argument(
        "-s",
        "--skip",
        type=_non_negative_int,
        default=env_int(ENV_SKIP, 0, minimum=0),
        help=f"Do not print the first SKIP components of each path (default: ${ENV_SKIP} or 0).",
    )
    p_par.add_argument(
        "-i",
        "--input",
        action="append",
        default=[],
        metavar="FILE",
        help="Read paths from FILE instead of stdin (repeatable; ignored when paths are given).",
    )
    p_par.add_argument("paths", nargs="*", help="If zero paths are provided, reads paths from stdin.")
    p_par.set_defaults(func=_cmd_parents)

    p_cat = sub.add_parser("cat", help="Concatenate files to stdout (stdin when none are given).")
    p_cat.add_argument("files", nargs="*", help="Files to read, in order.")
    p_cat.set_defaults(func=_cmd_cat)

    args = p.parse_args(argv)
    rv = args.func(args)
    if rv is None:
        return 0
    return int(rv)
