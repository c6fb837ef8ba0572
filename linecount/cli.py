"""Command-line front door for linecount.

Parses CLI options, merges them with config defaults, and runs either the
silent aggregate count or the rendered tree, then prints the results box.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from . import config
from .file_tree_model import aggregate
from .summary import format_results
from .tree_model import render
from .ui_theme import available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lc", description="Count lines and bytes under a directory tree.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to count. Defaults to current directory.")
    parser.add_argument("-p", "--path", dest="path_option", metavar="PATH", help="Directory to count (same as positional).")
    parser.add_argument("-d", "--display", action="store_true", help="Print the file tree while counting.")
    parser.add_argument("--no-bytes", action="store_true", help="Omit byte counts from the output.")
    parser.add_argument(
        "-g",
        "--gitignore",
        action="store_true",
        help="Skip entries named in each directory's own .gitignore.",
    )
    parser.add_argument("--show-hidden", action="store_true", help="Also print dot-files in the tree.")
    parser.add_argument("--sequential", action="store_true", help="Walk subdirectories one at a time.")
    parser.add_argument("-j", "--jobs", type=_positive_int, default=None, help="Worker threads for the walk.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Tree color theme ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging.")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and count the requested directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Exits with an error message when the root is missing or
    cannot be listed.
    """
    args = build_parser().parse_args()
    _configure_logging(args.verbose)

    if args.path is not None and args.path_option is not None:
        raise SystemExit("Cannot combine positional path with --path.")
    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or args.path_option or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    show_bytes = config.load_show_bytes() and not args.no_bytes
    skip_gitignored = args.gitignore or config.load_skip_gitignored()
    show_hidden = args.show_hidden or config.load_show_hidden()
    max_workers = args.jobs if args.jobs is not None else config.load_jobs()
    no_color = args.no_color or not sys.stdout.isatty()
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=no_color)

    start = time.perf_counter()
    try:
        if args.display:
            measurement = render(
                path,
                out=sys.stdout,
                show_hidden=show_hidden,
                show_bytes=show_bytes,
                theme=theme,
                skip_gitignored=skip_gitignored,
                sequential=args.sequential,
                max_workers=max_workers,
            )
        else:
            measurement = aggregate(
                path,
                skip_gitignored=skip_gitignored,
                sequential=args.sequential,
                max_workers=max_workers,
            )
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc
    elapsed = time.perf_counter() - start

    sys.stdout.write(format_results(measurement, elapsed, show_bytes=show_bytes, theme=theme))


if __name__ == "__main__":
    main()
