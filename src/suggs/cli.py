"""
CLI interface for suggs.

Track insertions, deletions and comments in plain text files:

    suggs diff old.txt new.txt -a @me > changes.txt
    suggs new changes.txt
    suggs colorize changes.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from .config import get_config
from .core import canonical_author, diff_files, read_text, resolve_file, write_text
from .formats import critic as _critic  # noqa: F401 - ensure critic format is registered
from .formats import html as _html  # noqa: F401 - ensure html format is registered
from .formats import latex as _latex  # noqa: F401 - ensure latex format is registered
from .formats import suggestions as _suggestions  # noqa: F401 - ensure suggestions format is registered
from .formats.base import MarkupFormat, registry
from .parser import parse, parse_file
from .render import render_colorized, render_with_policy

logger = logging.getLogger(__name__)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="suggs",
        description="Track changes and comments in plain text files",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )

    parser.add_argument(
        "--keep-tag-lines",
        action="store_false",
        dest="strip_tag_lines",
        default=None,
        help="Keep the blank line left behind by a tag on a line of its own",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    diff = subparsers.add_parser("diff", help="Output diff from OLD to NEW in suggestions format")
    diff.add_argument("old", help="Original file")
    diff.add_argument("new", help="Changed file")
    diff.add_argument("--author", "-a", help="Sign every change with AUTHOR")

    for name, help_text in (
        ("old", "Output result of rejecting all changes in FILE"),
        ("new", "Output result of accepting all changes in FILE"),
        ("reject", "Overwrite FILE, rejecting all changes"),
        ("accept", "Overwrite FILE, accepting all changes"),
        ("colorize", "Print suggestions FILE, highlighting changes and comments"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("file", help="Suggestions file")

    export = subparsers.add_parser("export", help="Render suggestions FILE in another markup")
    export.add_argument("file", help="Suggestions file")
    export.add_argument(
        "--to",
        "-t",
        dest="format_name",
        choices=registry.names,
        help="Output format (default: from OUTPUT extension, else suggestions)",
    )
    export.add_argument("--output", "-o", help="Write to OUTPUT instead of stdout")

    return parser.parse_args(args)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def choose_format(format_name: str | None, output: str | None) -> MarkupFormat:
    """Pick the export format: --to, else OUTPUT's extension, else suggestions."""
    if format_name:
        fmt = registry.get_by_name(format_name)
        if fmt is None:
            raise ValueError(f"Unknown format: {format_name}")
        return fmt
    if output:
        fmt = registry.for_filename(output)
        if fmt is not None:
            return fmt
        logger.debug("No format registered for %s, using suggestions", output)
    fmt = registry.get_by_name("suggestions")
    if fmt is None:
        raise RuntimeError("No output format available")
    return fmt


def command_diff(parsed: argparse.Namespace) -> str:
    author = parsed.author or get_config().diff.author
    if author is not None:
        author = canonical_author(author)
    return diff_files(parsed.old, parsed.new, author)


def command_export(parsed: argparse.Namespace) -> str:
    fmt = choose_format(parsed.format_name, parsed.output)
    root = parse(read_text(parsed.file), strip_tag_lines=parsed.strip_tag_lines)
    return render_with_policy(root, fmt)


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)
    configure_logging(parsed.verbose)
    strip = parsed.strip_tag_lines

    try:
        if parsed.command == "diff":
            print(command_diff(parsed), end="")

        elif parsed.command in ("old", "new"):
            print(resolve_file(parsed.file, accept=parsed.command == "new", strip_tag_lines=strip), end="")

        elif parsed.command in ("reject", "accept"):
            resolved = resolve_file(parsed.file, accept=parsed.command == "accept", strip_tag_lines=strip)
            write_text(parsed.file, resolved)

        elif parsed.command == "colorize":
            root = parse_file(parsed.file, strip_tag_lines=strip)
            Console(soft_wrap=True, highlight=False).print(render_colorized(root), end="")

        elif parsed.command == "export":
            output = command_export(parsed)
            if parsed.output:
                write_text(Path(parsed.output), output)
            else:
                print(output, end="")

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        # ParseError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
