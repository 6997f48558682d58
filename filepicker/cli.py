"""Command-line front door for filepicker.

Parses CLI options, merges them with the user defaults file, runs the picker
on stderr, and prints the chosen path to stdout so it can be captured by a
shell (``vim "$(filepicker --ext py)"``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .errors import FilePickerError
from .listing import AnyEntry, FileType, Folder, WithExtension
from .picker import FilePicker
from .theme import available_theme_names, resolve_theme


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
    parser = argparse.ArgumentParser(
        prog="filepicker",
        description="Pick a file or folder interactively and print its path.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Starting directory. Defaults to current directory.")
    kind = parser.add_mutually_exclusive_group()
    kind.add_argument("--folder", action="store_true", help="Only list directories.")
    kind.add_argument("--ext", metavar="EXT", default=None, help="Only list directories and files with this extension.")
    parser.add_argument("--prompt", default=None, help="Prompt shown above the listing.")
    parser.add_argument("--no-report", action="store_true", help="Do not print a confirmation line after selecting.")
    parser.add_argument("--no-clear", action="store_true", help="Leave the listing on screen after selecting.")
    parser.add_argument("--max-length", type=_positive_int, default=None, help="Maximum number of rows per page.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme ({', '.join(available_theme_names())}, or plain).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors.")
    parser.add_argument("--allow-cancel", action="store_true", help="Let Escape or q quit without a selection.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    return parser


def _file_type(args: argparse.Namespace) -> FileType:
    if args.folder:
        return Folder()
    if args.ext:
        return WithExtension(args.ext)
    return AnyEntry()


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, run the picker, and print the selected path.

    Exits with status 1 when the user cancels (only possible with
    ``--allow-cancel``).
    """
    args = build_parser().parse_args(argv)

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    start = Path(args.path) if args.path is not None else None
    if start is not None and not start.is_dir():
        raise SystemExit(f"Not a directory: {start}")

    max_length = args.max_length if args.max_length is not None else config.load_max_length()
    clear = False if args.no_clear else config.load_clear()
    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    no_color = args.no_color or not sys.stderr.isatty()

    picker = FilePicker(
        _file_type(args),
        prompt=args.prompt,
        report=False if args.no_report else None,
        clear=clear,
        max_length=max_length,
        initial_folder=start,
        theme=resolve_theme(theme_name, no_color=no_color),
    )

    try:
        if args.allow_cancel:
            selected = picker.interact_opt()
        else:
            selected = picker.interact()
    except FilePickerError as exc:
        raise SystemExit(str(exc)) from exc
    except KeyboardInterrupt:
        raise SystemExit(130) from None

    if selected is None:
        raise SystemExit(1)
    sys.stdout.write(f"{selected}\n")


if __name__ == "__main__":
    main()
