"""Точка входа: разбор аргументов командной строки и запуск."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from replace_color.app import ReplaceColorApp
from replace_color.models.color_model import parse_hex_color, unpack
from replace_color.models.run_config import RunConfig

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_BAD_ARGUMENTS = 255

USAGE_EXAMPLE = "> replace-color -d=/path/to/images -s=.png -f=0xffff00ff -t=0xffff0080"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.exit(EXIT_BAD_ARGUMENTS, f"\nError: {message}\n\n{self.format_help()}\n")


def _hex_color(text: str) -> int:
    try:
        return parse_hex_color(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="replace-color",
        description="Replace a single color in a bunch of RGBA images",
    )
    parser.add_argument("-d", "--directory", required=True, help="The directory where to search for input files")
    parser.add_argument("-s", "--filename-suffix", required=True, help="How the input file names should end")
    parser.add_argument(
        "-f", "--from-color", required=True, type=_hex_color,
        help="Which RGBA color to change; for example, try 0xffff00ff for yellow",
    )
    parser.add_argument(
        "-t", "--to-color", required=True, type=_hex_color,
        help="Which RGBA color to change to; for example, try 0xffff0080 for yellow with alpha",
    )
    parser.add_argument("-c", "--show-colors", action="store_true", help="Show colors actually found?")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")
    return parser


def parse_config(argv: List[str]) -> RunConfig:
    """Разбирает аргументы в `RunConfig`; при ошибке завершает процесс с кодом 255."""
    parser = build_parser()
    args = parser.parse_args(argv)

    directory = Path(args.directory)
    if not directory.is_dir():
        parser.error(f"directory does not exist: {directory}")

    return RunConfig(
        directory=directory,
        filename_suffix=args.filename_suffix,
        from_color=unpack(args.from_color),
        to_color=unpack(args.to_color),
        show_colors=args.show_colors,
        verbose=args.verbose,
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Запускает замену цвета и возвращает код завершения процесса."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print("Usage: ")
        print(USAGE_EXAMPLE)
        return EXIT_USAGE

    config = parse_config(argv)
    configure_logging(config.verbose)
    totals = ReplaceColorApp(config).run()
    logger.info(
        "Done: %d of %d files touched, %d pixels converted, %d unreadable, %d skipped, %d write failures",
        totals.files_touched,
        totals.files_found,
        totals.pixels_converted,
        totals.files_unreadable,
        totals.files_skipped,
        totals.files_write_failed,
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
