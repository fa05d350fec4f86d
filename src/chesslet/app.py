"""Application entry point."""

from __future__ import annotations

import argparse
import sys

from chesslet.ui.settings import AppSettings


def _parse_args(argv: list[str]) -> tuple[AppSettings, list[str]]:
    parser = argparse.ArgumentParser(prog="chesslet", description="Play chess.")
    parser.add_argument("--theme", default="Classic", help="Classic, Blue or Green")
    parser.add_argument(
        "--no-hints", action="store_true", help="do not highlight legal moves"
    )
    parser.add_argument(
        "--no-coordinates", action="store_true", help="hide rank/file labels"
    )
    parser.add_argument("--log-level", default="WARNING")
    args, qt_args = parser.parse_known_args(argv)
    settings = AppSettings(
        board_theme=args.theme,
        show_coordinates=not args.no_coordinates,
        show_legal_moves=not args.no_hints,
        log_level=args.log_level,
    )
    return settings, qt_args


def main() -> None:
    """Launch the chesslet application."""
    from chesslet.ui.bootstrap import run_application

    settings, qt_args = _parse_args(sys.argv[1:])
    sys.exit(run_application([sys.argv[0], *qt_args], settings))


if __name__ == "__main__":
    main()
