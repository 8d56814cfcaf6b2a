"""Run the game: ``python -m pyflap`` or the ``pyflap`` console script."""

import argparse
import logging
from pathlib import Path

from pyflap.app.config import AppConfig


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="pyflap",
        description="Jump through the gaps. Space to start, Space to jump.",
    )
    parser.add_argument("--width", type=int, default=AppConfig.width, help="initial window width in px")
    parser.add_argument("--height", type=int, default=AppConfig.height, help="initial window height in px")
    parser.add_argument("--fps", type=int, default=AppConfig.fps, help="frame rate to schedule at")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="directory holding high_score.json (default: current directory)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    overrides = {}
    if args.data_dir is not None:
        overrides["data_dir"] = args.data_dir
    config = AppConfig(width=args.width, height=args.height, fps=args.fps, **overrides)

    # tkinter is only needed once there is a window to open.
    from pyflap.app.game_app import GameApp

    GameApp(config).run()


if __name__ == "__main__":
    main()
