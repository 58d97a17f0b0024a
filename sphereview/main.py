"""Command-line entry point of the sphere viewer."""

from __future__ import annotations

import argparse
import sys

from .game import Game


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def parse_args(argv) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="sphereview", description="Fly around a ray-traced sphere scene.")
    parser.add_argument("--width", type=_positive_int, default=1920, help="window width in pixels")
    parser.add_argument("--height", type=_positive_int, default=1080, help="window height in pixels")
    parser.add_argument("--title", default="my title", help="window title")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the viewer until its window is closed."""
    args = parse_args(argv)
    game = Game(args.width, args.height)
    try:
        game.init(args.title)
    except (RuntimeError, OSError) as exc:
        print(exc, file=sys.stderr)
        return -1

    try:
        while game.running:
            game.window.dispatch_events()
            report = game.update()
            if report is not None:
                print(report)
            game.render()
    finally:
        game.window.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())