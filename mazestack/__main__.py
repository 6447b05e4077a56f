"""Command line entry point: generate a maze and summarize what it builds."""

from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .errors import MazeError
from .generators import Algorithm, Bias, EntryMode
from .session import MazeSession
from .util import rng
from .view.preview import save_preview

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mazestack",
        description="Generate a maze, print it, and report its wall/floor segments.",
    )
    parser.add_argument("--width", type=int, default=config.DEFAULT_MAZE_WIDTH)
    parser.add_argument("--height", type=int, default=config.DEFAULT_MAZE_HEIGHT)
    parser.add_argument(
        "--algorithm",
        choices=[a.value for a in Algorithm],
        default=Algorithm.DEPTH_FIRST.value,
    )
    parser.add_argument(
        "--entries", choices=[e.value for e in EntryMode], default=EntryMode.NONE.value
    )
    parser.add_argument(
        "--bias", choices=[b.value for b in Bias], default=Bias.NONE.value
    )
    parser.add_argument(
        "--seed",
        default=None,
        help=f"Master seed (any string or integer, default {config.RANDOM_SEED!r}).",
    )
    parser.add_argument("--preview", metavar="PATH", help="Write a PNG preview.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng.init(args.seed if args.seed is not None else config.RANDOM_SEED)
    session = MazeSession()
    try:
        stack = session.generate(
            args.width,
            args.height,
            EntryMode(args.entries),
            Bias(args.bias),
            algorithm=Algorithm(args.algorithm),
        )
    except MazeError as e:
        parser.error(str(e))

    assert session.built is not None
    print(stack.ground.render_text())
    if session.markers is not None:
        print(f"start: {session.markers.start.pos}  end: {session.markers.end.pos}")
    print(
        f"walls: {len(session.built.walls)}  floors: {len(session.built.floors)}  "
        f"cache: {session.cache.get_cache_info()}"
    )

    try:
        if args.preview:
            path = save_preview(stack.ground, args.preview, session.markers)
            logger.info(f"Preview written to {path}")
            print(f"preview: {path}")
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
