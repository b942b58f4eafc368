# main.py

import argparse
import logging
import random
import sys
from typing import List, Optional

from builder import GeneralPositionError
from config import PuzzleConfig
from puzzle import Grow, MoveOutwards, Puzzle, Reset, Resize
from scene import MemoryScene


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate an untangle puzzle and run the steering field headless")
    p.add_argument("--circles", type=int, default=6, help="Number of generation circles")
    p.add_argument("--nodes", type=int, default=10, help="Target node count after contraction")
    p.add_argument("--seed", type=int, default=None, help="Seed for a reproducible puzzle")
    p.add_argument("--frames", type=int, default=200, help="Steering frames to run")
    p.add_argument("--dt", type=float, default=1.0 / 60.0, help="Seconds per frame")
    p.add_argument("--grow", type=int, default=0, help="Grow steps to apply after generation")
    p.add_argument("--verbose", action="store_true", help="Debug logging")
    return p


def _summary(puzzle: Puzzle) -> str:
    report = puzzle.update_crossings()
    return (f"nodes={puzzle.graph.nodeCount()} edges={puzzle.graph.edgeCount()} "
            f"crossings={report.crossing_count}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    puzzle = Puzzle(MemoryScene(), PuzzleConfig(), rng=rng)
    try:
        puzzle.handle(Resize(args.nodes, args.circles))
        puzzle.handle(Reset())
    except GeneralPositionError as e:
        print(f"Generation failed: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Invalid parameters: {e}", file=sys.stderr)
        return 2

    for _ in range(args.grow):
        if not puzzle.handle(Grow()):
            break

    print(f"start: {_summary(puzzle)}")
    for _ in range(args.frames):
        puzzle.handle(MoveOutwards(args.dt))
    print(f"after {args.frames} frames: {_summary(puzzle)}")
    print("solved" if puzzle.is_solved() else "not solved")
    return 0


if __name__ == '__main__':
    sys.exit(main())
