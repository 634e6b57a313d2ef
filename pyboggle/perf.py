#!/usr/bin/env python
"""I/O-free performance test.

$ python -m pyboggle.perf 1000 --random_seed 808813
"""

import argparse
import time
from typing import Iterable

from tqdm import tqdm

from pyboggle.args import add_standard_args, get_lexicon_from_args, seed_from_args
from pyboggle.dice import roll_board
from pyboggle.grid import Grid, InvalidBoardError
from pyboggle.lexicon import Lexicon
from pyboggle.searcher import PathSearcher


def solve_boards(lexicon: Lexicon, grids: Iterable[Grid], progress=False):
    """Returns (total score, total words, total search calls) over all boards."""
    searcher = PathSearcher()
    total_score = 0
    total_words = 0
    total_calls = 0
    if progress:
        grids = tqdm(grids, smoothing=0)
    for grid in grids:
        results = searcher.find_all(grid, lexicon)
        total_score += results.total_score()
        total_words += len(results)
        total_calls += searcher.num_calls
    return total_score, total_words, total_calls


def main():
    parser = argparse.ArgumentParser(
        prog="Boggle perf test",
        description="Measure the speed of board solving, free from I/O.",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "--input_file",
        type=str,
        help="Use boards from this file instead of rolling random ones.",
    )
    parser.add_argument(
        "num_boards",
        type=int,
        help="Number of boards to solve",
        default=1000,
        nargs="?",
    )
    args = parser.parse_args()
    seed_from_args(args)

    lexicon = get_lexicon_from_args(parser, args)
    print(f"Loaded {len(lexicon)} words from {args.dictionary}")

    if args.input_file:
        boards = [line.strip() for line in open(args.input_file) if line.strip()]
        print(f"Read {len(boards)} boards from {args.input_file}")
    else:
        print(f"Rolling {args.num_boards} boards...")
        boards = [roll_board() for _ in range(args.num_boards)]

    try:
        grids = [Grid(board) for board in boards]
    except InvalidBoardError as e:
        parser.error(str(e))

    print("Solving boards...")
    start_s = time.time()
    total_score, total_words, total_calls = solve_boards(lexicon, grids, progress=True)
    end_s = time.time()

    elapsed_s = end_s - start_s
    pace = len(grids) / elapsed_s if elapsed_s > 0 else 0.0

    print(f"{total_score=} {total_words=} {total_calls=}")
    print(f"{elapsed_s:.02f}s, {pace:.02f} bds/sec")


if __name__ == "__main__":
    main()
