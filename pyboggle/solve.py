#!/usr/bin/env python
"""Find and score all the words on Boggle boards.

    $ python -m pyboggle.solve catsdogheusexyzw
    $ python -m pyboggle.dice 10 | python -m pyboggle.solve --print_board
"""

import argparse
import fileinput
import sys
import time

from pyboggle.args import add_standard_args, get_lexicon_from_args
from pyboggle.grid import Grid, InvalidBoardError
from pyboggle.results import ResultSet
from pyboggle.searcher import PathSearcher


def print_board(grid: Grid):
    for row in grid.rows():
        print(row.upper())
    print()


def print_words(results: ResultSet, paths=None, by_length=False):
    if by_length:
        for length, words in sorted(results.by_length().items()):
            print(f"{length}: {' '.join(words)}")
        return
    for word in results:
        if paths is not None:
            print(f"{word}\t{' '.join(f'{x},{y}' for x, y in paths[word])}")
        else:
            print(word)


def summary(results: ResultSet) -> str:
    return f"This list of {len(results)} words is worth {results.total_score()} points"


def main():
    parser = argparse.ArgumentParser(description="Find all the words on Boggle boards")
    add_standard_args(parser)
    parser.add_argument(
        "boards",
        metavar="BOARD",
        nargs="*",
        help="Boards to solve (16 letters, row by row; 'qu' is one cell). "
        "If omitted, read boards one per line from stdin.",
    )
    parser.add_argument(
        "--files",
        nargs="*",
        default=None,
        help="Read boards from these files, one per line, instead.",
    )
    parser.add_argument(
        "--print_board",
        action="store_true",
        help="Print each board before its words.",
    )
    parser.add_argument(
        "--print_paths",
        action="store_true",
        help="Print the cells (row,col) used to spell each word.",
    )
    parser.add_argument(
        "--by_length",
        action="store_true",
        help="Group the words by their length.",
    )
    args = parser.parse_args()

    if args.boards and args.files is not None:
        parser.error("Specify boards or --files, not both.")
    if args.boards:
        boards = args.boards
    else:
        boards = (line.strip() for line in fileinput.input(files=args.files or ()))

    lexicon = get_lexicon_from_args(parser, args)
    searcher = PathSearcher(collect_paths=args.print_paths)

    start_s = time.time()
    n = 0
    for board in boards:
        if not board:
            continue
        try:
            grid = Grid(board)
        except InvalidBoardError as e:
            parser.error(str(e))
        results = searcher.find_all(grid, lexicon)
        if args.print_board:
            print_board(grid)
        print_words(results, searcher.paths, args.by_length)
        print(summary(results))
        n += 1
    end_s = time.time()
    elapsed_s = end_s - start_s
    rate = n / elapsed_s if elapsed_s > 0 else 0.0
    sys.stderr.write(f"{n} boards in {elapsed_s:.2f}s = {rate:.2f} boards/s\n")


if __name__ == "__main__":
    main()
