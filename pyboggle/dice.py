#!/usr/bin/env python
"""Generate random Boggle boards by rolling the sixteen dice.

A "q" face is the Qu die face, so it is printed as "qu".
"""

import argparse
import random
from typing import Sequence

from pyboggle.args import add_standard_args, seed_from_args
from pyboggle.grid import NUM_CELLS, cell_text

# https://www.bananagrammer.com/2013/10/the-boggle-cube-redesign-and-its-effect.html
# "New" Boggle dice, 1987 to ~2008
DICE = [
    "aaeegn",
    "achops",
    "affkps",
    "abjoob",
    "ciimot",
    "delrvy",
    "deilrx",
    "eeinsu",
    "eeghnw",
    "hlnnrz",
    "distty",
    "aoottw",
    "elrtty",
    "eiosst",
    "ehrtuv",
    "himnqu",
]

# "Classic" Boggle dice, 1976 to 1986
CLASSIC_DICE = [
    "aaciot",
    "abilty",
    "abjmoq",
    "acdemp",
    "acelrs",
    "adenvz",
    "ahmors",
    "biforx",
    "denosw",
    "dknotu",
    "eefhiy",
    "egkluy",
    "egintv",
    "ehinps",
    "elpstu",
    "gilruw",
]


def roll_board(dice: Sequence[str] = DICE, rng: random.Random | None = None) -> str:
    """Shake the dice into the grid and read off the face-up letters."""
    assert len(dice) == NUM_CELLS
    rng = rng or random
    order = [*dice]
    rng.shuffle(order)
    return "".join(cell_text(rng.choice(die)) for die in order)


def main():
    parser = argparse.ArgumentParser(
        prog="Boggle dice",
        description="Print random Boggle boards, one per line.",
    )
    parser.add_argument(
        "num_boards",
        type=int,
        default=1,
        nargs="?",
        help="Number of boards to roll.",
    )
    parser.add_argument(
        "--classic",
        action="store_true",
        help="Use the 1976-1986 dice instead of the 1987 redesign.",
    )
    add_standard_args(parser, dictionary=False, random_seed=True)
    args = parser.parse_args()
    seed_from_args(args)

    dice = CLASSIC_DICE if args.classic else DICE
    for _ in range(args.num_boards):
        print(roll_board(dice))


if __name__ == "__main__":
    main()
