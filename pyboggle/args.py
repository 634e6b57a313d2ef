"""Standard command-line arguments shared across the tools."""

import argparse
import random

from pyboggle.lexicon import DictionaryUnavailableError, Lexicon


def add_standard_args(
    parser: argparse.ArgumentParser, *, dictionary=True, random_seed=False
):
    if dictionary:
        parser.add_argument(
            "--dictionary",
            type=str,
            default="wordlists/enable2k.txt",
            help="Path to dictionary file with one word per line.",
        )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_lexicon_from_args(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> Lexicon:
    try:
        return Lexicon.from_file(args.dictionary)
    except DictionaryUnavailableError as e:
        parser.error(str(e))


def seed_from_args(args: argparse.Namespace):
    if args.random_seed >= 0:
        random.seed(args.random_seed)
