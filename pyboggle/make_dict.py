#!/usr/bin/env python
"""Filter word lists down to words that can appear on a Boggle board.

The output is lowercase, sorted and free of duplicates, one word per line,
ready to be loaded as a Lexicon. Words keep their "qu"; the board folds it.
"""

import fileinput
from typing import Iterable


def is_boggle_word(word: str):
    size = len(word)
    if size < 3:
        return False
    for i, let in enumerate(word):
        if let < "a" or let > "z":
            return False
        # There is no bare "q" die face.
        if let == "q" and (i + 1 >= size or word[i + 1] != "u"):
            return False
    return True


def clean_wordlist(lines: Iterable[str]) -> list[str]:
    words = {line.strip().lower() for line in lines}
    return sorted(word for word in words if is_boggle_word(word))


def main():
    for word in clean_wordlist(fileinput.input()):
        print(word)


if __name__ == "__main__":
    main()
