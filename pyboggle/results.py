from bisect import bisect_left
from typing import Iterator

#                  1, 2, 3, 4, 5, 6, 7,  8+
SCORES = (0, 0, 0, 1, 1, 2, 3, 5, 11)


def score_word(word: str) -> int:
    """Points for a word, by its length with any "qu" counted as two letters."""
    return SCORES[min(len(word), len(SCORES) - 1)]


class ResultSet:
    """The words found on one board, kept sorted and free of duplicates."""

    _words: list[str]
    _score: int

    def __init__(self):
        self._words = []
        self._score = 0

    def _index(self, word: str) -> int:
        return bisect_left(self._words, word)

    def __contains__(self, word: str):
        i = self._index(word)
        return i < len(self._words) and self._words[i] == word

    def __len__(self):
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def insert(self, word: str) -> bool:
        i = self._index(word)
        if i < len(self._words) and self._words[i] == word:
            return False
        self._words.insert(i, word)
        self._score += score_word(word)
        return True

    def all(self) -> list[str]:
        return [*self._words]

    def total_score(self) -> int:
        return self._score

    def by_length(self) -> dict[int, list[str]]:
        out = dict[int, list[str]]()
        for word in self._words:
            out.setdefault(len(word), [])
            out[len(word)].append(word)
        return out
