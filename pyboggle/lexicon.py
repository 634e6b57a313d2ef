from typing import Iterable, Iterator, Self

# Prefix checks below this length never prune; no shorter word can score.
MIN_PREFIX_LENGTH = 3


class DictionaryUnavailableError(Exception):
    """The word list is missing, unreadable or empty."""


class Lexicon:
    """A sorted word list with binary-search exact and prefix lookups."""

    _words: list[str]

    def __init__(self, words: Iterable[str]):
        # Word lists aren't always sorted; _find requires it.
        self._words = sorted(w for w in (word.strip().lower() for word in words) if w)
        if not self._words:
            raise DictionaryUnavailableError("dictionary contains no words")

    @classmethod
    def from_file(cls, dict_input: str) -> Self:
        try:
            with open(dict_input) as f:
                lines = f.readlines()
        except OSError as e:
            raise DictionaryUnavailableError(
                f"unable to read dictionary {dict_input}: {e.strerror}"
            ) from e
        try:
            return cls(lines)
        except DictionaryUnavailableError as e:
            raise DictionaryUnavailableError(f"{dict_input}: {e}") from None

    def __len__(self):
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: str):
        return self.exists(word)

    def exists(self, word: str) -> bool:
        return self._find(word, partial=False)

    def has_prefix(self, prefix: str) -> bool:
        """Is there any word in the list which starts with prefix?"""
        if len(prefix) < MIN_PREFIX_LENGTH:
            return True
        return self._find(prefix, partial=True)

    def _find(self, query: str, partial: bool) -> bool:
        # Truncating every word to len(query) keeps the list sorted, so the
        # same search works for prefixes.
        n = len(query)
        lo, hi = 0, len(self._words)
        while lo < hi:
            mid = (lo + hi) // 2
            probe = self._words[mid]
            if partial:
                probe = probe[:n]
            if probe == query:
                return True
            elif probe < query:
                lo = mid + 1
            else:
                hi = mid
        return False
