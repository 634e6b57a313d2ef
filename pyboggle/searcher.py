"""Find all the words on a Boggle board with a pruned depth-first search."""

from pyboggle.grid import DELTAS, SIZE, Grid, idx
from pyboggle.lexicon import Lexicon
from pyboggle.results import ResultSet

MIN_WORD_LENGTH = 3


class PathSearcher:
    """Depth-first search over a Grid, pruned by Lexicon prefix checks.

    Each recursive call gets its own copy of the visited cells as a 16-bit
    mask, so sibling branches never see each other's marks.
    """

    def __init__(self, collect_paths=False):
        self.collect_paths = collect_paths
        self.paths: dict[str, list[tuple[int, int]]] | None = None
        self.num_calls = 0
        self.num_pruned = 0

    def find_all(self, grid: Grid, lexicon: Lexicon) -> ResultSet:
        results = ResultSet()
        self.num_calls = 0
        self.num_pruned = 0
        self.paths = {} if self.collect_paths else None
        for x in range(SIZE):
            for y in range(SIZE):
                self.search(grid, lexicon, results, "", x, y, 0, ())
        return results

    def solve(self, board: str, lexicon: Lexicon) -> ResultSet:
        return self.find_all(Grid(board), lexicon)

    def search(
        self,
        grid: Grid,
        lexicon: Lexicon,
        results: ResultSet,
        word: str,
        x: int,
        y: int,
        used: int,
        path: tuple[tuple[int, int], ...],
    ):
        if not grid.has_cell(x, y):
            return
        bit = 1 << idx(x, y)
        if used & bit:
            return

        self.num_calls += 1
        word += grid.letters_at(x, y)
        used |= bit
        if self.collect_paths:
            path = (*path, (x, y))

        if (
            len(word) >= MIN_WORD_LENGTH
            and word not in results
            and lexicon.exists(word)
        ):
            results.insert(word)
            if self.collect_paths:
                self.paths[word] = [*path]
        elif not lexicon.has_prefix(word):
            # No word starts with this; nothing further down can match.
            self.num_pruned += 1
            return

        # A word may also be the prefix of a longer one, so keep going.
        for dx, dy in DELTAS:
            self.search(grid, lexicon, results, word, x + dx, y + dy, used, path)
