SIZE = 4
NUM_CELLS = SIZE * SIZE
LETTER_Q = "q"

# The eight neighbors of a cell, in the order the search visits them.
DELTAS = tuple(
    (dx, dy) for dx in range(-1, 2) for dy in range(-1, 2) if dx != 0 or dy != 0
)


class InvalidBoardError(ValueError):
    pass


def idx(x: int, y: int):
    return SIZE * x + y


def cell_text(letter: str) -> str:
    """The letters a cell contributes to a word: a Qu die is one cell."""
    return "qu" if letter == LETTER_Q else letter


class Grid:
    """A 4x4 Boggle board. x is the row, y is the column.

    A 16-character board which contains "qu" folds to fewer than 16 cells;
    the missing cells at the end of the last row are absent.
    """

    _cells: str

    def __init__(self, board: str):
        raw = board.strip().lower()
        # "qu" occupies a single cell; we add the "u" back as words are built.
        cells = raw.replace("qu", LETTER_Q)
        if len(cells) != NUM_CELLS and len(raw) != NUM_CELLS:
            raise InvalidBoardError(
                f"Board {board!r} has {len(cells)} cells, expected {NUM_CELLS}"
            )
        for let in cells:
            if not "a" <= let <= "z":
                raise InvalidBoardError(f"Board {board!r} has invalid letter {let!r}")
        self._cells = cells

    def __str__(self):
        return self._cells

    def __repr__(self):
        return f"Grid({self._cells!r})"

    def __eq__(self, other):
        return isinstance(other, Grid) and self._cells == other._cells

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < SIZE and 0 <= y < SIZE

    def has_cell(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and idx(x, y) < len(self._cells)

    def letter_at(self, x: int, y: int) -> str:
        if not self.has_cell(x, y):
            raise IndexError(f"No cell at ({x}, {y}) on {self._cells}")
        return self._cells[idx(x, y)]

    def letters_at(self, x: int, y: int) -> str:
        return cell_text(self.letter_at(x, y))

    def rows(self) -> list[str]:
        return [self._cells[i : i + SIZE] for i in range(0, NUM_CELLS, SIZE)]

    def path_text(self, path: list[tuple[int, int]]) -> str:
        return "".join(self.letters_at(x, y) for x, y in path)
