"""Board model for TicTacToe simulation."""

from typing import Iterator, List, NamedTuple, Tuple

from .player import Cell, Player


MIN_BOARD_SIZE = 2


class InvalidSizeError(ValueError):
    """Raised when a board is requested with fewer than two rows."""
    pass


class Position(NamedTuple):
    """A (row, col) coordinate on the board."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"[{self.row},{self.col}]"


def validate_size(size: int) -> int:
    """Return size unchanged if it is a usable board size."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(f"Size must be an integer, got {size!r}.")
    if size < MIN_BOARD_SIZE:
        raise InvalidSizeError(f"Size cannot be smaller than {MIN_BOARD_SIZE}.")
    return size


class Board:
    """An n x n grid of cells.

    Cells are stored row-major in a flat list, so the slot of (row, col) is
    ``row * size + col``.
    """

    def __init__(self, size: int):
        self.size = validate_size(size)
        self._cells: List[Cell] = [Cell.EMPTY] * (size * size)

    def __len__(self) -> int:
        return len(self._cells)

    def index(self, position: Position) -> int:
        """Get the flat slot of a position."""
        return position[0] * self.size + position[1]

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate lies on the board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise IndexError(f"Position [{row},{col}] is outside a {self.size}x{self.size} board")
        return self._cells[row * self.size + col]

    def place(self, row: int, col: int, player: Player) -> None:
        """Write a player's marker into an empty cell."""
        if self.get(row, col) is not Cell.EMPTY:
            raise ValueError(f"Position [{row},{col}] is already occupied")
        self._cells[row * self.size + col] = Cell.for_player(player)

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col).is_empty

    def is_full(self) -> bool:
        return all(cell is not Cell.EMPTY for cell in self._cells)

    def positions(self) -> Iterator[Position]:
        """Iterate every position in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield Position(row, col)

    def empty_positions(self) -> List[Position]:
        return [pos for pos in self.positions() if self._cells[self.index(pos)] is Cell.EMPTY]

    def count(self, cell: Cell) -> int:
        return sum(1 for c in self._cells if c is cell)

    def rows(self) -> List[List[Cell]]:
        return [self._cells[r * self.size:(r + 1) * self.size] for r in range(self.size)]

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Get an immutable copy of the grid."""
        return tuple(tuple(row) for row in self.rows())
