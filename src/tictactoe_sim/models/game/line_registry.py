"""Winning-line bookkeeping for TicTacToe simulation.

Every row, column and both diagonals are generated once per game. As moves
are played, any line holding markers of both players can never be won, so it
is removed from the active set and from the per-position index. Each line is
removed at most once, so invalidation costs O(n * line_count) over a whole
game instead of a full board rescan after every move.

Lines live in a fixed table (the arena); the per-position index is a flat list
of line ids addressed by ``row * n + col``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .board import Board, Position, validate_size
from .player import Cell
from ...utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class LineKind(Enum):
    """Orientation of a winning line."""
    ROW = "row"
    COLUMN = "column"
    DIAGONAL = "diagonal"
    ANTI_DIAGONAL = "anti_diagonal"


@dataclass(frozen=True)
class Line:
    """One winning combination of exactly n positions."""
    kind: LineKind
    index: int
    positions: Tuple[Position, ...]

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self):
        return iter(self.positions)

    def __contains__(self, position) -> bool:
        return tuple(position) in self.positions

    def __str__(self) -> str:
        return "".join(str(pos) for pos in self.positions)


class LineRegistry:
    """Holds all winning lines for a board size and tracks which are still live."""

    def __init__(self, size: int):
        self.size = validate_size(size)
        self._lines: List[Line] = []
        self._lines_by_slot: List[List[int]] = [[] for _ in range(size * size)]
        self._active_ids: List[int] = []
        self._is_active: List[bool] = []
        self._build()

    @classmethod
    def generate(cls, size: int) -> "LineRegistry":
        """Build the registry for an n x n board."""
        return cls(size)

    def _build(self) -> None:
        n = self.size
        for row in range(n):
            self._add_line(LineKind.ROW, [Position(row, col) for col in range(n)])
        for col in range(n):
            self._add_line(LineKind.COLUMN, [Position(row, col) for row in range(n)])
        self._add_line(LineKind.DIAGONAL, [Position(i, i) for i in range(n)])
        self._add_line(LineKind.ANTI_DIAGONAL, [Position(i, n - 1 - i) for i in range(n)])

    def _add_line(self, kind: LineKind, positions: List[Position]) -> None:
        line = Line(kind=kind, index=len(self._lines), positions=tuple(positions))
        self._lines.append(line)
        self._active_ids.append(line.index)
        self._is_active.append(True)
        for pos in positions:
            self._lines_by_slot[self._slot(pos)].append(line.index)

    def _slot(self, position) -> int:
        return position[0] * self.size + position[1]

    @property
    def all_lines(self) -> List[Line]:
        """Every line generated for this size, including invalidated ones."""
        return list(self._lines)

    @property
    def active_lines(self) -> List[Line]:
        """Lines that can still be completed by one player, in generation order."""
        return [self._lines[line_id] for line_id in self._active_ids]

    @property
    def active_count(self) -> int:
        return len(self._active_ids)

    @property
    def is_exhausted(self) -> bool:
        """True once no line can be completed by either player."""
        return not self._active_ids

    def is_active(self, line: Line) -> bool:
        return self._is_active[line.index]

    def lines_at(self, position) -> List[Line]:
        """Active lines passing through a position."""
        return [self._lines[line_id] for line_id in self._lines_by_slot[self._slot(position)]]

    def membership_count(self, position) -> int:
        return len(self._lines_by_slot[self._slot(position)])

    def lines_by_position(self) -> List[Tuple[Position, List[Line]]]:
        """Every position paired with its active lines, row-major."""
        return [
            (Position(row, col), self.lines_at((row, col)))
            for row in range(self.size)
            for col in range(self.size)
        ]

    def invalidate_touching(self, position, board: Board) -> List[Line]:
        """Drop every active line through position that now holds both players' markers.

        Must be called after the move at position has been written to the board.
        Returns the lines that were removed.
        """
        invalidated = [
            self._lines[line_id]
            for line_id in self._lines_by_slot[self._slot(position)]
            if self._is_mixed(self._lines[line_id], board)
        ]
        for line in invalidated:
            self._remove(line)
        if invalidated:
            logger.debug(
                f"Move {Position(*position)} invalidated {len(invalidated)} line(s); "
                f"{self.active_count} remain active"
            )
        return invalidated

    def _is_mixed(self, line: Line, board: Board) -> bool:
        has_a = False
        has_b = False
        for row, col in line.positions:
            cell = board.get(row, col)
            if cell is Cell.A:
                has_a = True
            elif cell is Cell.B:
                has_b = True
            if has_a and has_b:
                return True
        return False

    def _remove(self, line: Line) -> None:
        if not self._is_active[line.index]:
            return
        self._is_active[line.index] = False
        self._active_ids.remove(line.index)
        for pos in line.positions:
            self._lines_by_slot[self._slot(pos)].remove(line.index)
