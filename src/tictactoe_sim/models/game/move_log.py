"""Move history for TicTacToe simulation.

The text form is one ``[row,col]`` per line. Debug tooling replays matches
from this text, so ``parse_moves(serialize_moves(moves)) == moves`` must hold.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

from .board import Position
from .player import Player


_LINE_SPLIT = re.compile(r"[\r\n]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class MoveRecord:
    """A single accepted move."""
    position: Position
    player: Player

    @property
    def row(self) -> int:
        return self.position.row

    @property
    def col(self) -> int:
        return self.position.col


def serialize_moves(positions: Iterable) -> str:
    """Render positions as one ``[row,col]`` line each."""
    return "".join(f"[{row},{col}]\n" for row, col in positions)


def _parse_int(text: str):
    # ASCII digits only, no "1_0" style separators
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def parse_moves(text: str) -> List[Position]:
    """Parse text produced by serialize_moves.

    Accepts ``\\n`` or ``\\r\\n`` separators. Malformed lines are skipped.
    """
    moves = []
    for line in _LINE_SPLIT.split(text):
        trimmed = line.strip().strip("[]")
        parts = trimmed.split(",")
        if len(parts) != 2:
            continue
        row = _parse_int(parts[0])
        col = _parse_int(parts[1])
        if row is None or col is None:
            continue
        moves.append(Position(row, col))
    return moves


@dataclass
class MoveLog:
    """Append-only record of moves in play order."""
    records: List[MoveRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[MoveRecord]:
        return iter(self.records)

    def append(self, position, player: Player) -> MoveRecord:
        record = MoveRecord(position=Position(*position), player=player)
        self.records.append(record)
        return record

    def positions(self) -> List[Position]:
        return [record.position for record in self.records]

    @property
    def last(self):
        return self.records[-1] if self.records else None

    def serialize(self) -> str:
        return serialize_moves(self.positions())

    @staticmethod
    def parse(text: str) -> List[Position]:
        return parse_moves(text)
