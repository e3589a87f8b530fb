"""Player and cell models for TicTacToe simulation."""

from enum import Enum


class Player(Enum):
    """The two sides of a game. Player A always moves first."""
    A = "X"
    B = "O"

    @property
    def symbol(self) -> str:
        """Marker symbol used in debug output."""
        return self.value

    def opponent(self) -> "Player":
        """Get the other player."""
        return Player.B if self is Player.A else Player.A


class Cell(Enum):
    """State of a single board cell."""
    EMPTY = ""
    A = "X"
    B = "O"

    @classmethod
    def for_player(cls, player: Player) -> "Cell":
        """Get the cell state a player's marker produces."""
        return cls.A if player is Player.A else cls.B

    @property
    def is_empty(self) -> bool:
        return self is Cell.EMPTY
