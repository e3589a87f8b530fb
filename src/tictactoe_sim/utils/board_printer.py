"""Text renderers used by debug tooling and log output.

All renderers are row-major, one board row per line, with no separators
between cells. Tip: read the output in a monospace font.
"""

from typing import Sequence

from ..models.game.board import Board
from ..models.game.line_registry import LineRegistry
from ..models.game.player import Cell


def render_board(board, coordinates_only: bool = False) -> str:
    """Render a board (or a grid of cells) as ``[X][_][O]`` rows.

    With ``coordinates_only`` occupied cells show their ``r,c`` coordinate and
    empty cells show ``___``.
    """
    rows = board.rows() if isinstance(board, Board) else board
    out = []
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell is Cell.EMPTY:
                out.append("[___]" if coordinates_only else "[_]")
            elif coordinates_only:
                out.append(f"[{i},{j}]")
            else:
                out.append(f"[{cell.value}]")
        out.append("\n")
    return "".join(out)


def render_line(cells: Sequence[Cell]) -> str:
    """Render a single line of cells, e.g. ``[X][_][O]``."""
    return "".join("[_]" if cell is Cell.EMPTY else f"[{cell.value}]" for cell in cells)


def render_winning_lines(registry: LineRegistry) -> str:
    """Render every active line on its own blank board."""
    n = registry.size
    out = []
    for k, line in enumerate(registry.active_lines, start=1):
        out.append(f"Winning Line (S{n:02d}.L{k:02d}):\n")
        for row in range(n):
            out.append("".join(
                f"[{row},{col}]" if (row, col) in line else "[___]" for col in range(n)
            ) + "\n")
        out.append("\n")
    return "".join(out)


def render_lines_by_position(registry: LineRegistry) -> str:
    """Render the position-to-active-lines index."""
    out = [f"Block to Lines Mapping for size {registry.size}:\n", "\n"]
    for position, lines in registry.lines_by_position():
        out.append(f"Block {position}:   ")
        for count, line in enumerate(lines, start=1):
            out.append(f"{count}. {line}   ")
        out.append("\n\n")
    return "".join(out)
