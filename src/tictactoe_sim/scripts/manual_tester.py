#!/usr/bin/env python3
"""
Replay a recorded move list against a fresh engine.

The move list uses the history format the engine logs at the end of every
game: one ``[row,col]`` per line. Example::

    tictactoe-replay --size 3 --moves match.txt
    printf '[0,0]\\n[1,1]\\n' | tictactoe-replay --moves -
"""

import argparse
import sys
from typing import List, Optional

from ..engine.event_system import EventContext, GameEvent
from ..engine.game_engine import GameEngine
from ..models.game.board import InvalidSizeError
from ..models.game.move_log import parse_moves
from ..utils.board_printer import render_board, render_lines_by_position, render_winning_lines


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Replay a TicTacToe move list')
    parser.add_argument('-s', '--size', type=int, default=3,
                        help='board size n for an n x n board (default 3)')
    parser.add_argument('-m', '--moves', default='-',
                        help='file with one [row,col] per line, or - for stdin (default -)')
    parser.add_argument('-c', '--coordinates', action='store_true',
                        help='print occupied cells as coordinates instead of symbols')
    parser.add_argument('--lines', action='store_true',
                        help='also print the remaining winning lines and the block-to-lines index')
    return parser.parse_args(argv)


def read_moves(source: str) -> str:
    if source == '-':
        return sys.stdin.read()
    with open(source, 'r', encoding='utf-8') as f:
        return f.read()


def describe_status(engine: GameEngine) -> str:
    if engine.is_terminal:
        last = engine.move_history[-1]
        if engine.winner is not None:
            return f"{engine.winner.symbol} is the winner! The winning move was {last}"
        return f"{engine.current_player.symbol} made a draw! The final move was {last}"
    return f"It is now {engine.current_player.symbol}'s turn..."


def run(args: argparse.Namespace) -> int:
    try:
        engine = GameEngine(args.size)
    except InvalidSizeError as e:
        print(f"Failed to create game engine: {e}", file=sys.stderr)
        return 2

    def on_move(context: EventContext) -> None:
        print(f"{context.player.symbol} -> [{context.row},{context.col}]")

    engine.event_manager.subscribe(GameEvent.MOVE_MADE, on_move)

    moves = parse_moves(read_moves(args.moves))
    rejected = 0
    for result in engine.play_moves(moves):
        if not result.success:
            rejected += 1
            row, col = result.position
            print(f"Rejected [{row},{col}]: {result.error_message}")

    print()
    print(render_board(engine.game_state.board, coordinates_only=args.coordinates))
    print(describe_status(engine))
    print()
    print("Move history:")
    print(engine.serialize_history(), end="")

    if args.lines:
        print()
        print(render_winning_lines(engine.game_state.registry), end="")
        print(render_lines_by_position(engine.game_state.registry), end="")

    return 1 if rejected else 0


def main(argv: Optional[List[str]] = None) -> int:
    return run(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
