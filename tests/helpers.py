from __future__ import annotations

import random
from typing import List, Tuple

from match3.components.board import Board
from match3.systems.board_ops import is_valid_move, match_exists

A, B, C = 0, 1, 2


def example_board() -> Board:
    """3x3 board with no match whose only matching swaps are (2, 5) and (4, 5)."""
    return Board.from_rows([
        [A, A, B],
        [C, B, A],
        [B, A, C],
    ])


def stalemate_board(size: int = 5) -> Board:
    """Diagonal three-colour pattern: no match and no matching swap."""
    return Board.from_rows([[(row + col) % 3 for col in range(size)] for row in range(size)])


def random_board(rng: random.Random, width: int, height: int, kinds: int) -> Board:
    return Board(width=width, height=height, grid=[rng.randrange(kinds) for _ in range(width * height)])


def brute_force_moves(board: Board) -> List[Tuple[int, int]]:
    """Check every i <= j pair, in order, for adjacency and a resulting match."""
    moves: List[Tuple[int, int]] = []
    for i in range(board.size):
        for j in range(i, board.size):
            if is_valid_move(board, i, j) and match_exists(board, i, j):
                moves.append((i, j))
    return moves
