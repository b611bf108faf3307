from __future__ import annotations

from typing import Iterator, List, Tuple

from match3.components.board import Board
from match3.components.direction import Direction
from match3.constants import MIN_NEIGHBOUR_COUNT_FOR_MATCH, NO_NEIGHBOUR

Move = Tuple[int, int]


def index_by_direction(board: Board, index: int, direction: Direction) -> int:
    """Return the index one step from ``index`` in ``direction``, or NO_NEIGHBOUR at an edge.

    Horizontal steps never wrap onto the neighbouring row.
    """
    board.check_index(index)
    width = board.width
    size = board.size
    if direction is Direction.RIGHT:
        nxt = index + 1
        if nxt % width != 0 and nxt < size:
            return nxt
    elif direction is Direction.LEFT:
        nxt = index - 1
        if nxt > -1 and index % width != 0:
            return nxt
    elif direction is Direction.UP:
        nxt = index - width
        if nxt > -1:
            return nxt
    elif direction is Direction.DOWN:
        nxt = index + width
        if nxt < size:
            return nxt
    return NO_NEIGHBOUR


def get_total(board: Board, index: int, direction: Direction) -> int:
    """Count consecutive cells equal to ``index``'s tile strictly in one direction."""
    grid = board.grid
    origin = grid[board.check_index(index)]
    if origin is None:
        return 0
    count = 0
    nxt = index_by_direction(board, index, direction)
    while nxt != NO_NEIGHBOUR and grid[nxt] == origin:
        count += 1
        nxt = index_by_direction(board, nxt, direction)
    return count


def check_match(board: Board, index: int, min_neighbours: int = MIN_NEIGHBOUR_COUNT_FOR_MATCH) -> bool:
    """Return True if the tile at ``index`` sits in a horizontal or vertical run."""
    horizontal = get_total(board, index, Direction.RIGHT) + get_total(board, index, Direction.LEFT)
    if horizontal >= min_neighbours:
        return True
    vertical = get_total(board, index, Direction.UP) + get_total(board, index, Direction.DOWN)
    return vertical >= min_neighbours


def match_exists(
    board: Board,
    source: int,
    destination: int,
    min_neighbours: int = MIN_NEIGHBOUR_COUNT_FOR_MATCH,
) -> bool:
    """Return True if swapping ``source`` and ``destination`` would create a match.

    The swap is applied to ``board.grid`` only for the duration of the check and
    is always reverted, so the board reads the same before and after the call.
    """
    board.check_index(source)
    board.check_index(destination)
    grid = board.grid
    with board.lock:
        grid[source], grid[destination] = grid[destination], grid[source]
        try:
            return check_match(board, source, min_neighbours) or check_match(board, destination, min_neighbours)
        finally:
            grid[source], grid[destination] = grid[destination], grid[source]


def is_valid_move(board: Board, source: int, destination: int) -> bool:
    """Return True if ``destination`` is one orthogonal step away from ``source``."""
    board.check_index(destination)
    for direction in Direction:
        if index_by_direction(board, source, direction) == destination:
            return True
    return False


def _candidate_moves(board: Board) -> Iterator[Move]:
    # Only RIGHT and DOWN neighbours can satisfy i < j; RIGHT (i + 1) always sorts first.
    for i in range(board.size):
        for direction in (Direction.RIGHT, Direction.DOWN):
            j = index_by_direction(board, i, direction)
            if j != NO_NEIGHBOUR:
                yield i, j


def iter_possible_matches(board: Board, min_neighbours: int = MIN_NEIGHBOUR_COUNT_FOR_MATCH) -> Iterator[Move]:
    """Yield adjacent swaps that would create a match, ordered by (i, j)."""
    for i, j in _candidate_moves(board):
        if match_exists(board, i, j, min_neighbours):
            yield i, j


def get_all_possible_matches(board: Board, min_neighbours: int = MIN_NEIGHBOUR_COUNT_FOR_MATCH) -> List[Move]:
    """Enumerate every adjacent swap that would produce a match."""
    return list(iter_possible_matches(board, min_neighbours))


def any_possible_match(board: Board, min_neighbours: int = MIN_NEIGHBOUR_COUNT_FOR_MATCH) -> bool:
    for _ in iter_possible_matches(board, min_neighbours):
        return True
    return False


def is_any_match_exists_in_board(board: Board, min_neighbours: int = MIN_NEIGHBOUR_COUNT_FOR_MATCH) -> bool:
    """Return True if some cell already forms part of a match."""
    for index in range(board.size):
        if check_match(board, index, min_neighbours):
            return True
    return False
