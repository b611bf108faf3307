from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Sequence

from match3.components.board import Board, Tile
from match3.constants import (
    DEFAULT_TILE_KINDS,
    MAX_SHUFFLE_ATTEMPTS,
    MAX_TRIES_PER_CELL,
    MIN_NEIGHBOUR_COUNT_FOR_MATCH,
)
from match3.errors import ShuffleExhaustedError
from match3.systems.board_ops import any_possible_match, check_match

logger = logging.getLogger(__name__)


def _fill_attempt(
    values: Sequence[Tile],
    width: int,
    height: int,
    rng: random.Random,
    min_neighbours: int,
    max_tries_per_cell: int,
) -> Optional[Board]:
    """Lay out ``values`` in random order without creating a match.

    Returns None when one cell rejects ``max_tries_per_cell`` picks in a row.
    """
    pool: List[Tile] = list(values)
    candidate = Board.empty(width, height)
    tries = 0
    index = 0
    while index < candidate.size:
        pick = rng.randrange(len(pool))
        candidate.grid[index] = pool[pick]
        if not check_match(candidate, index, min_neighbours):
            pool.pop(pick)
            index += 1
            tries = 0
            continue
        tries += 1
        if tries >= max_tries_per_cell:
            return None
    return candidate


def shuffle(
    board: Board,
    rng: Optional[random.Random] = None,
    *,
    min_neighbours: int = MIN_NEIGHBOUR_COUNT_FOR_MATCH,
    max_tries_per_cell: int = MAX_TRIES_PER_CELL,
    max_attempts: Optional[int] = MAX_SHUFFLE_ATTEMPTS,
) -> int:
    """Rearrange the board's tiles into a new playable layout, in place.

    The accepted layout holds exactly the same tiles, contains no match, offers
    at least one matching swap, and differs from the current layout. Returns the
    number of attempts it took. Raises ShuffleExhaustedError, leaving the board
    untouched, when ``max_attempts`` attempts all fail; ``max_attempts=None``
    keeps trying forever.
    """
    if max_tries_per_cell < 1:
        raise ValueError(f"max_tries_per_cell must be at least 1, got {max_tries_per_cell}")
    rng = rng or random.Random()
    with board.lock:
        original = board.snapshot()
        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            candidate = _fill_attempt(
                original, board.width, board.height, rng, min_neighbours, max_tries_per_cell
            )
            if candidate is None:
                logger.debug("Shuffle attempt %d abandoned after %d rejected picks", attempts, max_tries_per_cell)
                continue
            if candidate.snapshot() == original:
                logger.debug("Shuffle attempt %d reproduced the current layout", attempts)
                continue
            if not any_possible_match(candidate, min_neighbours):
                logger.debug("Shuffle attempt %d has no possible move", attempts)
                continue
            board.grid[:] = candidate.grid
            logger.debug("Shuffled %dx%d board in %d attempts", board.width, board.height, attempts)
            return attempts
    logger.warning("Unable to shuffle %dx%d board within %d attempts", board.width, board.height, attempts)
    raise ShuffleExhaustedError(attempts)


def _normalise_kinds(kinds: int | Iterable[Tile]) -> List[Tile]:
    if isinstance(kinds, int):
        choices: List[Tile] = list(range(kinds))
    else:
        choices = []
        for kind in kinds:
            if kind not in choices:
                choices.append(kind)
    if not choices:
        raise ValueError("At least one tile kind is required")
    return choices


def generate_board(
    width: int,
    height: int,
    kinds: int | Iterable[Tile] = DEFAULT_TILE_KINDS,
    rng: Optional[random.Random] = None,
    *,
    min_neighbours: int = MIN_NEIGHBOUR_COUNT_FOR_MATCH,
    max_attempts: Optional[int] = MAX_SHUFFLE_ATTEMPTS,
) -> Board:
    """Create a fresh board with no matches and at least one valid move."""

    choices = _normalise_kinds(kinds)
    rng = rng or random.Random()
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        board = Board.empty(width, height)
        valid_layout = True
        for index in range(board.size):
            available: List[Tile] = []
            for kind in choices:
                board.grid[index] = kind
                if not check_match(board, index, min_neighbours):
                    available.append(kind)
            if not available:
                valid_layout = False
                break
            board.grid[index] = rng.choice(available)
        if not valid_layout:
            logger.debug("Generation attempt %d ran out of tile kinds", attempts)
            continue
        if not any_possible_match(board, min_neighbours):
            logger.debug("Generation attempt %d has no possible move", attempts)
            continue
        return board
    logger.warning("Unable to generate %dx%d board within %d attempts", width, height, attempts)
    raise ShuffleExhaustedError(attempts, "Unable to generate board without matches and valid swaps")
