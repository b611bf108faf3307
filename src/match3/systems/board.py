import logging
from typing import Iterable, Optional

from esper import World

from match3.components.board import Board, Tile
from match3.constants import DEFAULT_TILE_KINDS, GRID_HEIGHT, GRID_WIDTH
from match3.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_SHUFFLED,
    EVENT_TILE_SWAP_DO,
    EVENT_TILE_SWAP_FINALIZE,
)
from match3.systems.board_ops import any_possible_match, is_any_match_exists_in_board
from match3.systems.shuffle import generate_board, shuffle

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity, commits swaps and reshuffles boards with no moves left."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
        *,
        kinds: int | Iterable[Tile] = DEFAULT_TILE_KINDS,
        board: Optional[Board] = None,
    ):
        self.world = world
        self.event_bus = event_bus
        if board is None:
            board = generate_board(width, height, kinds, rng=self.world.random)
        self.board = board
        self.board_entity = self.world.create_entity(board)
        self.event_bus.subscribe(EVENT_TILE_SWAP_DO, self.on_swap_do)
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)

    def swap_tiles(self, a: int, b: int):
        grid = self.board.grid
        with self.board.lock:
            grid[a], grid[b] = grid[b], grid[a]

    def on_swap_do(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if src is None or dst is None:
            return
        self.board.check_index(src)
        self.board.check_index(dst)
        self.swap_tiles(src, dst)
        self.event_bus.emit(EVENT_TILE_SWAP_FINALIZE, src=src, dst=dst)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='swap')

    def on_board_changed(self, sender, **kwargs):
        # Pending matches are cleared by the host first; only a settled board can be stuck.
        if is_any_match_exists_in_board(self.board):
            return
        if any_possible_match(self.board):
            return
        logger.info("No moves left on %dx%d board, shuffling", self.board.width, self.board.height)
        attempts = shuffle(self.board, self.world.random)
        self.event_bus.emit(EVENT_BOARD_SHUFFLED, attempts=attempts, reason='stalemate')
