from esper import World

from match3.events.bus import (
    EventBus,
    EVENT_HINT_OFFER,
    EVENT_HINT_REQUEST,
    EVENT_TILE_SWAP_DO,
    EVENT_TILE_SWAP_INVALID,
    EVENT_TILE_SWAP_REQUEST,
    EVENT_TILE_SWAP_VALID,
)
from match3.systems.board_ops import is_valid_move, iter_possible_matches, match_exists
from match3.world import get_board


class MatchSystem:
    """Validates swap requests against the board and answers hint requests."""

    def __init__(self, world: World, event_bus: EventBus, *, auto_commit: bool = True):
        self.world = world
        self.event_bus = event_bus
        # Without auto_commit the host emits EVENT_TILE_SWAP_DO itself, e.g. after an animation.
        self.auto_commit = auto_commit
        event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)
        event_bus.subscribe(EVENT_HINT_REQUEST, self.on_hint_request)

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if src is None or dst is None:
            return
        board = get_board(self.world)
        if not is_valid_move(board, src, dst):
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst, reason='not_adjacent')
            return
        if not match_exists(board, src, dst):
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=src, dst=dst, reason='no_match')
            return
        self.event_bus.emit(EVENT_TILE_SWAP_VALID, src=src, dst=dst)
        if self.auto_commit:
            self.event_bus.emit(EVENT_TILE_SWAP_DO, src=src, dst=dst)

    def on_hint_request(self, sender, **kwargs):
        board = get_board(self.world)
        hint = next(iter_possible_matches(board), None)
        if hint is None:
            self.event_bus.emit(EVENT_HINT_OFFER, src=None, dst=None)
        else:
            self.event_bus.emit(EVENT_HINT_OFFER, src=hint[0], dst=hint[1])
