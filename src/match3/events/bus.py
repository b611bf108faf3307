from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep bound methods of systems that nobody else holds on to.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SWAPS
# ============================================================================
EVENT_TILE_SWAP_REQUEST = "tile_swap_request"      # payload: src=int, dst=int
EVENT_TILE_SWAP_VALID = "tile_swap_valid"          # payload: src=int, dst=int
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"      # payload: src=int, dst=int, reason=str
EVENT_TILE_SWAP_DO = "tile_swap_do"                # payload: src=int, dst=int
EVENT_TILE_SWAP_FINALIZE = "tile_swap_finalize"    # payload: src=int, dst=int


# ============================================================================
# BOARD STATE
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str
EVENT_BOARD_SHUFFLED = "board_shuffled"            # payload: attempts=int, reason=str


# ============================================================================
# HINTS
# ============================================================================
EVENT_HINT_REQUEST = "hint_request"                # payload: None
EVENT_HINT_OFFER = "hint_offer"                    # payload: src=int|None, dst=int|None
