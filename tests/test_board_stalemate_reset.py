import random

from helpers import stalemate_board
from match3.events.bus import EVENT_BOARD_CHANGED, EVENT_BOARD_SHUFFLED, EventBus
from match3.systems.board import BoardSystem
from match3.systems.board_ops import get_all_possible_matches, is_any_match_exists_in_board
from match3.world import create_world


def test_stalemate_triggers_board_shuffle():
    bus = EventBus()
    world = create_world(rng=random.Random(1234))

    board = stalemate_board()
    before = board.snapshot()
    BoardSystem(world, bus, board=board)

    assert not is_any_match_exists_in_board(board), "Setup should not contain initial matches"
    assert not get_all_possible_matches(board), "Pattern should eliminate all valid moves"

    shuffle_events: list[dict] = []
    bus.subscribe(EVENT_BOARD_SHUFFLED, lambda sender, **payload: shuffle_events.append(payload))

    bus.emit(EVENT_BOARD_CHANGED, reason="test_stalemate")

    assert len(shuffle_events) == 1
    assert shuffle_events[0]["reason"] == "stalemate"
    assert shuffle_events[0]["attempts"] >= 1

    assert sorted(board.grid) == sorted(before), "Shuffle should keep the same tiles"
    assert not is_any_match_exists_in_board(board), "New board should start without matches"
    assert get_all_possible_matches(board), "New board should provide at least one valid move"
