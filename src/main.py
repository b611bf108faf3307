"""Entry point for the match-three engine demo.

Sets up the ECS world, event bus and systems, then prints a generated board,
its possible moves and a shuffled variant.
"""
import argparse
import logging
import random

from match3.constants import DEFAULT_TILE_KINDS, GRID_HEIGHT, GRID_WIDTH
from match3.errors import ShuffleExhaustedError
from match3.events.bus import EventBus, EVENT_HINT_OFFER, EVENT_HINT_REQUEST
from match3.systems.board import BoardSystem
from match3.systems.board_ops import get_all_possible_matches
from match3.systems.match import MatchSystem
from match3.systems.shuffle import shuffle
from match3.world import create_world


def main() -> None:
    parser = argparse.ArgumentParser(description='Match-three board generator and move finder')
    parser.add_argument('--width', type=int, default=GRID_WIDTH, help='Board width in cells')
    parser.add_argument('--height', type=int, default=GRID_HEIGHT, help='Board height in cells')
    parser.add_argument('--kinds', type=int, default=DEFAULT_TILE_KINDS, help='Number of distinct tile kinds')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for generation and shuffles')
    parser.add_argument('--shuffle', action='store_true', help='Also shuffle the board and print the result')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log shuffle attempts')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    event_bus = EventBus()
    world = create_world(rng=random.Random(args.seed))
    try:
        board_system = BoardSystem(world, event_bus, args.width, args.height, kinds=args.kinds)
    except ShuffleExhaustedError as exc:
        parser.exit(1, f'error: {exc}\n')
    MatchSystem(world, event_bus)
    board = board_system.board

    print('Board:')
    print(board.pretty())
    moves = get_all_possible_matches(board)
    print(f'\n{len(moves)} possible moves:', moves)

    def show_hint(sender, **payload):
        print('Hint:', (payload['src'], payload['dst']))

    event_bus.subscribe(EVENT_HINT_OFFER, show_hint)
    event_bus.emit(EVENT_HINT_REQUEST)

    if args.shuffle:
        try:
            attempts = shuffle(board, world.random)
        except ShuffleExhaustedError as exc:
            parser.exit(1, f'error: {exc}\n')
        print(f'\nShuffled in {attempts} attempts:')
        print(board.pretty())


if __name__ == "__main__":
    main()
