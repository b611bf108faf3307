import random

from esper import World

from match3.components.board import Board


def create_world(rng: random.Random | None = None) -> World:
    """Create an ECS world with a shared random source attached as ``world.random``."""
    world = World()
    setattr(world, "random", rng or random.Random())
    return world


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")
