from enum import Enum, auto


class Direction(Enum):
    """Orthogonal steps used when walking the grid from a cell."""
    RIGHT = auto()
    LEFT = auto()
    UP = auto()
    DOWN = auto()
