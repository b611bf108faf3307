from __future__ import annotations

from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from match3.errors import OutOfBoundsError

Tile = Any  # opaque tile kind; ints in practice
Position = Tuple[int, int]


@dataclass(slots=True)
class Board:
    """Flat row-major grid of tile kinds (``index = row * width + col``).

    The grid list is owned by the caller. Engine functions read and write its
    cells in place but never replace or resize the list itself. ``None`` marks a
    cell that has not been filled yet and never matches anything.
    """
    width: int
    height: int
    grid: List[Optional[Tile]]
    lock: RLock = field(default_factory=RLock, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")
        if len(self.grid) != self.width * self.height:
            raise ValueError(
                f"Grid holds {len(self.grid)} cells, expected {self.width * self.height}"
            )

    @classmethod
    def empty(cls, width: int, height: int) -> Board:
        return cls(width=width, height=height, grid=[None] * (width * height))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]]) -> Board:
        """Build a board from a list of equally sized rows."""
        if not rows or not rows[0]:
            raise ValueError("Board needs at least one row and one column")
        width = len(rows[0])
        grid: List[Optional[Tile]] = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {width}")
            grid.extend(row)
        return cls(width=width, height=len(rows), grid=grid)

    @property
    def size(self) -> int:
        return self.width * self.height

    def index(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfBoundsError(
                (row, col), self.size, f"position ({row}, {col}) outside {self.height}x{self.width} board"
            )
        return row * self.width + col

    def position(self, index: int) -> Position:
        self.check_index(index)
        return divmod(index, self.width)

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < self.size

    def check_index(self, index: int) -> int:
        if not self.in_bounds(index):
            raise OutOfBoundsError(index, self.size)
        return index

    def rows(self) -> Iterable[List[Optional[Tile]]]:
        for r in range(self.height):
            yield self.grid[r * self.width:(r + 1) * self.width]

    def snapshot(self) -> Tuple[Optional[Tile], ...]:
        return tuple(self.grid)

    def copy(self) -> Board:
        return Board(width=self.width, height=self.height, grid=list(self.grid))

    def pretty(self) -> str:
        """Human-readable grid, one row per line; unfilled cells show as ``.``."""
        lines: List[str] = []
        for row in self.rows():
            lines.append(" ".join("." if cell is None else str(cell) for cell in row))
        return "\n".join(lines)
