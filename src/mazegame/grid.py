from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Protocol

from .tiles import Tile


@dataclass(frozen=True)
class Coord:
    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coord must be non-negative, got ({self.x}, {self.y})")

    def area(self) -> int:
        return self.x * self.y


class BoardView(Protocol):
    """Read-only surface handed to renderers."""

    @property
    def width(self) -> int: ...
    @property
    def height(self) -> int: ...
    @property
    def player(self) -> Coord: ...
    @property
    def done(self) -> bool: ...
    def get(self, x: int, y: int) -> Tile: ...


@dataclass
class Board:
    size: Coord
    data: List[Tile]
    start: Coord = field(default_factory=lambda: Coord(0, 0))
    player: Coord = field(default_factory=lambda: Coord(0, 0))
    done: bool = False

    def __post_init__(self) -> None:
        if len(self.data) != self.size.area():
            raise ValueError(
                f"Board data has {len(self.data)} cells, expected {self.size.x}x{self.size.y}"
            )

    @classmethod
    def new(cls, width: int, height: int) -> "Board":
        # Every cell starts as wall; the generator carves from there.
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        size = Coord(width, height)
        return cls(size=size, data=[Tile.WALL] * size.area())

    @property
    def width(self) -> int:
        return self.size.x

    @property
    def height(self) -> int:
        return self.size.y

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size.x and 0 <= y < self.size.y

    def idx(self, x: int, y: int) -> int:
        return x + y * self.size.x

    def get(self, x: int, y: int) -> Tile:
        # Out of range always reads as wall.
        if not self.in_bounds(x, y):
            return Tile.WALL
        return self.data[self.idx(x, y)]

    def set(self, x: int, y: int, tile: Tile) -> None:
        if not self.in_bounds(x, y):
            return
        self.data[self.idx(x, y)] = tile

    def is_wall(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.data[self.idx(x, y)] == Tile.WALL

    def is_empty(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.data[self.idx(x, y)] == Tile.EMPTY

    def neighbors_at_distance(
        self, x: int, y: int, d: int, predicate: Callable[[int, int], bool]
    ) -> List[Coord]:
        """Coordinates d cells away along each axis that satisfy ``predicate``.

        Order is +x, -x, +y, -y. Offsets below zero are skipped rather than
        wrapped, so callers never see a negative coordinate.
        """
        out: List[Coord] = []
        candidates = (
            (x + d, y),
            (x - d, y),
            (x, y + d),
            (x, y - d),
        )
        for nx, ny in candidates:
            if nx < 0 or ny < 0:
                continue
            if predicate(nx, ny):
                out.append(Coord(nx, ny))
        return out

    def as_matrix(self) -> List[List[Tile]]:
        return [
            [self.data[self.idx(x, y)] for x in range(self.size.x)]
            for y in range(self.size.y)
        ]
