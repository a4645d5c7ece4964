# src/mazegame/mapgen/carve.py
# Thick-wall lattice helpers: rooms sit PASSAGE cells apart with a one-cell
# wall between any two neighbouring rooms.

from typing import List

from ..grid import Board, Coord
from ..tiles import Tile

PASSAGE = 2


def wall_candidates(board: Board, at: Coord) -> List[Coord]:
    """Rooms one passage away from ``at`` that are still solid wall."""
    return board.neighbors_at_distance(at.x, at.y, PASSAGE, board.is_wall)


def carved_rooms(board: Board, at: Coord) -> List[Coord]:
    """Already-carved rooms one passage away from ``at``."""
    return board.neighbors_at_distance(at.x, at.y, PASSAGE, board.is_empty)


def direct_connections(board: Board, at: Coord) -> List[Coord]:
    # Any open cell touching ``at`` means it already joins the tree.
    return board.neighbors_at_distance(at.x, at.y, 1, board.is_empty)


def midpoint(a: Coord, b: Coord) -> Coord:
    return Coord((a.x + b.x) // 2, (a.y + b.y) // 2)


def carve_passage(board: Board, room: Coord, target: Coord) -> None:
    """Open ``target`` and the single wall cell between it and ``room``."""
    mid = midpoint(room, target)
    board.set(mid.x, mid.y, Tile.EMPTY)
    board.set(target.x, target.y, Tile.EMPTY)
