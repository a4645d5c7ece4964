# src/mazegame/mapgen/generator.py
# Randomized Prim's maze carving on the thick-wall lattice.

from __future__ import annotations

import logging
from typing import List, Optional

from ..grid import Board, Coord
from ..rng import EntropyIndex, IndexSource
from ..tiles import Tile
from .carve import carve_passage, carved_rooms, direct_connections, wall_candidates

logger = logging.getLogger(__name__)


def generate_board(board: Board, rng: Optional[IndexSource] = None) -> Optional[Coord]:
    """Carve a spanning tree of passages into an all-wall ``board``.

    Starting from ``board.start``, frontier walls are drawn uniformly at random.
    A wall is carved only when it borders a carved room two cells away and
    touches no open cell directly, so the open region stays acyclic. The last
    wall carved becomes the exit.

    Returns the exit coordinate, or None when the grid is too small for a
    single passage (the start room is then the whole maze).
    """
    rng = rng or EntropyIndex()
    start = board.start
    logger.info("Generating %dx%d board", board.width, board.height)

    board.set(start.x, start.y, Tile.EMPTY)
    walls: List[Coord] = wall_candidates(board, start)
    last_carved: Optional[Coord] = None

    while walls:
        wall = walls.pop(rng.index(len(walls)))
        logger.debug("%d walls remain", len(walls))

        adjacent_empty = carved_rooms(board, wall)
        adjacent_connections = direct_connections(board, wall)
        if not adjacent_empty or adjacent_connections:
            continue

        room = adjacent_empty[rng.index(len(adjacent_empty))]
        carve_passage(board, room, wall)
        last_carved = wall
        walls.extend(wall_candidates(board, wall))

    if last_carved is None:
        logger.info("Board too small to carve; single-room maze at %s", start)
        return None

    board.set(last_carved.x, last_carved.y, Tile.EXIT)
    logger.info("Board generated; exit at (%d, %d)", last_carved.x, last_carved.y)
    return last_carved


def new_maze(width: int, height: int, rng: Optional[IndexSource] = None) -> Board:
    board = Board.new(width, height)
    generate_board(board, rng)
    return board
