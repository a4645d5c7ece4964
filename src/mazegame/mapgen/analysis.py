# src/mazegame/mapgen/analysis.py
# Structural checks over a carved board: connectivity, tree shape, exit path.

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Set

from ..grid import Board, Coord
from ..tiles import Tile, is_open

# Direction names in the same terms the movement controller uses
_STEP_NAMES = {
    (1, 0): "right",
    (-1, 0): "left",
    (0, 1): "down",
    (0, -1): "up",
}


def _is_open_cell(board: Board, x: int, y: int) -> bool:
    return board.in_bounds(x, y) and is_open(board.get(x, y))


def open_cells(board: Board) -> List[Coord]:
    return [
        Coord(x, y)
        for y in range(board.height)
        for x in range(board.width)
        if is_open(board.get(x, y))
    ]


def find_exit(board: Board) -> Optional[Coord]:
    for y in range(board.height):
        for x in range(board.width):
            if board.get(x, y) == Tile.EXIT:
                return Coord(x, y)
    return None


def _open_neighbors(board: Board, at: Coord) -> List[Coord]:
    return board.neighbors_at_distance(
        at.x, at.y, 1, lambda x, y: _is_open_cell(board, x, y)
    )


def _bfs_parents(board: Board, origin: Coord) -> Dict[Coord, Optional[Coord]]:
    parents: Dict[Coord, Optional[Coord]] = {}
    if not _is_open_cell(board, origin.x, origin.y):
        return parents
    parents[origin] = None
    queue = deque([origin])
    while queue:
        cur = queue.popleft()
        for nxt in _open_neighbors(board, cur):
            if nxt not in parents:
                parents[nxt] = cur
                queue.append(nxt)
    return parents


def reachable(board: Board, origin: Coord) -> Set[Coord]:
    """Open cells reachable from ``origin`` through 4-adjacent open cells."""
    return set(_bfs_parents(board, origin))


def connection_count(board: Board) -> int:
    # Count each open-open adjacency once by only looking right and down.
    edges = 0
    for cell in open_cells(board):
        if _is_open_cell(board, cell.x + 1, cell.y):
            edges += 1
        if _is_open_cell(board, cell.x, cell.y + 1):
            edges += 1
    return edges


def is_spanning_tree(board: Board) -> bool:
    cells = open_cells(board)
    if len(reachable(board, board.start)) != len(cells):
        return False
    return len(cells) - connection_count(board) == 1


def solve(board: Board) -> List[str]:
    """Direction names leading from the player's cell to the exit.

    Empty when there is no exit or it cannot be reached.
    """
    goal = find_exit(board)
    if goal is None:
        return []
    parents = _bfs_parents(board, board.player)
    if goal not in parents:
        return []

    steps: List[str] = []
    cur = goal
    while parents[cur] is not None:
        prev = parents[cur]
        steps.append(_STEP_NAMES[(cur.x - prev.x, cur.y - prev.y)])
        cur = prev
    steps.reverse()
    return steps
