import random

from helpers import board_from_lines

from mazegame.engine.player import (
    DIRECTIONS, move, move_down, move_left, move_right, move_up, step
)
from mazegame.grid import Coord
from mazegame.mapgen.analysis import find_exit, solve
from mazegame.mapgen.generator import new_maze
from mazegame.rng import EntropyIndex
from mazegame.tiles import Tile

_MOVES = {"up": move_up, "down": move_down, "left": move_left, "right": move_right}

def test_left_and_up_from_origin_are_rejected():
    b = board_from_lines([
        "...",
        "...",
        "..x",
    ])
    move_left(b)
    move_up(b)
    assert b.player == Coord(0, 0)
    assert b.done is False

def test_far_edges_are_rejected():
    b = board_from_lines([
        "...",
        "...",
        "...",
    ])
    b.player = Coord(2, 2)
    move_right(b)
    move_down(b)
    assert b.player == Coord(2, 2)

def test_walls_block_movement():
    b = board_from_lines([
        ".#",
        "#.",
    ])
    move_right(b)
    assert b.player == Coord(0, 0)
    move_down(b)
    assert b.player == Coord(0, 0)
    assert b.get(b.player.x, b.player.y) != Tile.WALL

def test_open_cells_accept_moves():
    b = board_from_lines([
        "..",
        "..",
    ])
    move_right(b)
    assert b.player == Coord(1, 0)
    move_down(b)
    assert b.player == Coord(1, 1)
    move_left(b)
    assert b.player == Coord(0, 1)
    move_up(b)
    assert b.player == Coord(0, 0)

def test_entering_exit_sets_done_and_moves():
    b = board_from_lines([
        ".x",
    ])
    move_right(b)
    assert b.player == Coord(1, 0)
    assert b.done is True

def test_done_is_monotonic():
    b = board_from_lines([
        ".x.",
    ])
    move_right(b)
    assert b.done is True
    # Further moves are still accepted but never clear the flag
    for name in ["right", "left", "left", "left", "up", "down", "right"]:
        move(b, name)
        assert b.done is True
    assert b.player == Coord(1, 0)

def test_step_reports_movement_and_ignores_unknown():
    b = board_from_lines([
        "..",
    ])
    assert step(b, "right") is True
    assert step(b, "right") is False
    assert step(b, "sideways") is False
    move(b, "diagonal")
    assert b.player == Coord(1, 0)
    assert set(DIRECTIONS) == {"up", "down", "left", "right"}

def test_walk_generated_5x5_to_exit():
    b = new_maze(5, 5, EntropyIndex(random.Random(42)))
    assert b.get(0, 0) == Tile.EMPTY
    goal = find_exit(b)
    assert goal is not None

    path = solve(b)
    assert path
    for i, name in enumerate(path):
        assert b.done is False, f"done set early at step {i}"
        _MOVES[name](b)
    assert b.player == goal
    assert b.done is True
