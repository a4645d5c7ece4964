import logging

from mazegame.config import GameConfig
from mazegame.engine.state import GameSession
from mazegame.grid import Coord
from mazegame.mapgen.analysis import solve
from mazegame.rng import ScriptedIndex
from mazegame.tiles import Tile

def test_session_uses_config_size():
    s = GameSession(config=GameConfig(width=7, height=9))
    assert (s.width, s.height) == (7, 9)
    assert s.player == Coord(0, 0)
    assert s.done is False
    assert s.moves == 0

def test_explicit_size_wins_over_config():
    s = GameSession(5, 3, config=GameConfig(width=7, height=9))
    assert (s.width, s.height) == (5, 3)

def test_view_reads_board():
    s = GameSession(3, 3, rng=ScriptedIndex([0]))
    assert s.exit == Coord(2, 2)
    assert s.get(2, 2) == Tile.EXIT
    assert s.get(1, 1) == Tile.WALL
    assert s.get(99, 99) == Tile.WALL

def test_moves_count_only_accepted_steps():
    s = GameSession(3, 3, rng=ScriptedIndex([0]))
    s.move_up()      # off the board
    s.move_right()
    s.move_down()    # wall at (1,1)
    s.move_left()
    assert s.moves == 2
    assert s.player == Coord(0, 0)

def test_session_walk_logs_win_once(caplog):
    s = GameSession(3, 3, rng=ScriptedIndex([0]))
    with caplog.at_level(logging.INFO, logger="mazegame.engine.state"):
        for name in solve(s.board):
            s.move(name)
        assert s.done is True
        s.move_left()
        s.move_right()
    assert s.done is True
    assert caplog.text.count("Maze solved in 4 moves") == 1
