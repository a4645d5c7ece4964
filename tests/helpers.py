from mazegame.grid import Board, Coord
from mazegame.tiles import Tile

_CHARS = {"#": Tile.WALL, ".": Tile.EMPTY, "x": Tile.EXIT}

def board_from_lines(lines):
    # '#' wall, '.' floor, 'x' exit; rows top to bottom
    h = len(lines)
    w = len(lines[0])
    data = [_CHARS[ch] for row in lines for ch in row]
    return Board(size=Coord(w, h), data=data)
