# Canonical tile classification for one maze cell.

from enum import IntEnum


class Tile(IntEnum):
    WALL = 0
    EMPTY = 1
    EXIT = 2


# Text glyphs (█ wall, blank floor, x exit)
GLYPHS = {
    Tile.WALL: "█",
    Tile.EMPTY: " ",
    Tile.EXIT: "x",
}
PLAYER_GLYPH = "@"

# RGBA colours shared by the pygame tileset and the PNG renderer
COLORS = {
    Tile.WALL: (40, 40, 48, 255),
    Tile.EMPTY: (225, 225, 215, 255),
    Tile.EXIT: (255, 200, 0, 255),
}
PLAYER_COLOR = (60, 170, 90, 255)


def is_open(tile: Tile) -> bool:
    # Walkable: floor or exit.
    return tile != Tile.WALL
