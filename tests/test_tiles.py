from mazegame.tiles import GLYPHS, Tile, is_open

def test_tile_values_are_closed_set():
    assert {t.name for t in Tile} == {"WALL", "EMPTY", "EXIT"}

def test_open_classification():
    assert is_open(Tile.EMPTY)
    assert is_open(Tile.EXIT)
    assert not is_open(Tile.WALL)

def test_glyphs():
    assert GLYPHS[Tile.WALL] == "█"
    assert GLYPHS[Tile.EMPTY] == " "
    assert GLYPHS[Tile.EXIT] == "x"
