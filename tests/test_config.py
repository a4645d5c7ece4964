import pytest

from mazegame.config import DEFAULT, GameConfig

def test_defaults_match_original_board():
    assert (DEFAULT.width, DEFAULT.height) == (51, 51)

def test_overrides_skip_none():
    c = DEFAULT.with_overrides(width=11, height=None, fps=30)
    assert (c.width, c.height, c.fps) == (11, 51, 30)
    assert DEFAULT.width == 51  # frozen original untouched

def test_rejects_non_positive_values():
    with pytest.raises(ValueError):
        GameConfig(width=0)
    with pytest.raises(ValueError):
        DEFAULT.with_overrides(tile_px=-3)
