from ..grid import BoardView
from ..tiles import GLYPHS, PLAYER_GLYPH


def pretty_print(view: BoardView, show_player: bool = False) -> str:
    """One text line per row, newline-terminated."""
    px, py = view.player.x, view.player.y
    out = []
    for y in range(view.height):
        row = []
        for x in range(view.width):
            if show_player and (x, y) == (px, py):
                row.append(PLAYER_GLYPH)
            else:
                row.append(GLYPHS[view.get(x, y)])
        out.append("".join(row) + "\n")
    return "".join(out)
