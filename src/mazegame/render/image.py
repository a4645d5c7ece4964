# src/mazegame/render/image.py
# Render a board to a PNG using Pillow.

from __future__ import annotations

import os

from PIL import Image, ImageDraw

from ..grid import BoardView
from ..tiles import COLORS, PLAYER_COLOR


def render_board(view: BoardView, tile_size: int = 8, show_player: bool = True) -> Image.Image:
    w, h = view.width * tile_size, view.height * tile_size
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    for y in range(view.height):
        for x in range(view.width):
            x0, y0 = x * tile_size, y * tile_size
            draw.rectangle(
                (x0, y0, x0 + tile_size - 1, y0 + tile_size - 1),
                fill=COLORS[view.get(x, y)],
            )
    if show_player:
        px, py = view.player.x * tile_size, view.player.y * tile_size
        # Inset so the floor colour frames the marker
        inset = tile_size // 4
        draw.ellipse(
            (px + inset, py + inset, px + tile_size - 1 - inset, py + tile_size - 1 - inset),
            fill=PLAYER_COLOR,
        )
    return canvas


def save_png(view: BoardView, out_png: str, tile_size: int = 8, show_player: bool = True) -> None:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_board(view, tile_size=tile_size, show_player=show_player).save(out_png)
