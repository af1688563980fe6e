# src/glyphmaze/render/image.py
# Render a maze to a Pillow image: one tile per cell, a line per wall.

import os
from functools import lru_cache
from typing import Tuple

from PIL import Image, ImageDraw

from ..glyphs import pattern_key

RGBA = Tuple[int, int, int, int]

FLOOR: RGBA = (255, 255, 255, 255)
WALL: RGBA = (0, 0, 0, 255)


@lru_cache(maxsize=256)
def wall_tile(key: str, tile_size: int, width: int = 1) -> Image.Image:
    """Tile for one N,E,S,W wall pattern ("1011" etc.), cached per size."""
    img = Image.new("RGBA", (tile_size, tile_size), FLOOR)
    draw = ImageDraw.Draw(img)
    last = tile_size - 1
    north, east, south, west = (ch == "1" for ch in key)
    if north:
        draw.rectangle((0, 0, last, width - 1), fill=WALL)
    if east:
        draw.rectangle((last - width + 1, 0, last, last), fill=WALL)
    if south:
        draw.rectangle((0, last - width + 1, last, last), fill=WALL)
    if west:
        draw.rectangle((0, 0, width - 1, last), fill=WALL)
    return img


def render_maze(maze, tile_size: int = 16, margin: int = 0, width: int = 1) -> Image.Image:
    if tile_size < 2:
        raise ValueError("tile_size must be at least 2 pixels")
    n = maze.size
    side = n * tile_size + 2 * margin
    canvas = Image.new("RGBA", (side, side), FLOOR)
    for y in range(n):
        for x in range(n):
            img = wall_tile(pattern_key(maze.get_cell(x, y)), tile_size, width)
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            canvas.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size))
    return canvas


def save_png(maze, out_png: str, tile_size: int = 16, margin: int = 0) -> str:
    canvas = render_maze(maze, tile_size=tile_size, margin=margin)
    folder = os.path.dirname(out_png)
    if folder:
        os.makedirs(folder, exist_ok=True)
    canvas.save(out_png)
    return out_png
