# src/mazerealm/render/preview.py
# Pillow previews of generated levels (developer tooling, not the game view).

from __future__ import annotations

import os
from typing import Dict, Tuple

from PIL import Image, ImageDraw

from ..level import LevelDescriptor
from ..tiles import GOAL, PATH, START, WALL

RGBA = Tuple[int, int, int, int]

CELL_COLORS: Dict[int, RGBA] = {
    PATH:  (220, 220, 220, 255),
    WALL:  ( 40,  40,  48, 255),
    START: ( 60, 200,  90, 255),
    GOAL:  (255, 170,   0, 255),
}
UNKNOWN: RGBA = (255, 0, 255, 255)

def render_level(desc: LevelDescriptor, tile_size: int = 8, margin: int = 0) -> Image.Image:
    """One flat square per cell; returns an RGBA image of the whole grid."""
    if tile_size < 1:
        raise ValueError("tile_size must be >= 1")
    w = desc.width * tile_size + 2 * margin
    h = desc.height * tile_size + 2 * margin
    img = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    for y, row in enumerate(desc.grid):
        for x, cell in enumerate(row):
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            draw.rectangle(
                (x0, y0, x0 + tile_size - 1, y0 + tile_size - 1),
                fill=CELL_COLORS.get(cell, UNKNOWN),
            )
    return img

def save_preview(desc: LevelDescriptor, out_png: str, tile_size: int = 8) -> None:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_level(desc, tile_size=tile_size).save(out_png)
