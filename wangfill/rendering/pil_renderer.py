"""
wangfill - PIL Renderer

Debug preview of a tile layer: every cell is drawn as a 3x3 block showing
the Wang color of each of its 8 slots around a neutral center. Used by the
fill demo tool to inspect fills without a real tileset.
"""

try:
    from PIL import Image
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

import numpy as np

from ..core.tile_layer import TileLayer
from ..core.wang_set import WangSet

RGBColor = tuple[int, int, int]

# Index 0 is the "undefined" color
WANG_COLORS: list[RGBColor] = [
    (0x40, 0x40, 0x40),
    (0x5C, 0xE4, 0x30),  # 1: grass
    (0xA0, 0x6A, 0x32),  # 2: dirt
    (0x64, 0xB0, 0xFF),  # 3: water
    (0xBC, 0xBE, 0x00),  # 4: sand
    (0xFF, 0xFF, 0xFF),  # 5: snow
    (0x8C, 0x8C, 0x8C),  # 6: stone
    (0x00, 0x52, 0x00),  # 7: forest
    (0xE4, 0x5C, 0x10),
    (0xB8, 0x00, 0xB8),
    (0x00, 0xB8, 0xB8),
    (0xF8, 0xB8, 0xF8),
    (0x78, 0x00, 0x00),
    (0x00, 0x00, 0x78),
    (0xF8, 0xD8, 0x78),
    (0x00, 0x00, 0x00),
]

EMPTY_CELL_COLOR: RGBColor = (0x10, 0x10, 0x10)
CENTER_COLOR: RGBColor = (0x20, 0x20, 0x20)

# (column, row) of each slot inside the 3x3 block, slots ordered N..NW
SLOT_OFFSETS = (
    (1, 0),
    (2, 0),
    (2, 1),
    (2, 2),
    (1, 2),
    (0, 2),
    (0, 1),
    (0, 0),
)


def render_wang_layer(layer: TileLayer, wang_set: WangSet, scale: int = 4) -> Image.Image:
    """
    Render a layer's Wang colors to a PIL Image.

    Args:
        layer: Layer to render
        wang_set: Catalog used to look up each cell's WangId
        scale: Pixel size of one slot

    Returns:
        RGB image of size (width * 3 * scale, height * 3 * scale)
    """
    pixels = np.zeros((layer.height * 3, layer.width * 3, 3), dtype=np.uint8)

    for row in range(layer.height):
        for col in range(layer.width):
            cell = layer.cell_at((layer.x + col, layer.y + row))
            base_y = row * 3
            base_x = col * 3

            if cell.is_empty:
                pixels[base_y:base_y + 3, base_x:base_x + 3] = EMPTY_CELL_COLOR
                continue

            wang_id = wang_set.wang_id_of_cell(cell)
            pixels[base_y + 1, base_x + 1] = CENTER_COLOR
            for index, (dx, dy) in enumerate(SLOT_OFFSETS):
                color = WANG_COLORS[wang_id.color(index) % len(WANG_COLORS)]
                pixels[base_y + dy, base_x + dx] = color

    img = Image.fromarray(pixels)
    if scale != 1:
        img = img.resize((img.width * scale, img.height * scale), Image.Resampling.NEAREST)
    return img
