"""Shared fixtures: small synthetic sheets built with Pillow"""

import pytest
from PIL import Image

from core.data_structures import ImageDimensions

CELL_COLORS = [
    (255, 0, 0, 255),
    (0, 255, 0, 255),
    (0, 0, 255, 255),
    (255, 255, 0, 255),
    (0, 255, 255, 255),
    (255, 0, 255, 255),
]


def make_grid_sheet(rows: int, cols: int, cell_w: int, cell_h: int) -> Image.Image:
    """Sheet where every cell is a solid color from CELL_COLORS, in row-major order"""
    sheet = Image.new('RGBA', (cols * cell_w, rows * cell_h), (0, 0, 0, 0))
    for r in range(rows):
        for c in range(cols):
            color = CELL_COLORS[(r * cols + c) % len(CELL_COLORS)]
            sheet.paste(color, (c * cell_w, r * cell_h, (c + 1) * cell_w, (r + 1) * cell_h))
    return sheet


@pytest.fixture
def grid_sheet():
    """2x2 sheet of 10x10 solid cells"""
    image = make_grid_sheet(2, 2, 10, 10)
    return image, ImageDimensions(image.width, image.height)


@pytest.fixture
def single_pixel_sheet():
    """20x20 transparent single-frame sheet with one red pixel at (5, 5)"""
    image = Image.new('RGBA', (20, 20), (0, 0, 0, 0))
    image.putpixel((5, 5), (255, 0, 0, 255))
    return image, ImageDimensions(20, 20)
