import pytest

from core.data_structures import CropInsets, ImageDimensions, ReadOrder, SpriteConfig
from core.frame_extractor import crop_size, grid_position, raw_cell_size, source_rect


def test_grid_position_row_major():
    assert grid_position(5, 3, 4, ReadOrder.ROW_MAJOR) == (1, 1)
    assert grid_position(3, 3, 4, ReadOrder.ROW_MAJOR) == (0, 3)


def test_grid_position_column_major():
    assert grid_position(5, 3, 4, ReadOrder.COLUMN_MAJOR) == (2, 1)
    assert grid_position(3, 3, 4, ReadOrder.COLUMN_MAJOR) == (0, 1)


def test_source_rect_without_crop():
    config = SpriteConfig(rows=2, cols=4, total_frames=8)
    rect = source_rect(6, config, ImageDimensions(128, 64))
    assert (rect.x, rect.y, rect.width, rect.height) == (64, 32, 32, 32)


def test_source_rect_applies_crop_insets():
    config = SpriteConfig(rows=2, cols=2, total_frames=4, crop=CropInsets(left=2, top=3, right=4, bottom=1))
    rect = source_rect(3, config, ImageDimensions(40, 40))
    assert rect.x == 22
    assert rect.y == 23
    assert rect.width == 14
    assert rect.height == 16


def test_source_rect_column_major():
    config = SpriteConfig(rows=2, cols=2, total_frames=4, read_order=ReadOrder.COLUMN_MAJOR)
    rect = source_rect(1, config, ImageDimensions(20, 20))
    # index 1 is row 1, col 0 when reading down columns
    assert (rect.x, rect.y) == (0, 10)


def test_crop_larger_than_cell_clamps_to_one_pixel():
    crop = CropInsets(left=8, top=8, right=8, bottom=8)
    assert crop_size(ImageDimensions(10, 10), 1, 1, crop) == (1, 1)


def test_non_divisible_sheet_gives_fractional_rect():
    config = SpriteConfig(rows=1, cols=3, total_frames=3)
    dims = ImageDimensions(10, 7)
    cell_w, cell_h = raw_cell_size(dims, 1, 3)
    assert cell_w == pytest.approx(10 / 3)
    assert cell_h == 7
    rect = source_rect(1, config, dims)
    assert rect.x == pytest.approx(10 / 3)
    assert rect.width == pytest.approx(10 / 3)
