import numpy as np
from PIL import Image

from core.data_structures import FrameRect, ImageDimensions
from core.sprite_sheet import SpriteSheet, copy_region, sample_region


def test_load_png(tmp_path):
    path = tmp_path / "sheet.png"
    Image.new('RGB', (32, 16), (10, 20, 30)).save(path)

    sheet = SpriteSheet()
    assert sheet.load(str(path))
    assert sheet.loaded
    assert sheet.image.mode == 'RGBA'
    assert sheet.dimensions == ImageDimensions(32, 16)


def test_load_failure_returns_false(tmp_path):
    bad = tmp_path / "broken.png"
    bad.write_bytes(b"not an image")
    sheet = SpriteSheet()
    assert not sheet.load(str(bad))
    assert not sheet.loaded
    assert not sheet.load(str(tmp_path / "missing.png"))


def test_copy_region_is_addressable_rgba(grid_sheet):
    image, _ = grid_sheet
    buf = copy_region(image, FrameRect(10, 0, 10, 10))
    assert buf.shape == (10, 10, 4)
    assert buf.dtype == np.uint8
    assert tuple(buf[0, 0]) == (0, 255, 0, 255)


def test_copy_region_truncates_fractional_size(grid_sheet):
    image, _ = grid_sheet
    buf = copy_region(image, FrameRect(0, 0, 6.6, 3.2))
    assert buf.shape == (3, 6, 4)


def test_region_off_sheet_is_transparent(grid_sheet):
    image, _ = grid_sheet
    buf = copy_region(image, FrameRect(15, 15, 10, 10))
    assert tuple(buf[0, 0]) == (255, 255, 0, 255)
    assert buf[9, 9, 3] == 0


def test_sample_region_scales_nearest_neighbor():
    image = Image.new('RGBA', (2, 1))
    image.putpixel((0, 0), (255, 0, 0, 255))
    image.putpixel((1, 0), (0, 0, 255, 255))
    out = sample_region(image, (0, 0, 2, 1), (4, 2))
    assert out.size == (4, 2)
    assert out.getpixel((1, 1)) == (255, 0, 0, 255)
    assert out.getpixel((2, 0)) == (0, 0, 255, 255)
