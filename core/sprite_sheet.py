"""
Sprite Sheet
Loads sheet images and copies sub-rectangles into addressable pixel buffers
"""

import os
from typing import Optional, Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

try:
    # pillow-heif registers AVIF/HEIF loaders without requiring the user to
    # build Pillow with AVIF support.
    from pillow_heif import register_heif_opener

    register_heif_opener()
    _heif_available_error: Optional[str] = None
except Exception as heif_exc:  # pragma: no cover - optional dependency
    print(f"Warning: Failed to enable HEIF/AVIF support: {heif_exc}")
    _heif_available_error = str(heif_exc)

HEIF_EXTENSIONS = ('.avif', '.avifs', '.heif', '.heic')

from .data_structures import FrameRect, ImageDimensions


def sample_region(
    image: Image.Image,
    box: Tuple[float, float, float, float],
    size: Tuple[int, int]
) -> Image.Image:
    """
    Copy a source box into a new RGBA image of the given size

    Sampling is nearest-neighbor. The box may be fractional and may hang
    off the sheet; uncovered destination pixels stay transparent.

    Args:
        image: RGBA source image
        box: (left, upper, right, lower) in source pixels
        size: (width, height) of the result

    Returns:
        RGBA image of exactly `size`
    """
    out_w, out_h = size
    result = Image.new('RGBA', (max(0, out_w), max(0, out_h)), (0, 0, 0, 0))
    left, top, right, bottom = box
    src_w = right - left
    src_h = bottom - top
    if out_w <= 0 or out_h <= 0 or src_w <= 0 or src_h <= 0:
        return result

    clip_left = max(left, 0)
    clip_top = max(top, 0)
    clip_right = min(right, image.width)
    clip_bottom = min(bottom, image.height)
    if clip_right <= clip_left or clip_bottom <= clip_top:
        return result

    sx = out_w / src_w
    sy = out_h / src_h
    dx0 = int(round((clip_left - left) * sx))
    dy0 = int(round((clip_top - top) * sy))
    dx1 = int(round((clip_right - left) * sx))
    dy1 = int(round((clip_bottom - top) * sy))
    if dx1 <= dx0 or dy1 <= dy0:
        return result

    patch = image.resize(
        (dx1 - dx0, dy1 - dy0),
        Image.Resampling.NEAREST,
        box=(clip_left, clip_top, clip_right, clip_bottom),
    )
    if patch.mode != 'RGBA':
        patch = patch.convert('RGBA')
    result.paste(patch, (dx0, dy0))
    return result


def copy_region(image: Image.Image, rect: FrameRect) -> np.ndarray:
    """
    Rasterize a source rectangle 1:1 into an H x W x 4 uint8 buffer

    The buffer is sized to the whole-pixel part of the rectangle, like a
    scratch canvas would be.
    """
    size = (max(1, int(rect.width)), max(1, int(rect.height)))
    region = sample_region(image, rect.box, size)
    return np.array(region, dtype=np.uint8)


class SpriteSheet:
    """Decoded sheet image and its dimensions"""

    def __init__(self):
        self.image: Optional[Image.Image] = None
        self.dimensions = ImageDimensions()
        self.image_path: str = ""

    @property
    def loaded(self) -> bool:
        return self.image is not None and not self.dimensions.is_empty

    def load(self, image_path: str) -> bool:
        """
        Load a sheet from disk

        Args:
            image_path: Path to a PNG/GIF/BMP/WebP/AVIF sheet

        Returns:
            True if successful, False otherwise
        """
        try:
            img = self._open_image(image_path)
            img.load()
            self.set_image(img.convert('RGBA'))
            self.image_path = image_path
            return True
        except Exception as e:
            print(f"Error loading sprite sheet: {e}")
            return False

    def set_image(self, image: Image.Image):
        """Use an already decoded image as the sheet"""
        if image.mode != 'RGBA':
            image = image.convert('RGBA')
        self.image = image
        self.dimensions = ImageDimensions(image.width, image.height)

    def _open_image(self, image_path: str) -> Image.Image:
        suffix = os.path.splitext(image_path)[1].lower()
        try:
            return Image.open(image_path)
        except UnidentifiedImageError:
            if suffix in HEIF_EXTENSIONS and _heif_available_error:
                raise RuntimeError(
                    f"Cannot decode '{os.path.basename(image_path)}': "
                    f"pillow-heif unavailable ({_heif_available_error})"
                )
            raise
