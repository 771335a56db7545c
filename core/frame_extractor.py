"""
Frame Extractor
Maps a frame index to its cropped source rectangle on the sheet
"""

from typing import Tuple

from .data_structures import CropInsets, FrameRect, ImageDimensions, ReadOrder, SpriteConfig


def grid_position(index: int, rows: int, cols: int, read_order: str) -> Tuple[int, int]:
    """
    Recover (row, col) for a linear frame index

    Args:
        index: Linear frame index
        rows: Grid rows
        cols: Grid columns
        read_order: Traversal order the index was produced with

    Returns:
        (row, col)
    """
    if read_order == ReadOrder.COLUMN_MAJOR:
        return index % rows, index // rows
    return index // cols, index % cols


def raw_cell_size(dimensions: ImageDimensions, rows: int, cols: int) -> Tuple[float, float]:
    """Uncropped cell size; fractional when the sheet does not divide evenly"""
    return dimensions.width / cols, dimensions.height / rows


def crop_size(dimensions: ImageDimensions, rows: int, cols: int, crop: CropInsets) -> Tuple[float, float]:
    """Cell size after removing the crop insets, never below 1px"""
    cell_w, cell_h = raw_cell_size(dimensions, rows, cols)
    crop_w = max(1, cell_w - crop.left - crop.right)
    crop_h = max(1, cell_h - crop.top - crop.bottom)
    return crop_w, crop_h


def source_rect(index: int, config: SpriteConfig, dimensions: ImageDimensions) -> FrameRect:
    """
    Source rectangle for a frame, with crop insets applied

    Args:
        index: Linear frame index
        config: Sprite configuration
        dimensions: Sheet dimensions

    Returns:
        FrameRect in sheet pixels
    """
    row, col = grid_position(index, config.rows, config.cols, config.read_order)
    cell_w, cell_h = raw_cell_size(dimensions, config.rows, config.cols)
    crop_w, crop_h = crop_size(dimensions, config.rows, config.cols, config.crop)
    return FrameRect(
        x=col * cell_w + config.crop.left,
        y=row * cell_h + config.crop.top,
        width=crop_w,
        height=crop_h,
    )
