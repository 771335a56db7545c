"""
Bounding Box Aligner
Finds the tight content box of an extracted frame and places it on the canvas
"""

import math
from typing import Optional

import numpy as np

from .chroma_key import ChromaKeyMatcher
from .data_structures import AlignedPlacement, AlignMode, BoundingBox


def find_content_bbox(rgba: np.ndarray, matcher: ChromaKeyMatcher) -> Optional[BoundingBox]:
    """
    Scan a frame buffer for content pixels

    Args:
        rgba: H x W x 4 uint8 buffer of the cropped frame
        matcher: Pixel classifier

    Returns:
        Inclusive bounding box, or None when the frame has no content
    """
    if rgba.size == 0:
        return None
    mask = matcher.content_mask(rgba)
    ys, xs = np.nonzero(mask)
    if xs.size == 0:
        return None
    return BoundingBox(
        min_x=int(xs.min()),
        min_y=int(ys.min()),
        max_x=int(xs.max()),
        max_y=int(ys.max()),
    )


def align_bbox(
    bbox: BoundingBox,
    canvas_width: float,
    canvas_height: float,
    scale: float,
    align_mode: str = AlignMode.CENTER
) -> AlignedPlacement:
    """
    Compute where the scaled content box is drawn

    Horizontal placement is always centered. 'bottom' puts the box flush with
    the canvas bottom edge; any other mode centers it vertically.
    """
    dest_w = bbox.width * scale
    dest_h = bbox.height * scale
    dest_x = math.floor((canvas_width - dest_w) / 2)
    if align_mode == AlignMode.BOTTOM:
        dest_y = canvas_height - dest_h
    else:
        dest_y = math.floor((canvas_height - dest_h) / 2)
    return AlignedPlacement(
        bbox=bbox,
        dest_x=dest_x,
        dest_y=dest_y,
        dest_width=dest_w,
        dest_height=dest_h,
    )
