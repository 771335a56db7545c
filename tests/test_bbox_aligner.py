import numpy as np

from core.bbox_aligner import align_bbox, find_content_bbox
from core.chroma_key import ChromaKeyMatcher
from core.data_structures import AlignMode, BoundingBox


def _frame(w=20, h=20, fill=(0, 0, 0, 0)):
    buf = np.zeros((h, w, 4), dtype=np.uint8)
    buf[:, :] = fill
    return buf


def test_single_pixel_bbox():
    buf = _frame()
    buf[5, 5] = (200, 10, 10, 255)
    bbox = find_content_bbox(buf, ChromaKeyMatcher())
    assert bbox == BoundingBox(5, 5, 5, 5)
    assert (bbox.width, bbox.height) == (1, 1)


def test_bbox_spans_all_content():
    buf = _frame()
    buf[2, 7] = (1, 1, 1, 255)
    buf[15, 3] = (1, 1, 1, 10)
    bbox = find_content_bbox(buf, ChromaKeyMatcher())
    assert bbox == BoundingBox(min_x=3, min_y=2, max_x=7, max_y=15)
    assert (bbox.width, bbox.height) == (5, 14)


def test_key_color_pixels_are_ignored():
    buf = _frame(fill=(255, 0, 255, 255))
    buf[10:12, 4:9] = (0, 128, 0, 255)
    bbox = find_content_bbox(buf, ChromaKeyMatcher((255, 0, 255), 10))
    assert bbox == BoundingBox(4, 10, 8, 11)


def test_empty_frame_has_no_bbox():
    assert find_content_bbox(_frame(), ChromaKeyMatcher()) is None
    keyed = _frame(fill=(0, 0, 0, 255))
    assert find_content_bbox(keyed, ChromaKeyMatcher((0, 0, 0), 0)) is None


def test_center_alignment_centers_pixel():
    placement = align_bbox(BoundingBox(5, 5, 5, 5), 20, 20, 1, AlignMode.CENTER)
    assert (placement.dest_x, placement.dest_y) == (9, 9)
    assert (placement.dest_width, placement.dest_height) == (1, 1)


def test_bottom_alignment_is_flush_with_bottom_edge():
    placement = align_bbox(BoundingBox(5, 5, 5, 5), 20, 20, 1, AlignMode.BOTTOM)
    assert placement.dest_x == 9
    assert placement.dest_y == 19
    assert placement.dest_y + placement.dest_height == 20


def test_alignment_with_scale():
    bbox = BoundingBox(0, 0, 3, 1)
    center = align_bbox(bbox, 40, 40, 2, AlignMode.CENTER)
    assert (center.dest_x, center.dest_y) == (16, 18)
    bottom = align_bbox(bbox, 40, 40, 2, AlignMode.BOTTOM)
    assert bottom.dest_y == 36


def test_unknown_mode_centers():
    placement = align_bbox(BoundingBox(0, 0, 1, 1), 11, 11, 1, 'top')
    assert placement.dest_y == 4
