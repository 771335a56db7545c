"""
Frame Sequence
Builds the ordered list of playable frame indices from grid geometry
"""

from functools import lru_cache
from typing import Iterable, Tuple

from .data_structures import ReadOrder, SpriteConfig


@lru_cache(maxsize=64)
def _cached_sequence(
    rows: int,
    cols: int,
    total_frames: int,
    excluded: frozenset,
    read_order: str
) -> Tuple[int, ...]:
    if rows <= 0 or cols <= 0:
        return ()

    indices = []
    if read_order == ReadOrder.COLUMN_MAJOR:
        for c in range(cols):
            for r in range(rows):
                i = c * rows + r
                if i < total_frames and i not in excluded:
                    indices.append(i)
    else:
        for r in range(rows):
            for c in range(cols):
                i = r * cols + c
                if i < total_frames and i not in excluded:
                    indices.append(i)
    return tuple(indices)


def build_frame_sequence(
    rows: int,
    cols: int,
    total_frames: int,
    excluded_frames: Iterable[int] = (),
    read_order: str = ReadOrder.ROW_MAJOR
) -> Tuple[int, ...]:
    """
    Return the valid frame indices in traversal order

    Args:
        rows: Grid rows
        cols: Grid columns
        total_frames: Frames actually present on the sheet
        excluded_frames: Indices to skip
        read_order: 'row-major' or 'column-major' (anything else reads as row-major)

    Returns:
        Tuple of indices; empty when the grid is degenerate
    """
    return _cached_sequence(
        int(rows), int(cols), int(total_frames),
        frozenset(excluded_frames), read_order
    )


def frame_sequence_for(config: SpriteConfig) -> Tuple[int, ...]:
    """Valid frame sequence for a config"""
    return build_frame_sequence(
        config.rows,
        config.cols,
        config.total_frames,
        config.excluded_frames,
        config.read_order,
    )


def clear_sequence_cache():
    _cached_sequence.cache_clear()
