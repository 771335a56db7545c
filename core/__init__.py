"""
Core module for the Sprite Sheet Previewer
Contains data structures, frame sequencing, scheduling, extraction and alignment
"""

from .data_structures import (
    AlignMode,
    AlignedPlacement,
    BoundingBox,
    CropInsets,
    FrameRect,
    ImageDimensions,
    PlaybackState,
    ReadOrder,
    SpriteConfig
)
from .frame_sequence import build_frame_sequence, frame_sequence_for
from .scheduler import FrameScheduler, frame_interval_ms, select, tick_at
from .frame_extractor import crop_size, grid_position, raw_cell_size, source_rect
from .chroma_key import ChromaKeyMatcher, MAX_RGB_DISTANCE, parse_key_color
from .bbox_aligner import align_bbox, find_content_bbox
from .sprite_sheet import SpriteSheet, copy_region, sample_region

__all__ = [
    'AlignMode',
    'AlignedPlacement',
    'BoundingBox',
    'CropInsets',
    'FrameRect',
    'ImageDimensions',
    'PlaybackState',
    'ReadOrder',
    'SpriteConfig',
    'build_frame_sequence',
    'frame_sequence_for',
    'FrameScheduler',
    'frame_interval_ms',
    'select',
    'tick_at',
    'crop_size',
    'grid_position',
    'raw_cell_size',
    'source_rect',
    'ChromaKeyMatcher',
    'MAX_RGB_DISTANCE',
    'parse_key_color',
    'align_bbox',
    'find_content_bbox',
    'SpriteSheet',
    'copy_region',
    'sample_region',
]
