"""
Preview Renderer
Composites one preview frame per tick from the sheet and the sprite config
Kept free of widget code so it can run headless and under test
"""

import math
from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from PIL import Image

from core.bbox_aligner import align_bbox, find_content_bbox
from core.chroma_key import ChromaKeyMatcher
from core.data_structures import AlignedPlacement, FrameRect, ImageDimensions, SpriteConfig
from core.frame_extractor import source_rect
from core.frame_sequence import frame_sequence_for
from core.scheduler import frame_interval_ms, select
from core.sprite_sheet import copy_region, sample_region

# Fill used to flatten transparency when no key color is set
OPAQUE_BACKGROUND = (255, 255, 255, 255)
CLEAR_BACKGROUND = (0, 0, 0, 0)

# About ten seconds of ticks at 60 Hz
DIAGNOSTICS_MAX_ENTRIES = 600


@dataclass
class TickResult:
    """Output of one tick: the composite plus display-only counter values"""
    image: Image.Image
    position: int
    sequence_length: int
    frame_index: int
    source_rect: FrameRect
    placement: Optional[AlignedPlacement] = None

    @property
    def display_index(self) -> int:
        """1-based position for the frame counter"""
        return self.position + 1


def _blit(canvas: Image.Image, patch: Image.Image, dest: Tuple[int, int]):
    """Source-over composite that tolerates patches hanging off the canvas"""
    dx, dy = dest
    if dx < 0 or dy < 0:
        left = max(0, -dx)
        top = max(0, -dy)
        if left >= patch.width or top >= patch.height:
            return
        patch = patch.crop((left, top, patch.width, patch.height))
        dx = max(0, dx)
        dy = max(0, dy)
    if dx >= canvas.width or dy >= canvas.height:
        return
    right = min(patch.width, canvas.width - dx)
    bottom = min(patch.height, canvas.height - dy)
    if right < patch.width or bottom < patch.height:
        patch = patch.crop((0, 0, right, bottom))
    canvas.alpha_composite(patch, dest=(dx, dy))


class PreviewRenderer:
    """
    Handles preview compositing
    Every input is passed in per call; nothing but diagnostics is kept between ticks
    """

    def __init__(self):
        self.enable_logging: bool = False
        self.log_data: deque = deque(maxlen=DIAGNOSTICS_MAX_ENTRIES)

    def render_tick(
        self,
        sheet_image: Optional[Image.Image],
        config: SpriteConfig,
        dimensions: ImageDimensions,
        time_ms: float
    ) -> Optional[TickResult]:
        """
        Render the frame shown at `time_ms`

        Args:
            sheet_image: Decoded RGBA sheet, or None if nothing is loaded
            config: Current sprite configuration
            dimensions: Sheet dimensions
            time_ms: Monotonic clock time in milliseconds

        Returns:
            TickResult, or None when the inputs are degenerate (idle state)
        """
        if sheet_image is None or dimensions.is_empty:
            return None
        if config.fps <= 0 or config.scale <= 0:
            return None

        sequence = frame_sequence_for(config)
        picked = select(sequence, time_ms, config.fps)
        if picked is None:
            return None
        position, frame_index = picked

        rect = source_rect(frame_index, config, dimensions)
        scale = config.scale
        canvas_w = max(1, int(rect.width * scale))
        canvas_h = max(1, int(rect.height * scale))

        matcher = ChromaKeyMatcher.from_config(config.transparent, config.tolerance)
        fill = CLEAR_BACKGROUND if matcher.has_key else OPAQUE_BACKGROUND
        canvas = Image.new('RGBA', (canvas_w, canvas_h), fill)

        placement = None
        if config.auto_align:
            placement = self._draw_aligned(canvas, sheet_image, rect, config, matcher)
        else:
            patch = sample_region(sheet_image, rect.box, (canvas_w, canvas_h))
            _blit(canvas, patch, (0, 0))

        if self.enable_logging:
            self.log_data.append({
                'time_ms': time_ms,
                'position': position,
                'frame_index': frame_index,
                'source_rect': rect,
                'bbox': placement.bbox if placement else None,
            })

        return TickResult(
            image=canvas,
            position=position,
            sequence_length=len(sequence),
            frame_index=frame_index,
            source_rect=rect,
            placement=placement,
        )

    def _draw_aligned(
        self,
        canvas: Image.Image,
        sheet_image: Image.Image,
        rect: FrameRect,
        config: SpriteConfig,
        matcher: ChromaKeyMatcher
    ) -> Optional[AlignedPlacement]:
        """Draw only the content box at its aligned spot; None if the frame is empty"""
        # Scratch buffer for this tick only
        pixels = copy_region(sheet_image, rect)
        bbox = find_content_bbox(pixels, matcher)
        del pixels
        if bbox is None:
            return None

        placement = align_bbox(bbox, canvas.width, canvas.height, config.scale, config.align_mode)
        box = (
            rect.x + bbox.min_x,
            rect.y + bbox.min_y,
            rect.x + bbox.min_x + bbox.width,
            rect.y + bbox.min_y + bbox.height,
        )
        # Snap edges rather than origin and size, so a box flush with the
        # canvas edge stays flush at fractional scales.
        left = int(math.floor(placement.dest_x))
        top = int(math.floor(placement.dest_y))
        right = max(left + 1, int(round(placement.dest_x + placement.dest_width)))
        bottom = max(top + 1, int(round(placement.dest_y + placement.dest_height)))
        patch = sample_region(sheet_image, box, (right - left, bottom - top))
        _blit(canvas, patch, (left, top))
        return placement

    def render_sequence(
        self,
        sheet_image: Optional[Image.Image],
        config: SpriteConfig,
        dimensions: ImageDimensions
    ) -> Iterator[TickResult]:
        """
        Render every position of the sequence once, in playback order

        Each frame is sampled mid-interval so float rounding cannot land on
        a neighbouring tick.
        """
        if config.fps <= 0:
            return
        interval = frame_interval_ms(config.fps)
        for position in range(len(frame_sequence_for(config))):
            result = self.render_tick(sheet_image, config, dimensions, (position + 0.5) * interval)
            if result is not None:
                yield result

    def clear_log(self) -> List[dict]:
        data = list(self.log_data)
        self.log_data.clear()
        return data
