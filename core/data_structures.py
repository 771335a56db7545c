"""
Data structures for the Sprite Sheet Previewer
Defines the core data types used throughout the application
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional


class ReadOrder:
    """Traversal order mapping a linear frame index to a grid cell."""
    ROW_MAJOR = 'row-major'
    COLUMN_MAJOR = 'column-major'


class AlignMode:
    """Vertical placement of the content box when auto-align is on."""
    CENTER = 'center'
    BOTTOM = 'bottom'


@dataclass(frozen=True)
class CropInsets:
    """Per-side crop insets in sheet pixels"""
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


@dataclass(frozen=True)
class SpriteConfig:
    """Grid geometry and playback settings for one sheet"""
    rows: int = 1
    cols: int = 1
    total_frames: int = 1
    excluded_frames: FrozenSet[int] = field(default_factory=frozenset)
    read_order: str = ReadOrder.ROW_MAJOR
    crop: CropInsets = field(default_factory=CropInsets)
    scale: float = 1.0
    fps: float = 10.0
    transparent: Optional[str] = None
    tolerance: float = 0.0
    auto_align: bool = False
    align_mode: str = AlignMode.CENTER

    def __post_init__(self):
        # Callers may hand in any iterable; the cache key needs a frozenset.
        if not isinstance(self.excluded_frames, frozenset):
            object.__setattr__(self, 'excluded_frames', frozenset(self.excluded_frames))


@dataclass(frozen=True)
class ImageDimensions:
    """Sheet size in pixels"""
    width: int = 0
    height: int = 0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class FrameRect:
    """Source rectangle on the sheet. May be fractional."""
    x: float
    y: float
    width: float
    height: float

    @property
    def box(self):
        """(left, upper, right, lower) as Pillow expects it"""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive content bounds inside an extracted frame"""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


@dataclass(frozen=True)
class AlignedPlacement:
    """Where the content box lands on the output canvas"""
    bbox: BoundingBox
    dest_x: float
    dest_y: float
    dest_width: float
    dest_height: float


@dataclass
class PlaybackState:
    """Playback flags plus the display-only frame counter"""
    is_playing: bool = True
    current_display_index: int = 0
    sequence_length: int = 0

    def counter_text(self) -> str:
        return f"Frame: {self.current_display_index} / {self.sequence_length}"
