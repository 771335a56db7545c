"""
Chroma Key
Classifies pixels as content or background against an optional key color
"""

import math
import re
from typing import Optional, Tuple

import numpy as np

# Largest possible RGB distance, black to white
MAX_RGB_DISTANCE_SQ = 255 ** 2 * 3
MAX_RGB_DISTANCE = math.sqrt(MAX_RGB_DISTANCE_SQ)

_hex_pattern = re.compile(r'^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$', re.IGNORECASE)


def parse_key_color(value: Optional[str]) -> Optional[Tuple[int, int, int]]:
    """
    Parse '#rrggbb' or 'rrggbb' into an RGB tuple

    Returns:
        (r, g, b), or None when the value is empty or not a hex color
    """
    if not value or not isinstance(value, str):
        return None
    match = _hex_pattern.match(value.strip())
    if not match:
        return None
    return tuple(int(part, 16) for part in match.groups())


class ChromaKeyMatcher:
    """
    Content/background classifier

    A pixel is background if it is fully transparent, or if a key color is
    set and its squared RGB distance to the key is <= threshold squared.
    Without a key every pixel with alpha > 0 is content.
    """

    def __init__(self, key_color: Optional[Tuple[int, int, int]] = None, tolerance: float = 0.0):
        self.key_color = key_color
        self.tolerance = tolerance
        self.threshold = (tolerance / 100.0) * MAX_RGB_DISTANCE
        # Squared without the sqrt round trip; at tolerance 100 the far RGB
        # corner lands exactly on the threshold and counts as background.
        self.threshold_sq = (tolerance / 100.0) ** 2 * MAX_RGB_DISTANCE_SQ

    @classmethod
    def from_config(cls, transparent: Optional[str], tolerance: float) -> 'ChromaKeyMatcher':
        return cls(parse_key_color(transparent), tolerance)

    @property
    def has_key(self) -> bool:
        return self.key_color is not None

    def is_content(self, r: int, g: int, b: int, a: int) -> bool:
        if a == 0:
            return False
        if self.key_color is None:
            return True
        kr, kg, kb = self.key_color
        dist_sq = (r - kr) ** 2 + (g - kg) ** 2 + (b - kb) ** 2
        return dist_sq > self.threshold_sq

    def content_mask(self, rgba: np.ndarray) -> np.ndarray:
        """
        Vectorized is_content over an H x W x 4 uint8 buffer

        Returns:
            H x W boolean array, True where the pixel is content
        """
        alpha = rgba[:, :, 3]
        mask = alpha != 0
        if self.key_color is None:
            return mask
        rgb = rgba[:, :, :3].astype(np.int32)
        key = np.array(self.key_color, dtype=np.int32)
        dist_sq = np.sum((rgb - key) ** 2, axis=2)
        return mask & (dist_sq > self.threshold_sq)
