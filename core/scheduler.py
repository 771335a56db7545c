"""
Frame Scheduler
Maps wall-clock time to a position in the frame sequence
"""

import math
import time
from typing import Callable, Optional, Sequence, Tuple

from .data_structures import PlaybackState


def monotonic_ms() -> float:
    """Monotonic clock in milliseconds"""
    return time.monotonic() * 1000.0


def frame_interval_ms(fps: float) -> float:
    """Milliseconds each frame stays on screen"""
    return 1000.0 / fps


def tick_at(time_ms: float, fps: float) -> int:
    """
    Number of whole frame intervals elapsed since the clock's origin

    The time base is absolute; it is never reset on start or resume.
    """
    return int(math.floor(time_ms / frame_interval_ms(fps)))


def select(sequence: Sequence[int], time_ms: float, fps: float) -> Optional[Tuple[int, int]]:
    """
    Pick the frame shown at a given time

    Args:
        sequence: Valid frame indices
        time_ms: Clock time in milliseconds
        fps: Playback rate

    Returns:
        (position in sequence, frame index), or None if nothing can play
    """
    if not sequence or fps <= 0:
        return None
    position = tick_at(time_ms, fps) % len(sequence)
    return position, sequence[position]


class FrameScheduler:
    """Tracks play/pause and the frame counter for one preview"""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self.clock: Callable[[], float] = clock or monotonic_ms
        self.state = PlaybackState()

    @property
    def playing(self) -> bool:
        return self.state.is_playing

    def pause(self):
        self.state.is_playing = False

    def resume(self):
        # Position is re-derived from the clock on the next tick, so time
        # spent paused is not subtracted.
        self.state.is_playing = True

    def toggle(self) -> bool:
        if self.state.is_playing:
            self.pause()
        else:
            self.resume()
        return self.state.is_playing

    def now(self) -> float:
        return self.clock()

    def advance(self, sequence: Sequence[int], fps: float, time_ms: Optional[float] = None) -> Optional[int]:
        """
        Select the frame for a clock time and update the counter

        Args:
            sequence: Valid frame indices
            fps: Playback rate
            time_ms: Clock time to use; reads the clock when omitted

        Returns:
            Frame index to draw, or None when paused or nothing is playable
        """
        if not self.state.is_playing:
            return None
        if time_ms is None:
            time_ms = self.now()
        picked = select(sequence, time_ms, fps)
        self.state.sequence_length = len(sequence)
        if picked is None:
            self.state.current_display_index = 0
            return None
        position, frame_index = picked
        self.state.current_display_index = position + 1
        return frame_index
