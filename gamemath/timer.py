"""Frame timer measuring ticks in milliseconds."""

from __future__ import annotations

import time
from typing import Callable, Optional

_UINT32 = 0xFFFFFFFF


def _default_clock() -> Callable[[], int]:
    origin = time.monotonic()

    def ticks() -> int:
        return int((time.monotonic() - origin) * 1000)

    return ticks


class FrameTimer:
    """Tracks the ticks of the previous and current frame.

    ``clock`` returns the number of milliseconds since some fixed origin; by
    default it counts from the timer's creation.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock if clock is not None else _default_clock()
        self._prev_ticks = 0
        self._current_ticks = 0

    def _ticks(self) -> int:
        return int(self._clock()) & _UINT32

    def start(self) -> None:
        """Reset both frame marks to the current time."""
        self._prev_ticks = self._ticks()
        self._current_ticks = self._ticks()

    def update_frame_ticks(self) -> None:
        """Advance to a new frame."""
        self._prev_ticks = self._current_ticks
        self._current_ticks = self._ticks()

    def delta_time(self) -> float:
        """Seconds between the previous and current frame."""
        return ((self._current_ticks - self._prev_ticks) & _UINT32) / 1000.0

    def sleep_time(self, fps: int) -> int:
        """Milliseconds to sleep, never more than one frame at ``fps``."""
        if fps <= 0:
            raise ValueError("fps must be positive")
        ms_per_frame = 1000 // fps
        if ms_per_frame == 0:
            return 0
        sleep = (ms_per_frame - self._ticks()) & _UINT32
        if sleep > ms_per_frame:
            return ms_per_frame
        return sleep

    def current_ticks(self) -> float:
        """Time of the current frame in seconds."""
        return self._current_ticks / 1000.0