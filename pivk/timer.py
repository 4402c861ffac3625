"""Frame timer with pause support and frames-per-second measurement."""

from __future__ import annotations

import time
from typing import Callable, Optional

DEFAULT_FPS = 30.0


class Timer:
    """Global and pausable time, per-frame intervals and FPS."""

    def __init__(self, clock: Optional[Callable[[], float]] = None,
                 on_fps: Optional[Callable[[float], None]] = None):
        self._clock = clock or time.perf_counter
        self._on_fps = on_fps
        now = self._clock()
        self._start = self._old = self._old_fps = now
        self._pause_time = 0.0
        self._frames = 0
        self.global_time = 0.0
        self.global_delta_time = 0.0
        self.time = 0.0
        self.delta_time = 0.0
        self.fps = DEFAULT_FPS
        self.is_pause = False

    def update(self) -> None:
        """Advance to the current clock reading; call once per frame."""
        now = self._clock()
        self.global_time = now - self._start
        self.global_delta_time = now - self._old

        if self.is_pause:
            self.delta_time = 0.0
            self._pause_time += now - self._old
        else:
            self.delta_time = self.global_delta_time
            self.time = now - self._pause_time - self._start

        self._frames += 1
        elapsed = now - self._old_fps
        if elapsed > 1.0:
            self.fps = self._frames / elapsed
            self._old_fps = now
            self._frames = 0
            if self._on_fps is not None:
                self._on_fps(self.fps)
        self._old = now