"""A small window, renderer and frame-timing loop on top of pygame."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable

import pygame

from proto_engine.input import Input

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
DEFAULT_FPS = 60.0


class EngineError(RuntimeError):
    """Raised when the display or window cannot be set up."""


class Engine:
    """Owns the window, tracks frame timing and feeds the input state."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        *,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise EngineError(f"Display init failed: {exc}") from exc
        try:
            self._surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            pygame.quit()
            raise EngineError(f"Window failed to create: {exc}") from exc
        pygame.display.set_caption(title)

        self._initialized = True
        self.running = True
        self.delta_time = 60.0
        self.fps = 0.0
        self.target_fps = 0.0
        self.fps_update_timer = 0.0
        self._frame_count = 0
        self.input = Input()
        self._last_frame_time = self._clock()
        print(f"Engine initialized: {width}x{height}")

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def close(self) -> None:
        """Shut the display down; safe to call more than once."""
        if not self._initialized:
            return
        self._initialized = False
        pygame.quit()
        print("Engine shut down")

    def __enter__(self) -> Engine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def clear(self) -> None:
        self._surface.fill(BLACK)

    def present(self) -> None:
        pygame.display.flip()

    def draw_rect(self, x: float, y: float, w: float, h: float) -> None:
        """Fill a white rectangle."""
        rect = pygame.Rect(int(x), int(y), int(w), int(h))
        pygame.draw.rect(self._surface, WHITE, rect)

    def poll_events(self) -> None:
        """Age the input state, then apply every pending event."""
        self.input.update()
        for event in pygame.event.get():
            self.input.process_event(event)
            if event.type == pygame.QUIT:
                self.running = False

    def set_target_fps(self, fps: float) -> None:
        print(f"setTargetFPS called with: {fps}")
        if fps <= 0.0:
            print(f"ERROR: Invalid FPS {fps}, setting to 60", file=sys.stderr)
            self.target_fps = DEFAULT_FPS
        else:
            self.target_fps = fps
        print(f"target FPS is now: {self.target_fps}")

    def _advance_clock(self) -> None:
        now = self._clock()
        self.delta_time = now - self._last_frame_time
        self._last_frame_time = now

    def update_delta_time(self) -> None:
        """Measure the time since the last frame and refresh the FPS figure once a second."""
        self._advance_clock()
        self._frame_count += 1
        self.fps_update_timer += self.delta_time
        if self.fps_update_timer >= 1.0:
            self.fps = self._frame_count / self.fps_update_timer
            print(f"FPS = {self.fps}")
            self.fps_update_timer = 0.0
            self._frame_count = 0

    def limit_frame_rate(self) -> None:
        """Sleep away what is left of the target frame time, then re-measure."""
        if self.target_fps <= 0.0:
            return
        target_frame_time = 1.0 / self.target_fps
        if self.delta_time < target_frame_time:
            delay_ms = int((target_frame_time - self.delta_time) * 1000.0)
            if delay_ms > 0:
                self._sleep(delay_ms / 1000.0)
        self._advance_clock()