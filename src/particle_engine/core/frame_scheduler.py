# particle_engine/core/frame_scheduler.py
import pygame


class FrameScheduler:
    """
    Next-frame hook used by ParticleSystem. Each requested callback fires once,
    on the next frame, with a monotonic timestamp in milliseconds.
    """

    def request_frame(self, callback):
        raise NotImplementedError

    def pending_count(self) -> int:
        raise NotImplementedError


class ClockFrameScheduler(FrameScheduler):
    """
    Paces frames with a pygame Clock. The host loop calls run_frame() once per
    display refresh (before pygame.display.flip()).
    """

    def __init__(self, target_fps: int = 60):
        self.clock = pygame.time.Clock()
        self.target_fps = target_fps
        self._pending = []
        self._timestamp = 0.0

    def request_frame(self, callback):
        self._pending.append(callback)

    def pending_count(self) -> int:
        return len(self._pending)

    def run_frame(self):
        """Waits for the next frame slot and fires every callback queued for it."""
        self._timestamp += self.clock.tick(self.target_fps)

        # Callbacks queued while firing belong to the next frame
        callbacks, self._pending = self._pending, []
        for callback in callbacks:
            callback(self._timestamp)

    def get_fps(self) -> float:
        return self.clock.get_fps()


class ManualFrameScheduler(FrameScheduler):
    """Fires queued callbacks at caller-supplied timestamps (headless driving, tests)."""

    def __init__(self):
        self._pending = []
        self.frames_fired = 0

    def request_frame(self, callback):
        self._pending.append(callback)

    def pending_count(self) -> int:
        return len(self._pending)

    def advance(self, timestamp: float):
        callbacks, self._pending = self._pending, []
        for callback in callbacks:
            callback(timestamp)
        self.frames_fired += 1
