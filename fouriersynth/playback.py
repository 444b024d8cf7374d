"""Loop playback of the audio frame.

The controller only decides *when* the device plays.  Looping the frame
seamlessly is the device's job, see `fouriersynth.device`.
"""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional, Protocol

from attrs import define, field
import structlog


log = structlog.get_logger()


class AudioDevice(Protocol):
    def start(self, buffer: bytearray) -> None:
        ...

    def stop(self) -> None:
        ...

    def close(self) -> None:
        ...


class PlaybackState(Enum):
    STOPPED = 0
    PLAYING = 1


@define
class PlaybackController:
    device: AudioDevice
    buffer: bytearray = field(factory=bytearray)
    state: PlaybackState = PlaybackState.STOPPED

    # Current state of the device, modified by `suspend()` and `resume()`
    suspended: bool = False
    _running: bool = field(default=False, init=False)

    @property
    def is_playing(self) -> bool:
        return self.state is PlaybackState.PLAYING

    @property
    def running(self) -> bool:
        """True if the device is actually consuming the buffer right now."""
        return self._running

    def start(self, buffer: Optional[bytearray] = None) -> None:
        """Start playing `buffer`, or the current buffer if None.

        Starting again with a different buffer restarts the device on it.
        """
        if self.is_playing:
            if buffer is not None and buffer is not self.buffer:
                with self.interrupted():
                    self.buffer = buffer
            return

        if buffer is not None:
            self.buffer = buffer
        self.state = PlaybackState.PLAYING
        log.info("Playback on", frame_length=len(self.buffer))
        if not self.suspended:
            self._start_device()

    def stop(self) -> None:
        if not self.is_playing:
            return

        self.state = PlaybackState.STOPPED
        log.info("Playback off")
        self._stop_device()

    def toggle(self) -> PlaybackState:
        if self.is_playing:
            self.stop()
        else:
            self.start()
        return self.state

    def suspend(self) -> None:
        """Silence the device but remember whether we were playing."""
        self.suspended = True
        self._stop_device()

    def resume(self) -> None:
        self.suspended = False
        if self.is_playing:
            self._start_device()

    def close(self) -> None:
        self._stop_device()
        self.device.close()

    @contextmanager
    def interrupted(self) -> Iterator[bytearray]:
        """Keep the device away from the buffer while it's being rewritten.

        A running device is stopped before the body executes and started again
        afterwards, even if the body didn't change anything.
        """
        was_running = self._running
        if was_running:
            self._stop_device()
        try:
            yield self.buffer
        finally:
            if was_running:
                log.debug("Playback restart", frame_length=len(self.buffer))
                self._start_device()

    def _start_device(self) -> None:
        if self._running:
            return

        self.device.start(self.buffer)
        self._running = True

    def _stop_device(self) -> None:
        if not self._running:
            return

        self.device.stop()
        self._running = False
