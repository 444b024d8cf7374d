"""The synthesis engine: coefficients in, waveform and audio frame out.

Every coefficient change runs the whole pipeline synchronously:

    CoefficientStore -> synthesize() -> build_frame() -> PlaybackController

The waveform and the audio frame are always rewritten together, and only while
the playback device is kept away from the frame.
"""

from __future__ import annotations

from typing import List, Tuple

from attrs import define, field
import structlog

from .coefficients import CoefficientStore, Kind
from .commands import Command, Reset, SetCoefficient, TogglePlayback
from .frames import build_frame
from .playback import AudioDevice, PlaybackController, PlaybackState
from .synthesis import synthesize


log = structlog.get_logger()


@define
class FourierEngine:
    device: AudioDevice
    coefficients: CoefficientStore = field(factory=CoefficientStore)
    samples: List[float] = field(init=False)
    frame: bytearray = field(init=False)
    playback: PlaybackController = field(init=False)

    def __attrs_post_init__(self) -> None:
        self.samples = []
        self.frame = bytearray()
        self.playback = PlaybackController(device=self.device, buffer=self.frame)
        self.recompute()

    def set_coefficient(self, index: int, kind: Kind, value: int) -> None:
        if self.coefficients.set_coefficient(index, kind, value):
            log.debug(
                "Coefficient changed",
                coefficient=f"{kind.value}{index}",
                requested=value,
                stored=self.coefficients.get(index, kind),
            )
            self.recompute()

    def reset(self) -> None:
        self.coefficients.reset()
        log.debug("Coefficients reset")
        self.recompute()

    def recompute(self) -> None:
        c = self.coefficients
        samples = synthesize(c.a, c.b)
        frame = build_frame(samples)
        with self.playback.interrupted() as buffer:
            self.samples[:] = samples
            buffer[:] = frame
        log.debug("Recomputed", peak=max(abs(s) for s in samples))

    def get_samples(self) -> List[float]:
        return list(self.samples)

    def get_audio_frame(self) -> bytes:
        return bytes(self.frame)

    def get_all(self) -> List[Tuple[int, int]]:
        return self.coefficients.get_all()

    # Playback

    @property
    def playback_state(self) -> PlaybackState:
        return self.playback.state

    def start(self) -> None:
        self.playback.start(self.frame)

    def stop(self) -> None:
        self.playback.stop()

    def toggle_playback(self) -> PlaybackState:
        return self.playback.toggle()

    def close(self) -> None:
        self.playback.close()

    def dispatch(self, command: Command) -> None:
        if isinstance(command, SetCoefficient):
            self.set_coefficient(command.index, command.kind, command.value)
        elif isinstance(command, TogglePlayback):
            self.toggle_playback()
        elif isinstance(command, Reset):
            self.reset()
        else:
            raise TypeError(f"unknown command {command!r}")
