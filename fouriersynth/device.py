"""A looping mono playback device backed by miniaudio."""

from __future__ import annotations

from array import array
from typing import TYPE_CHECKING, Generator, Optional

from attrs import define, field
import miniaudio

from .ulaw import frame_to_pcm16


# The rate of classic 8-bit mu-law audio players.  Not configurable.
SAMPLE_RATE = 8000
MAX_BUFFER = 2400


if TYPE_CHECKING:
    Audio = Generator[array[int], int, None]


# For clarity we're aliasing `next` because we are using it as an initializer of
# stateful generators to execute until (and including) its first `yield`.
init = next


def get_device(devices: list[dict[str, object]], name: str) -> object:
    for dev in devices:
        if dev["name"] == name:
            return dev["id"]
    raise LookupError(name)


def find_playback(name: str, backend: str = "") -> Optional[object]:
    """Return the miniaudio device ID of the playback device called `name`.

    An empty `name` means the system default device, for which None is returned.
    """
    if not name:
        return None

    # Apparently, miniaudio (at least on Linux) doesn't enumerate devices across
    # all backends.  So a device on a non-default backend needs the backend.
    if backend:
        devices = miniaudio.Devices([getattr(miniaudio.Backend, backend)])
    else:
        devices = miniaudio.Devices()
    return get_device(devices.get_playbacks(), name)


def loop(wavetable: array[int]) -> Audio:
    """Repeat `wavetable` forever, as many frames as the device wants.

    An empty `wavetable` raises ValueError when the generator is initialized.
    """
    if not wavetable:
        raise ValueError("cannot loop an empty wavetable")

    out_buffer = array("h", [0] * MAX_BUFFER)
    want_frames = yield out_buffer[:0]

    w_len = len(wavetable)
    w_i = 0
    while True:
        if len(out_buffer) < want_frames:
            out_buffer.extend([0] * (want_frames - len(out_buffer)))
        for i in range(want_frames):
            out_buffer[i] = wavetable[w_i]
            w_i = (w_i + 1) % w_len
        want_frames = yield out_buffer[:want_frames]


@define
class MiniaudioDevice:
    device_id: Optional[object] = None
    buffer_msec: int = 50
    _device: Optional[miniaudio.PlaybackDevice] = field(default=None, init=False)

    def open(self) -> miniaudio.PlaybackDevice:
        if self._device is None:
            self._device = miniaudio.PlaybackDevice(
                device_id=self.device_id,
                nchannels=1,
                sample_rate=SAMPLE_RATE,
                output_format=miniaudio.SampleFormat.SIGNED16,
                buffersize_msec=self.buffer_msec,
            )
        return self._device

    def start(self, buffer: bytearray) -> None:
        # The frame is decoded up front; the device never reads `buffer` itself.
        stream = loop(frame_to_pcm16(buffer))
        init(stream)
        self.open().start(stream)

    def stop(self) -> None:
        if self._device is not None:
            self._device.stop()

    def close(self) -> None:
        if self._device is not None:
            self._device.close()
            self._device = None


class NullDevice:
    """Stands in for audio out when nothing is going to be played."""

    def start(self, buffer: bytearray) -> None:
        pass

    def stop(self) -> None:
        pass

    def close(self) -> None:
        pass
