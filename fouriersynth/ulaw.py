"""8-bit mu-law companding.

Magnitudes up to 8159 (14 bits) are split into 8 segments of 16 steps each.
Every segment doubles the step size of the previous one, so small samples keep
more precision than large ones.  Positive samples have the high bit set,
negative samples have it cleared.  Mantissa bits are stored inverted.
"""

from __future__ import annotations

from array import array
from typing import Iterable, List, NamedTuple


class Segment(NamedTuple):
    threshold: int  # exclusive upper bound of magnitudes in this segment
    base: int  # high nibble of the encoded byte
    divisor: int  # step size within the segment


SEGMENTS = (
    Segment(32, 0xF0, 2),
    Segment(96, 0xE0, 4),
    Segment(224, 0xD0, 8),
    Segment(480, 0xC0, 16),
    Segment(992, 0xB0, 32),
    Segment(2016, 0xA0, 64),
    Segment(4064, 0x90, 128),
    Segment(8160, 0x80, 256),
)
SATURATED = 0x80
POSITIVE_MASK = 0xFF
NEGATIVE_MASK = 0x7F


def encode(sample: int) -> int:
    """Return the mu-law byte (0-255) for an integer sample of any magnitude."""
    if sample < 0:
        ch = -sample
        mask = NEGATIVE_MASK
    else:
        ch = sample
        mask = POSITIVE_MASK

    start = 0
    for threshold, base, divisor in SEGMENTS:
        if ch < threshold:
            encoded = base | (15 - (ch - start) // divisor)
            break
        start = threshold
    else:
        encoded = SATURATED
    return mask & encoded


def _segment_starts() -> List[int]:
    starts = [0]
    for segment in SEGMENTS[:-1]:
        starts.append(segment.threshold)
    return starts


_STARTS = _segment_starts()


def decode(byte: int) -> int:
    """Return the signed magnitude in the middle of the step `byte` encodes.

    This is the inverse of `encode()` up to quantization: for every sample `s`
    within +/-8159, `decode(encode(s))` lies in the same step as `s`.
    """
    byte &= 0xFF
    segment = 7 - ((byte >> 4) & 0x07)
    step = 15 - (byte & 0x0F)
    divisor = SEGMENTS[segment].divisor
    magnitude = _STARTS[segment] + step * divisor + divisor // 2
    if byte & 0x80:
        return magnitude

    return -magnitude


def frame_to_pcm16(frame: Iterable[int]) -> array[int]:
    """Return a signed 16-bit wavetable for a mu-law encoded `frame`."""
    # decoded magnitudes are 14-bit
    return array("h", [decode(byte) << 2 for byte in frame])
