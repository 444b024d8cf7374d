from __future__ import annotations

from typing import Sequence

from .synthesis import SAMPLE_COUNT
from .ulaw import encode


FRAME_LENGTH = SAMPLE_COUNT // 2
# Waveform values are scaled by this before encoding.
AUDIO_GAIN = 100


def build_frame(samples: Sequence[float]) -> bytes:
    """Return the mu-law audio frame for one waveform period.

    Only odd-indexed samples are used, so the audio frame has half the sample
    rate of the waveform.
    """
    if len(samples) != SAMPLE_COUNT:
        raise ValueError(f"expected {SAMPLE_COUNT} samples, got {len(samples)}")

    return bytes(
        encode(round(samples[2 * n + 1] * AUDIO_GAIN)) for n in range(FRAME_LENGTH)
    )
