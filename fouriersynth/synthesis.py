#!/usr/bin/env python3
"""One period of a waveform from its harmonic coefficients."""

from __future__ import annotations

import math
from typing import List, Sequence

from .coefficients import HARMONIC_COUNT, SCALE


# One full period of the fundamental.
SAMPLE_COUNT = 80
# Sample `i` is at phase `i / TIME_SCALE`, so 80 samples span exactly 2*pi.
TIME_SCALE = 40.0 / math.pi


def synthesize(a: Sequence[int], b: Sequence[int]) -> List[float]:
    """Return SAMPLE_COUNT samples of the Fourier series given by `a` and `b`.

    The constant term carries half weight, as is usual for Fourier series.
    `b[0]` is ignored.  Every call recomputes all harmonics from scratch.
    """
    numbers = []
    for i in range(SAMPLE_COUNT):
        current = a[0] / (2.0 * SCALE)
        for k in range(1, HARMONIC_COUNT):
            current += a[k] / SCALE * math.cos(k * i / TIME_SCALE)
            current += b[k] / SCALE * math.sin(k * i / TIME_SCALE)
        numbers.append(current)
    return numbers
