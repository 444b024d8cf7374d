"""Drawing the waveform on a small oscilloscope-like screen."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .config import Labels
from .synthesis import SAMPLE_COUNT


SCREEN_WIDTH = 400
SCREEN_HEIGHT = 200
# Screen pixels per unit of amplitude.
Y_SCALE = 10


def screen_points(
    samples: Sequence[float], width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT
) -> np.ndarray:
    """Return integer (x, y) pixel coordinates of the waveform, y pointing down.

    One period takes one pixel per sample and is repeated across the whole
    `width`.  Each repetition ends with the first sample of the next one so that
    the trace is continuous.
    """
    period = len(samples)
    if not period:
        raise ValueError("cannot draw an empty waveform")

    ys = (height // 2 - np.asarray(samples, dtype=float) * Y_SCALE).astype(int)
    tiles = -(-width // period)
    xs = np.arange(tiles * period + 1)
    ys = np.append(np.tile(ys, tiles), ys[0])
    keep = xs <= width
    return np.column_stack((xs[keep], ys[keep]))


def plot(samples: Sequence[float], labels: Labels, title: str = "") -> None:
    import matplotlib.pyplot as plt

    points = screen_points(samples)
    fig, ax = plt.subplots(figsize=(SCREEN_WIDTH / 100, SCREEN_HEIGHT / 100))
    ax.set_facecolor("black")
    ax.axhline(SCREEN_HEIGHT // 2, color="green", linestyle=":", linewidth=0.5)
    for x in range(0, SCREEN_WIDTH, SAMPLE_COUNT):
        ax.axvline(x, color="green", linestyle=":", linewidth=0.25)
    ax.plot(points[:, 0], points[:, 1], color="lime")
    ax.set_xlim(0, SCREEN_WIDTH)
    ax.set_ylim(SCREEN_HEIGHT, 0)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title or f"{labels.cos_name} / {labels.sin_name}")
    plt.show()
