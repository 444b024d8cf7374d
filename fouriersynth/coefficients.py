"""Harmonic coefficients as set by the user, always within bounds."""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from attrs import define, field


# Max. |a[k]|, |b[k]|
MAX_COEFFICIENT = 50
# Number of harmonics, including the constant term at k=0.
HARMONIC_COUNT = 7
# a[k] / SCALE is the real amplitude of harmonic k.
SCALE = 10.0


class Kind(Enum):
    COSINE = "a"
    SINE = "b"


def clamp(value: int) -> int:
    return max(-MAX_COEFFICIENT, min(MAX_COEFFICIENT, int(value)))


def _zeros() -> List[int]:
    return [0] * HARMONIC_COUNT


@define
class CoefficientStore:
    """Cosine terms in `a`, sine terms in `b`.

    `b[0]` stays zero forever since there is no sine term at harmonic 0.
    """

    a: List[int] = field(factory=_zeros)
    b: List[int] = field(factory=_zeros)

    def set_coefficient(self, index: int, kind: Kind, value: int) -> bool:
        """Store `value` clamped to +/-MAX_COEFFICIENT.

        Returns True if the value was stored, even when it equals the old one.
        Writing the sine term of harmonic 0 does nothing and returns False.
        """
        if not 0 <= index < HARMONIC_COUNT:
            raise IndexError(f"harmonic {index} out of range 0..{HARMONIC_COUNT - 1}")

        if kind is Kind.SINE and index == 0:
            return False

        values = self.a if kind is Kind.COSINE else self.b
        values[index] = clamp(value)
        return True

    def get(self, index: int, kind: Kind) -> int:
        values = self.a if kind is Kind.COSINE else self.b
        return values[index]

    def get_all(self) -> List[Tuple[int, int]]:
        return list(zip(self.a, self.b))

    def amplitude(self, index: int, kind: Kind) -> float:
        return self.get(index, kind) / SCALE

    def label(self, index: int, kind: Kind) -> str:
        return f"{kind.value}{index}: {self.amplitude(index, kind)}"

    def reset(self) -> None:
        self.a = _zeros()
        self.b = _zeros()
