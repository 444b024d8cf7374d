"""Commands sent to the engine by whatever front end drives it."""

from __future__ import annotations

import re
from typing import Union

from attrs import frozen

from .coefficients import HARMONIC_COUNT, Kind


class CommandError(ValueError):
    pass


@frozen
class SetCoefficient:
    index: int
    kind: Kind
    value: int


@frozen
class TogglePlayback:
    pass


@frozen
class Reset:
    pass


Command = Union[SetCoefficient, TogglePlayback, Reset]


ASSIGNMENT_RE = re.compile(
    r"""^ \s* (?P<kind>[ab]) (?P<index>\d+) \s* (?:=|\s) \s* (?P<value>[-+]?\d+) \s* $""",
    re.VERBOSE | re.IGNORECASE,
)
TOGGLE = {"p", "play", "toggle"}
RESET = {"r", "reset"}


def parse_assignment(text: str) -> SetCoefficient:
    """Parse `a3=25` or `b1 -10` into a SetCoefficient."""
    m = ASSIGNMENT_RE.match(text)
    if not m:
        raise CommandError(f"not a coefficient assignment: {text!r}")

    index = int(m.group("index"))
    if index >= HARMONIC_COUNT:
        raise CommandError(f"harmonic must be 0..{HARMONIC_COUNT - 1}, got {index}")

    kind = Kind(m.group("kind").lower())
    if kind is Kind.SINE and index == 0:
        raise CommandError("there is no b0, harmonic 0 has no sine term")

    return SetCoefficient(index=index, kind=kind, value=int(m.group("value")))


def parse_command(text: str) -> Command:
    word = text.strip().lower()
    if word in TOGGLE:
        return TogglePlayback()

    if word in RESET:
        return Reset()

    return parse_assignment(text)
