from __future__ import annotations

import pytest

from fouriersynth.coefficients import CoefficientStore, Kind, HARMONIC_COUNT


def test_starts_at_zero() -> None:
    store = CoefficientStore()
    assert store.get_all() == [(0, 0)] * HARMONIC_COUNT


@pytest.mark.parametrize("index", range(HARMONIC_COUNT))
def test_clamps_out_of_range_values(index: int) -> None:
    store = CoefficientStore()
    store.set_coefficient(index, Kind.COSINE, 1000)
    assert store.a[index] == 50
    store.set_coefficient(index, Kind.COSINE, -1000)
    assert store.a[index] == -50


def test_stores_values_within_range() -> None:
    store = CoefficientStore()
    assert store.set_coefficient(3, Kind.SINE, -17)
    assert store.set_coefficient(3, Kind.COSINE, 50)
    assert store.get_all()[3] == (50, -17)


def test_sine_of_harmonic_zero_is_ignored() -> None:
    store = CoefficientStore()
    assert not store.set_coefficient(0, Kind.SINE, 20)
    assert store.b[0] == 0


def test_same_value_still_counts_as_a_change() -> None:
    store = CoefficientStore()
    assert store.set_coefficient(2, Kind.COSINE, 0)


@pytest.mark.parametrize("index", [-1, HARMONIC_COUNT])
def test_bad_index(index: int) -> None:
    store = CoefficientStore()
    with pytest.raises(IndexError):
        store.set_coefficient(index, Kind.COSINE, 1)


def test_labels_show_real_amplitudes() -> None:
    store = CoefficientStore()
    store.set_coefficient(3, Kind.COSINE, 5)
    store.set_coefficient(1, Kind.SINE, -12)
    assert store.label(3, Kind.COSINE) == "a3: 0.5"
    assert store.label(1, Kind.SINE) == "b1: -1.2"
    assert store.label(0, Kind.COSINE) == "a0: 0.0"


def test_reset() -> None:
    store = CoefficientStore()
    store.set_coefficient(1, Kind.COSINE, 10)
    store.set_coefficient(6, Kind.SINE, -10)
    store.reset()
    assert store.get_all() == [(0, 0)] * HARMONIC_COUNT
