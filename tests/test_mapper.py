"""Unit tests for the bucket/rate to pixel mapping."""

from __future__ import annotations

import pytest

from src.visuals.core.mapper import CoordinateMapper, nice_ticks

pytestmark = pytest.mark.unit

BUCKETS = ["1 Mo", "2 Mo", "3 Mo", "6 Mo", "1 Yr", "2 Yr", "5 Yr", "10 Yr", "30 Yr"]


@pytest.fixture
def mapper() -> CoordinateMapper:
    return CoordinateMapper(BUCKETS, max_rate=4.73, plot_width=780, plot_height=240)


def test_x_is_strictly_increasing_in_bucket_order(mapper: CoordinateMapper) -> None:
    xs = [mapper.x(b) for b in BUCKETS]

    assert xs == sorted(xs)
    assert len(set(xs)) == len(xs)
    assert all(0 < x < 780 for x in xs)


def test_x_returns_band_centers_with_symmetric_padding() -> None:
    """Two bands over 100px with 0.1 padding sit symmetric about the middle."""

    m = CoordinateMapper(["a", "b"], max_rate=1.0, plot_width=100, plot_height=50, padding=0.1)

    assert m.step == pytest.approx(100 / 2.1)
    assert m.bandwidth == pytest.approx(m.step * 0.9)
    assert m.x("a") + m.x("b") == pytest.approx(100)
    assert m.x("b") - m.x("a") == pytest.approx(m.step)


def test_x_rejects_unknown_bucket(mapper: CoordinateMapper) -> None:
    with pytest.raises(KeyError):
        mapper.x("7 Yr")


def test_y_decreases_as_rate_increases(mapper: CoordinateMapper) -> None:
    assert mapper.y(0) == pytest.approx(240)
    assert mapper.y(0) > mapper.y(4.73)
    assert mapper.y(mapper.y_domain[1]) == pytest.approx(0)


def test_upper_bound_is_rounded_to_a_nice_tick(mapper: CoordinateMapper) -> None:
    assert mapper.y_domain == (0.0, 5.0)
    values = [v for _, v in mapper.y_ticks()]
    assert values[0] == 0.0
    assert values[-1] == 5.0


def test_nice_ticks_keeps_exact_upper_bound() -> None:
    ticks = nice_ticks(4.0)

    assert ticks[0] == 0.0
    assert ticks[-1] == 4.0


def test_nice_ticks_handles_non_positive_maximum() -> None:
    """All-zero or all-negative data still produces a usable domain."""

    assert nice_ticks(0.0)[-1] == 1.0
    assert nice_ticks(-0.5)[-1] == 1.0


def test_missing_max_rate_defaults_to_unit_domain() -> None:
    m = CoordinateMapper(["1 Mo"], max_rate=None, plot_width=100, plot_height=50)

    assert m.y_domain == (0.0, 1.0)


@pytest.mark.parametrize("padding", [-0.1, 1.0])
def test_padding_must_be_a_fraction(padding: float) -> None:
    with pytest.raises(ValueError):
        CoordinateMapper(BUCKETS, max_rate=1.0, plot_width=100, plot_height=50, padding=padding)
