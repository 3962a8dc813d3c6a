"""Unit tests for smoothed curve paths."""

from __future__ import annotations

import pytest

from src.data.models import Point
from src.visuals.anims.curve import CurveRenderer
from src.visuals.core.mapper import CoordinateMapper

pytestmark = pytest.mark.unit

BUCKETS = ["1 Mo", "3 Mo", "1 Yr", "2 Yr", "5 Yr", "10 Yr"]


@pytest.fixture
def mapper() -> CoordinateMapper:
    return CoordinateMapper(BUCKETS, max_rate=5.0, plot_width=780, plot_height=240)


@pytest.fixture
def renderer(mapper: CoordinateMapper) -> CurveRenderer:
    return CurveRenderer(mapper)


def test_path_visits_mapped_points_in_bucket_order(mapper, renderer) -> None:
    path = renderer.render([Point("1 Mo", 4.5), Point("2 Yr", 4.1)])

    assert path.anchors == (
        (mapper.x("1 Mo"), mapper.y(4.5)),
        (mapper.x("2 Yr"), mapper.y(4.1)),
    )


def test_missing_rate_is_skipped_without_breaking_the_curve(mapper, renderer) -> None:
    """A gap point leaves no vertex; the remaining points form one curve."""

    points = [Point("1 Mo", 0.05), Point("3 Mo", None), Point("1 Yr", 0.4), Point("2 Yr", 0.7)]

    path = renderer.render(points)

    xs = [x for x, _ in path.anchors]
    assert mapper.x("3 Mo") not in xs
    assert xs == [mapper.x("1 Mo"), mapper.x("1 Yr"), mapper.x("2 Yr")]
    assert len(path.controls) == len(path.anchors) - 1
    # one MOVETO followed by three vertices per cubic segment: a single subpath
    assert len(path.vertices()) == 1 + 3 * (len(path.anchors) - 1)


def test_segments_do_not_overshoot_their_endpoints(renderer) -> None:
    """Bezier control points stay inside each segment's vertical range."""

    rates = [1.0, 3.0, 3.0, 2.0, 4.8, 0.5]
    path = renderer.render([Point(b, r) for b, r in zip(BUCKETS, rates)])

    for (start, end), (c1, c2) in zip(zip(path.anchors, path.anchors[1:]), path.controls):
        lo, hi = sorted((start[1], end[1]))
        for _, cy in (c1, c2):
            assert lo - 1e-9 <= cy <= hi + 1e-9
        assert start[0] < c1[0] < c2[0] < end[0]


def test_flat_segment_stays_flat(mapper, renderer) -> None:
    path = renderer.render([Point(b, 2.0) for b in BUCKETS])

    assert {y for _, y in path.anchors} == {mapper.y(2.0)}
    assert all(c[1] == pytest.approx(mapper.y(2.0)) for pair in path.controls for c in pair)


def test_render_is_pure(renderer) -> None:
    points = [Point(b, r) for b, r in zip(BUCKETS, [0.1, 0.3, 0.9, 1.2, 1.5, 1.8])]

    assert renderer.render(points) == renderer.render(points)


def test_all_missing_gives_an_empty_path(renderer) -> None:
    path = renderer.render([Point(b, None) for b in BUCKETS])

    assert path.is_empty
    assert path.vertices().shape == (0, 2)


def test_single_known_point_gives_a_lone_vertex(mapper, renderer) -> None:
    path = renderer.render([Point("1 Mo", None), Point("1 Yr", 1.0)])

    assert path.anchors == ((mapper.x("1 Yr"), mapper.y(1.0)),)
    assert path.controls == ()
