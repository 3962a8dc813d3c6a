"""Unit tests for the frame/dataset model and rate parsing."""

from __future__ import annotations

import math
from datetime import date

import pytest

from src.data.models import Dataset, DatasetError, Frame, Point, parse_rate

pytestmark = pytest.mark.unit


def test_parse_rate_reads_numbers_including_negative_and_zero() -> None:
    """Numeric strings parse as floats; zero stays zero."""

    assert parse_rate("4.5") == 4.5
    assert parse_rate(" -0.25 ") == -0.25
    assert parse_rate("0") == 0.0
    assert parse_rate(3) == 3.0


@pytest.mark.parametrize("raw", ["n/a", "", "   ", None, "N/A", math.nan, "inf"])
def test_parse_rate_marks_unparseable_values_as_missing(raw) -> None:
    """Unparseable input becomes None instead of a default number."""

    assert parse_rate(raw) is None


def test_dataset_rejects_empty_frames() -> None:
    with pytest.raises(DatasetError):
        Dataset.from_frames([])


def test_dataset_rejects_mismatched_bucket_labels() -> None:
    """Every frame must carry the same bucket labels in the same order."""

    first = Frame(date(2022, 1, 3), (Point("1 Mo", 0.05), Point("1 Yr", 0.4)))
    renamed = Frame(date(2022, 1, 4), (Point("1 Mo", 0.05), Point("2 Yr", 0.7)))
    reordered = Frame(date(2022, 1, 5), (Point("1 Yr", 0.4), Point("1 Mo", 0.05)))
    short = Frame(date(2022, 1, 6), (Point("1 Mo", 0.05),))

    for bad in (renamed, reordered, short):
        with pytest.raises(DatasetError):
            Dataset.from_frames([first, bad])


def test_dataset_rejects_duplicate_bucket_labels() -> None:
    frame = Frame(date(2022, 1, 3), (Point("1 Mo", 0.05), Point("1 Mo", 0.06)))

    with pytest.raises(DatasetError):
        Dataset.from_frames([frame])


def test_max_rate_ignores_missing_points() -> None:
    frames = [
        Frame(date(2022, 1, 3), (Point("1 Mo", None), Point("1 Yr", 0.4))),
        Frame(date(2022, 1, 4), (Point("1 Mo", 0.1), Point("1 Yr", None))),
    ]
    dataset = Dataset.from_frames(frames)

    assert dataset.max_rate() == 0.4
    assert dataset.buckets == ("1 Mo", "1 Yr")
    assert len(dataset) == 2
    assert dataset[1].date == date(2022, 1, 4)


def test_max_rate_is_none_when_no_rate_is_known() -> None:
    frames = [Frame(date(2022, 1, 3), (Point("1 Mo", None),))]

    assert Dataset.from_frames(frames).max_rate() is None
