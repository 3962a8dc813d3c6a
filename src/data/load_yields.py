"""Load a treasury yield table into a ``Dataset``.

The table has a ``Date`` column plus one column per maturity bucket
(``"1 Mo"``, ``"2 Mo"``, ..., ``"30 Yr"``). Column order defines the bucket
order and row order defines playback order.
"""

from __future__ import annotations

import logging
import os

import pandas as pd

from .models import Dataset, DatasetError, Frame, Point, parse_rate
from .normalize_inputs import normalize_column

logger = logging.getLogger(__name__)

DATE_COLUMN = "Date"


def frames_from_table(df: pd.DataFrame, date_column: str = DATE_COLUMN) -> Dataset:
    """Convert a raw (string-typed) table into a validated ``Dataset``.

    Args:
        df: Table with one row per date.
        date_column: Name of the column holding the snapshot date.

    Returns:
        Dataset whose frames follow the table's row order.

    Raises:
        DatasetError: If the date column or the bucket columns are missing,
            a date cannot be parsed, or the table has no rows.
    """
    if date_column not in df.columns:
        raise DatasetError(f"missing {date_column!r} column")
    buckets = [c for c in df.columns if c != date_column]
    if not buckets:
        raise DatasetError("table has no maturity bucket columns")

    dates = pd.to_datetime(df[date_column], errors="coerce")
    bad = dates.isna()
    if bad.any():
        first = df.loc[bad, date_column].iloc[0]
        raise DatasetError(f"unparseable date {first!r} in {date_column!r} column")

    frames = []
    missing = 0
    for when, (_, row) in zip(dates, df[buckets].iterrows()):
        points = tuple(Point(bucket=b, rate=parse_rate(row[b])) for b in buckets)
        missing += sum(1 for p in points if p.rate is None)
        frames.append(Frame(date=when.date(), points=points))

    if missing:
        logger.warning("%d rate cells had no value and will be skipped", missing)
    return Dataset.from_frames(frames)


def load_yields(path: str | os.PathLike, date_column: str = DATE_COLUMN) -> Dataset:
    """Read a yield CSV from ``path`` and build a ``Dataset``."""
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [normalize_column(c) for c in df.columns]
    dataset = frames_from_table(df, date_column=date_column)
    logger.info(
        "loaded %d frames x %d buckets from %s",
        len(dataset),
        len(dataset.buckets),
        path,
    )
    return dataset
