"""Label normalization for source tables.

Maps the column headers used by different treasury exports to the bucket
labels shown on the chart's x axis.
"""

BUCKET_LABEL_MAP = {
    "1 mo": "1 Mo",
    "2 mo": "2 Mo",
    "3 mo": "3 Mo",
    "4 mo": "4 Mo",
    "6 mo": "6 Mo",
    "1 yr": "1 Yr",
    "2 yr": "2 Yr",
    "3 yr": "3 Yr",
    "5 yr": "5 Yr",
    "7 yr": "7 Yr",
    "10 yr": "10 Yr",
    "20 yr": "20 Yr",
    "30 yr": "30 Yr",
}

DATE_LABELS = {"date", "observation_date"}


def normalize_column(label: str) -> str:
    """Normalize one header to its chart label.

    Args:
        label: Raw header like ``"10 yr"``, ``" 1 MO "`` or ``"date"``.

    Returns:
        ``"Date"`` for date headers, the canonical bucket label for known
        buckets, and the stripped input otherwise.
    """
    key = " ".join(str(label).split()).lower()
    if key in DATE_LABELS:
        return "Date"
    return BUCKET_LABEL_MAP.get(key, str(label).strip())
