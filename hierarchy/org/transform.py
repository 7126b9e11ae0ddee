"""Normalize raw employee rows and convert them into records."""

import logging

import pandas as pd

from hierarchy.org.models import RAW_COLUMNS, RawRecord

logger = logging.getLogger(__name__)


def normalize_raw_records(raw_df: pd.DataFrame, strip: bool = True) -> pd.DataFrame:
    df = raw_df.copy()
    if strip:
        for col in RAW_COLUMNS:
            df[col] = df[col].astype(str).str.strip()
    return df


def to_raw_records(df: pd.DataFrame) -> list[RawRecord]:
    """Convert rows to ``RawRecord`` objects, preserving file order."""
    records = [
        RawRecord(name=row.name, id=row.id, manager_id=row.manager_id)
        for row in df[RAW_COLUMNS].itertuples(index=False)
    ]
    logger.debug("Converted %d rows to raw records", len(records))
    return records
