"""Read raw employee records from CSV exports."""

import logging
from pathlib import Path

import pandas as pd

from hierarchy.config import CsvConfig
from hierarchy.org.models import RAW_COLUMNS

logger = logging.getLogger(__name__)


def _read_export_file(path: Path, config: CsvConfig) -> pd.DataFrame:
    """Read a single CSV, trying each configured encoding in turn."""
    for encoding in config.encodings:
        try:
            return pd.read_csv(
                path,
                sep=config.delimiter,
                header=0 if config.has_header else None,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                encoding=encoding,
            )
        except UnicodeDecodeError:
            continue
        except pd.errors.EmptyDataError:
            logger.warning("Employee export %s is empty", path.name)
            return pd.DataFrame(columns=RAW_COLUMNS, dtype=str)
        except pd.errors.ParserError as exc:
            raise ValueError(f"Malformed employee export {path}: {exc}") from exc
    raise ValueError(f"Could not decode {path}")


def read_employee_csv(path: str | Path, config: CsvConfig | None = None) -> pd.DataFrame:
    """Load ``name, id, manager_id`` rows from *path* as an all-string frame.

    Empty fields come back as ``""``; a blank manager marks the root. Rows
    with more or fewer than three fields raise ``ValueError``.
    """
    config = config or CsvConfig()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Employee export not found: {path}")

    df = _read_export_file(path, config)

    match len(df.columns):
        case 3:
            df.columns = RAW_COLUMNS
        case n:
            raise ValueError(f"Expected 3 columns (name, id, manager) in {path}, found {n}")

    # With keep_default_na=False only short rows produce NaN
    short = df.isna().any(axis=1)
    if short.any():
        lines = (df.index[short] + (2 if config.has_header else 1)).tolist()
        raise ValueError(
            f"Malformed employee export {path}: rows with fewer than 3 fields at lines {lines[:5]}"
        )
    logger.info("Read %d employee records from %s", len(df), path.name)
    return df
