"""File output utilities for rendered hierarchies."""

from typing import TypeAlias
import logging
from pathlib import Path

import pandas as pd

FilePath: TypeAlias = str | Path

logger = logging.getLogger(__name__)


def write_output(df: pd.DataFrame, path: FilePath, fmt: str = "csv") -> Path:
    """Write a flattened hierarchy frame to the specified format."""
    path = Path(path)

    match fmt:
        case "csv":
            path.parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(path, index=False)
        case "json":
            path.parent.mkdir(parents=True, exist_ok=True)
            df.to_json(path, orient="records", indent=2)
        case other:
            raise ValueError(f"Unsupported output format: {other}")

    logger.info("Wrote %d rows to %s", len(df), path)
    return path


def write_lines(lines: list[str], path: FilePath) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    logger.info("Wrote %d lines to %s", len(lines), path)
    return path
