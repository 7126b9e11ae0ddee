"""Import orchestration: raw records -> tree -> rendered lines."""

import logging
from collections.abc import Iterable
from pathlib import Path

from pandera.errors import SchemaError

from hierarchy.config import ImportConfig
from hierarchy.org.ingest import read_employee_csv
from hierarchy.org.models import PendingSet, RawRecord, Tree, raw_employee_schema
from hierarchy.org.render import DEFAULT_INDENT, render
from hierarchy.org.resolver import ingest_records
from hierarchy.org.transform import normalize_raw_records, to_raw_records

logger = logging.getLogger(__name__)


def build_tree(records: Iterable[RawRecord]) -> Tree:
    """Resolve *records* into a fresh tree, raising on any structural error."""
    tree = Tree()
    pending: PendingSet = {}
    return ingest_records(tree, records, pending)


def run(records: Iterable[RawRecord], indent: str = DEFAULT_INDENT) -> list[str]:
    return render(build_tree(records), indent=indent)


def load_records(path: str | Path, config: ImportConfig | None = None) -> list[RawRecord]:
    """Read, schema-check and normalize the CSV at *path*."""
    config = config or ImportConfig()
    raw = read_employee_csv(path, config.csv)
    df = normalize_raw_records(raw, strip=config.csv.strip_whitespace)
    try:
        df = raw_employee_schema.validate(df)
    except SchemaError as exc:
        raise ValueError(f"Invalid employee export {path}: {exc}") from exc
    return to_raw_records(df)


def generate_hierarchy_from_csv(path: str | Path, config: ImportConfig | None = None) -> list[str]:
    config = config or ImportConfig()
    records = load_records(path, config)
    lines = run(records, indent=config.render.indent)
    logger.info("Generated hierarchy for %s: %d rows", Path(path).name, len(lines))
    return lines
