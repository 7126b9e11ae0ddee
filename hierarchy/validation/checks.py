"""Run all pre-flight checks against a raw employee frame.

The checks catch most bad exports up front with readable messages. The
final ``resolves`` check runs the real import so that cycles, which no
column-level check can see, are reported too.
"""

import logging

import pandas as pd

from hierarchy.org.errors import HierarchyError
from hierarchy.org.importer import build_tree
from hierarchy.org.models import raw_employee_schema
from hierarchy.org.transform import normalize_raw_records, to_raw_records
from hierarchy.utils.types import CheckSummary, ImportStatus, ValidationResult
from hierarchy.utils.validators import (
    validate_dataframe,
    validate_no_self_management,
    validate_referential_integrity,
    validate_single_root,
    validate_trimmed,
    validate_unique,
)

logger = logging.getLogger(__name__)


def _validate_resolves(df: pd.DataFrame) -> ValidationResult:
    try:
        build_tree(to_raw_records(df))
    except HierarchyError as exc:
        return {"valid": False, "status": "error", "errors": [str(exc)]}
    return {"valid": True, "status": "ok", "errors": []}


def run_import_checks(df: pd.DataFrame, strict: bool = False, strip: bool = True) -> CheckSummary:
    """Run every check and summarise as passed / warning / failed.

    Warnings only fail the run when *strict* is set. *strip* must match the
    import setting so row checks see the same values the import will.
    """
    results: dict[str, ValidationResult] = {
        "whitespace": validate_trimmed(df),
        "schema": validate_dataframe(df, raw_employee_schema),
    }

    # Row-level checks assume the columns exist
    if results["schema"]["valid"]:
        trimmed = normalize_raw_records(df, strip=strip)
        results["unique_ids"] = validate_unique(trimmed, ["id"])
        results["single_root"] = validate_single_root(trimmed)
        results["no_self_management"] = validate_no_self_management(trimmed)
        results["managers_exist"] = validate_referential_integrity(trimmed)
        results["resolves"] = _validate_resolves(trimmed)

    checks = [{"check": name, **result} for name, result in results.items()]
    failed = [c for c in checks if not c["valid"]]
    warnings = [c for c in checks if c["status"] == "warning"]

    status: ImportStatus
    match (len(failed), len(warnings)):
        case (0, 0):
            status = ImportStatus.PASSED
        case (0, _) if not strict:
            status = ImportStatus.WARNING
        case _:
            status = ImportStatus.FAILED

    logger.info("Import checks: %d/%d passed (%s)", len(checks) - len(failed), len(checks), status)
    return {
        "status": status,
        "total": len(checks),
        "passed": len(checks) - len(failed),
        "checks": checks,
    }
