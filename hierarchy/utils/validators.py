"""Pre-flight checks on raw employee frames, using pandera for the schema."""

import pandas as pd
from pandera.errors import SchemaErrors
from pandera.pandas import DataFrameSchema

from hierarchy.utils.types import ValidationResult


def _ok() -> ValidationResult:
    return {"valid": True, "status": "ok", "errors": []}


def _failed(errors: list[str]) -> ValidationResult:
    return {"valid": False, "status": "error", "errors": errors}


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Validate a DataFrame against a pandera schema."""
    try:
        schema.validate(df, lazy=True)
        return _ok()
    except SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return _failed(errors)


def validate_unique(df: pd.DataFrame, columns: list[str]) -> ValidationResult:
    """Check that specified columns form a unique key."""
    duplicates = df[df.duplicated(subset=columns, keep="first")]

    match len(duplicates):
        case 0:
            return _ok()
        case n:
            sample = duplicates[columns].astype(str).agg("/".join, axis=1).tolist()[:5]
            return _failed([f"Found {n} duplicate rows on columns {columns}. Sample: {sample}"])


def validate_single_root(df: pd.DataFrame) -> ValidationResult:
    """Exactly one row may have an empty manager id."""
    roots = df.loc[df["manager_id"] == "", "id"].tolist()

    match roots:
        case [_]:
            return _ok()
        case []:
            return _failed(["No root employee (empty manager id) found"])
        case many:
            return _failed([f"Found {len(many)} root employees: {many[:5]}"])


def validate_no_self_management(df: pd.DataFrame) -> ValidationResult:
    own = df.loc[df["manager_id"] == df["id"], "id"].tolist()
    if own:
        return _failed([f"Employees listed as their own manager: {own[:5]}"])
    return _ok()


def validate_referential_integrity(df: pd.DataFrame) -> ValidationResult:
    """Every non-empty manager id must be the id of some row."""
    managers = set(df.loc[df["manager_id"] != "", "manager_id"].unique())
    orphans = sorted(managers - set(df["id"].unique()))

    match len(orphans):
        case 0:
            return _ok()
        case n:
            return _failed([f"Found {n} unknown manager ids. Sample: {orphans[:5]}"])


def validate_trimmed(df: pd.DataFrame) -> ValidationResult:
    """Flag fields with surrounding whitespace. Reported as a warning only."""
    issues = []
    for col in df.columns:
        values = df[col].astype(str)
        padded = (values != values.str.strip()).sum()
        if padded > 0:
            issues.append(f"Column '{col}' has {padded} values with surrounding whitespace")

    match issues:
        case []:
            return _ok()
        case warnings:
            return {"valid": True, "status": "warning", "errors": warnings}
