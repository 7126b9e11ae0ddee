import json

import pandas as pd

from hierarchy.utils.types import ImportStatus
from hierarchy.utils.validators import (
    validate_no_self_management,
    validate_referential_integrity,
    validate_single_root,
    validate_trimmed,
    validate_unique,
)
from hierarchy.validation import build_validation_report, run_import_checks


def frame(*rows: tuple[str, str, str]) -> pd.DataFrame:
    return pd.DataFrame(list(rows), columns=["name", "id", "manager_id"])


GOOD = frame(("jamie", "1", ""), ("alan", "2", "1"), ("steve", "5", "1"))


class TestValidators:
    def test_unique(self):
        assert validate_unique(GOOD, ["id"])["valid"]
        result = validate_unique(frame(("a", "1", ""), ("b", "1", "1")), ["id"])
        assert not result["valid"]
        assert "1 duplicate" in result["errors"][0]

    def test_single_root(self):
        assert validate_single_root(GOOD)["valid"]
        assert not validate_single_root(frame(("a", "1", ""), ("b", "2", "")))["valid"]
        assert not validate_single_root(frame(("a", "1", "2")))["valid"]

    def test_self_management(self):
        assert not validate_no_self_management(frame(("a", "1", ""), ("b", "2", "2")))["valid"]

    def test_referential_integrity(self):
        assert validate_referential_integrity(GOOD)["valid"]
        result = validate_referential_integrity(frame(("a", "1", ""), ("b", "2", "9")))
        assert result["errors"] == ["Found 1 unknown manager ids. Sample: ['9']"]

    def test_trimmed_is_a_warning(self):
        result = validate_trimmed(frame(("a ", "1", "")))
        assert result["valid"]
        assert result["status"] == "warning"


class TestRunImportChecks:
    def test_clean_export_passes(self):
        summary = run_import_checks(GOOD)
        assert summary["status"] == ImportStatus.PASSED
        assert summary["passed"] == summary["total"]

    def test_cycle_only_caught_by_resolve(self):
        df = frame(("jamie", "1", ""), ("martin", "3", "4"), ("alex", "4", "3"))
        summary = run_import_checks(df)
        failed = [c["check"] for c in summary["checks"] if not c["valid"]]
        assert summary["status"] == ImportStatus.FAILED
        assert failed == ["resolves"]

    def test_whitespace_warning_unless_strict(self):
        df = frame(("jamie", "1", ""), ("alan", "2", " 1"))
        assert run_import_checks(df)["status"] == ImportStatus.WARNING
        assert run_import_checks(df, strict=True)["status"] == ImportStatus.FAILED

    def test_unstripped_values_fail_when_stripping_is_off(self):
        df = frame(("jamie", "1", ""), ("alan", "2", " 1"))
        summary = run_import_checks(df, strip=False)
        failed = [c["check"] for c in summary["checks"] if not c["valid"]]
        assert summary["status"] == ImportStatus.FAILED
        assert "managers_exist" in failed

    def test_schema_failure_skips_row_checks(self):
        df = pd.DataFrame({"name": ["a"], "id": ["1"]})
        summary = run_import_checks(df)
        assert summary["status"] == ImportStatus.FAILED
        assert [c["check"] for c in summary["checks"]] == ["whitespace", "schema"]


class TestReports:
    def setup_method(self):
        self.summary = run_import_checks(frame(("jamie", "1", ""), ("b", "2", "9")))

    def test_json(self):
        report = json.loads(build_validation_report(self.summary, "company.csv", "json"))
        assert report["source"] == "company.csv"
        assert report["status"] == "failed"

    def test_summary(self):
        text = build_validation_report(self.summary, "company.csv", "summary")
        assert text.startswith("[company.csv]")
        assert "FAIL: managers_exist" in text

    def test_table(self):
        text = build_validation_report(self.summary, "company.csv")
        assert "managers_exist" in text
        assert "FAIL" in text
