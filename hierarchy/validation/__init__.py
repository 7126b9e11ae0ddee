"""Pre-flight validation of employee exports before import."""

from hierarchy.validation.checks import run_import_checks
from hierarchy.validation.reporters import build_validation_report
