"""Shared utilities for the hierarchy importer."""

from hierarchy.utils.io import write_lines, write_output
from hierarchy.utils.validators import validate_dataframe
from hierarchy.utils.types import ImportStatus, ValidationResult
