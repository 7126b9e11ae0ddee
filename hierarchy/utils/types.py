"""Shared type definitions."""

from typing import TypeAlias
from enum import StrEnum

ValidationResult: TypeAlias = dict[str, bool | str | list[str]]
CheckSummary: TypeAlias = dict[str, str | int | list[dict]]


class ImportStatus(StrEnum):
    PASSED = "passed"
    WARNING = "warning"
    FAILED = "failed"


def status_color(status: ImportStatus | str) -> str:
    match status:
        case ImportStatus.PASSED:
            return "green"
        case ImportStatus.WARNING:
            return "yellow"
        case ImportStatus.FAILED:
            return "red"
        case _:
            return "white"
