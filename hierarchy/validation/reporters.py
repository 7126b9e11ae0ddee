"""Validation result reporting and formatting.

Converts pre-flight check summaries into a rich table, JSON, or a short
plain-text summary for the CLI.
"""

from typing import TypeAlias
import json
from datetime import datetime

from rich.console import Console
from rich.table import Table

from hierarchy.utils.types import CheckSummary, status_color

ReportFormat: TypeAlias = str  # "table" | "json" | "summary"


def build_validation_report(
    summary: CheckSummary,
    source: str,
    output_format: ReportFormat = "table",
) -> str:
    match output_format:
        case "json":
            return _to_json(source, summary)
        case "summary":
            return _to_summary(source, summary)
        case "table":
            return _to_table(source, summary)
        case other:
            raise ValueError(f"Unsupported report format: {other}")


def _to_json(source: str, summary: CheckSummary) -> str:
    report = {
        "source": source,
        "timestamp": datetime.now().isoformat(),
        "status": str(summary["status"]),
        "total": summary["total"],
        "passed": summary["passed"],
        "checks": summary["checks"],
    }
    return json.dumps(report, indent=2)


def _to_summary(source: str, summary: CheckSummary) -> str:
    lines = [f"[{source}] {summary['passed']}/{summary['total']} passed ({summary['status']})"]
    for check in summary["checks"]:
        if check["status"] == "ok":
            continue
        label = "FAIL" if not check["valid"] else "WARN"
        for error in check["errors"]:
            lines.append(f"  {label}: {check['check']}: {error}")
    return "\n".join(lines)


def _to_table(source: str, summary: CheckSummary) -> str:
    color = status_color(summary["status"])
    table = Table(title=f"Validation: {source} [{color}]({summary['status']})[/{color}]")
    table.add_column("Check", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Details")

    for check in summary["checks"]:
        match (check["valid"], check["status"]):
            case (True, "ok"):
                status = "[green]PASS[/green]"
            case (True, _):
                status = "[yellow]WARN[/yellow]"
            case _:
                status = "[red]FAIL[/red]"
        table.add_row(check["check"], status, "\n".join(check["errors"]) or "OK")

    buf = Console(file=None, force_terminal=False, width=120)
    with buf.capture() as capture:
        buf.print(table)
    return capture.get()
