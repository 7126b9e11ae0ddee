"""Command-line entry point: import an employee CSV and print the hierarchy."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from hierarchy.config import OUTPUT_FORMATS, ImportConfig, load_import_config
from hierarchy.org import HierarchyError, build_tree, flatten, generate_hierarchy_from_csv, load_records
from hierarchy.org.ingest import read_employee_csv
from hierarchy.utils.io import write_lines, write_output
from hierarchy.utils.types import ImportStatus
from hierarchy.validation import build_validation_report, run_import_checks

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def validate(path: Path, config: ImportConfig, strict: bool = False) -> bool:
    df = read_employee_csv(path, config.csv)
    summary = run_import_checks(df, strict=strict, strip=config.csv.strip_whitespace)
    console.out(build_validation_report(summary, path.name), end="", highlight=False)
    return summary["status"] != ImportStatus.FAILED


def export(path: Path, output: Path, config: ImportConfig) -> None:
    match config.output_format:
        case "text":
            write_lines(generate_hierarchy_from_csv(path, config), output)
        case fmt:
            tree = build_tree(load_records(path, config))
            write_output(flatten(tree), output, fmt)
    console.print(f"[green]Hierarchy written to {output}[/green]")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Rebuild and print a management hierarchy from CSV")
    parser.add_argument("path", type=Path, help="CSV of name, id, manager_id rows")
    parser.add_argument("--validate", action="store_true", help="Only run pre-flight checks")
    parser.add_argument("--strict", action="store_true", help="Treat validation warnings as failures")
    parser.add_argument("--output", "-o", type=Path, metavar="FILE", help="Write to FILE instead of stdout")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format for --output")
    parser.add_argument("--indent", help="Indentation unit per level (default: tab)")
    parser.add_argument("--header", action="store_true", default=None, help="CSV has a header row")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    overrides = {
        key: value
        for key, value in (
            ("output_format", args.format),
            ("indent", args.indent),
            ("has_header", args.header),
        )
        if value is not None
    }

    try:
        config = load_import_config(overrides)
        if args.validate:
            if not validate(args.path, config, strict=args.strict):
                sys.exit(1)
        elif args.output:
            export(args.path, args.output, config)
        else:
            for line in generate_hierarchy_from_csv(args.path, config):
                print(line)
    except (HierarchyError, FileNotFoundError, ValueError) as exc:
        err_console.print(f"ERROR: {exc}", style="red", markup=False, highlight=False)
        logger.debug("Import failed", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
