"""
Command-line interface for schema2class.

Connects to a database, generates one class per table and writes them
to the output directory.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    ConfigError,
    RegistryError,
    UnknownTypeError,
    get_language_info,
    list_supported_languages,
    load_config,
)
from .codegen.core.config import get_config_manager
from .database import DBConnectionError
from .logging_config import configure_logging, get_logger
from .pipeline import RunReport, run_generation
from .writer import OutputError

logger = get_logger(__name__)

# Initialize rich console
console = Console()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="schema2class",
        description="Generate one Java class per database table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  schema2class --url sqlite:///inventory.db --output-dir src/model --package app.model
  schema2class --config schema2class.json --fetch
  schema2class --url sqlite:///inventory.db --table user_accounts --dry-run
        """.strip(),
    )

    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument("--url", help="SQLAlchemy database URL")
    parser.add_argument(
        "--language", "-l", default="java", help="Target language (default: java)"
    )
    parser.add_argument(
        "--output-dir", "-o", metavar="DIR", help="Directory for generated files"
    )
    parser.add_argument(
        "--package", dest="package_name", metavar="NAME", help="Package name"
    )
    parser.add_argument(
        "--fetch",
        action="store_true",
        default=None,
        help="Generate ResultSet loading and query methods",
    )
    parser.add_argument(
        "--skip-unknown-types",
        action="store_true",
        help="Drop columns with unsupported types instead of aborting",
    )
    parser.add_argument(
        "--separator",
        metavar="CHAR",
        help="Separator used to split table names into class name words",
    )
    parser.add_argument(
        "--jobs", "-j", type=int, metavar="N", help="Tables generated in parallel"
    )
    parser.add_argument(
        "--table",
        "-t",
        action="append",
        dest="tables",
        metavar="NAME",
        help="Generate only this table (repeatable)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated code instead of writing files",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        Exit code (0 when every table was generated, 1 otherwise)
    """
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.list_languages:
        return _list_languages()

    try:
        config = load_config(_overrides(args), config_file=args.config)
        for warning in get_config_manager().validate_config(config):
            console.print(f"[yellow]⚠ {warning}[/yellow]")

        if not config.database:
            console.print("[red]✗ Error:[/red] no database given (use --url or --config)")
            return 1

        report = run_generation(
            config,
            language=args.language,
            tables=args.tables,
            write=not args.dry_run,
        )
    except UnknownTypeError as e:
        console.print(f"[red]✗ Generation aborted:[/red] {e}")
        return 1
    except (ConfigError, RegistryError, DBConnectionError, OutputError, ValueError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    if args.dry_run:
        _print_sources(report)

    _print_summary(report, config.output_dir, args.dry_run)
    return 0 if report.success else 1


def _overrides(args: argparse.Namespace) -> dict:
    """Configuration values given on the command line."""
    overrides = {
        "package_name": args.package_name,
        "include_query_accessors": args.fetch,
        "output_dir": args.output_dir,
        "name_separator": args.separator,
        "max_workers": args.jobs,
    }
    if args.skip_unknown_types:
        overrides["unknown_type_policy"] = "skip"
    if args.url:
        overrides["database"] = {"url": args.url}
    return overrides


def _list_languages() -> int:
    """List supported languages."""
    table = Table(title="Supported Languages", box=box.ROUNDED)
    table.add_column("Language", style="cyan")
    table.add_column("Extension", style="green")
    table.add_column("Aliases", style="dim")

    for language in list_supported_languages():
        info = get_language_info(language)
        table.add_row(info["name"], info["file_extension"], ", ".join(info["aliases"]))

    console.print(table)
    return 0


def _print_sources(report: RunReport):
    """Print generated code with syntax highlighting."""
    for outcome in report.succeeded:
        console.print(
            Panel(
                Syntax(outcome.code, "java", theme="monokai", line_numbers=False),
                title=outcome.file_name,
            )
        )


def _print_summary(report: RunReport, output_dir: str, dry_run: bool):
    """Print a per-table summary."""
    table = Table(title="Generation Summary", box=box.ROUNDED)
    table.add_column("Table", style="cyan")
    table.add_column("Class", style="green")
    table.add_column("Status")

    for outcome in report.outcomes:
        if outcome.success:
            status = "[green]✓[/green]"
            if outcome.warnings:
                status += f" [yellow]({len(outcome.warnings)} warnings)[/yellow]"
        else:
            status = f"[red]✗ {outcome.error}[/red]"
        table.add_row(outcome.table, outcome.class_name or "-", status)

    console.print(table)

    written = len(report.succeeded)
    if dry_run:
        console.print(f"[dim]{written} classes generated (dry run, nothing written)[/dim]")
    else:
        console.print(f"[green]✓[/green] {written} files written to {output_dir}")


if __name__ == "__main__":
    sys.exit(main())
