"""
Generation driver.

Feeds raw table and column descriptors through schema assembly and the
code generator, one table at a time, and optionally writes the results.
A failure in one table is recorded and the run moves on; an unknown
column type aborts the whole run unless the skip policy is in effect.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from .codegen.core.config import RunConfig
from .codegen.core.generator import CodeGenerator, generate_code
from .codegen.core.naming import to_class_name
from .codegen.core.schema import (
    RawColumn,
    SchemaError,
    UnknownTypePolicy,
    build_table_schema,
)
from .codegen.registry import get_generator
from .database import DatabaseHandle, DBConfig, DBConnectionError
from .database import list_columns, list_tables
from .logging_config import get_logger
from .writer import OutputError, ensure_output_dir, write_source

logger = get_logger(__name__)

ColumnSource = Callable[[str], Sequence[RawColumn]]


@dataclass
class TableOutcome:
    """Result of generating one table."""

    table: str
    class_name: str = ""
    file_name: str = ""
    code: str = ""
    path: Optional[Path] = None
    warnings: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class RunReport:
    """Outcomes of a generation run, in input table order."""

    outcomes: List[TableOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> List[TableOutcome]:
        return [outcome for outcome in self.outcomes if outcome.success]

    @property
    def failed(self) -> List[TableOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.success]

    @property
    def success(self) -> bool:
        return not self.failed


def generate_table(
    table: str,
    fetch_columns: ColumnSource,
    generator: CodeGenerator,
    generated_at: datetime,
    output_dir: Optional[Path] = None,
    policy: UnknownTypePolicy = UnknownTypePolicy.ABORT,
    separator: str = "_",
) -> TableOutcome:
    """
    Generate (and optionally write) the class for one table.

    Raises:
        UnknownTypeError: For an unmapped column type under the abort policy
    """
    outcome = TableOutcome(table=table)

    try:
        raw_columns = fetch_columns(table)
        schema = build_table_schema(table, raw_columns, policy, separator)
    except (DBConnectionError, SchemaError) as e:
        logger.error("Skipping table %s: %s", table, e)
        outcome.error = str(e)
        return outcome

    outcome.class_name = schema.class_name
    result = generate_code(generator, schema, generated_at)
    if not result.success:
        logger.error("Skipping table %s: %s", table, result.error_message)
        outcome.error = result.error_message
        return outcome

    outcome.code = result.code
    outcome.file_name = result.file_name
    outcome.warnings = result.warnings
    for warning in result.warnings:
        logger.warning(warning)

    if output_dir is not None:
        try:
            outcome.path = write_source(output_dir, result.file_name, result.code)
        except OutputError as e:
            logger.error("Skipping table %s: %s", table, e)
            outcome.error = str(e)

    return outcome


def generate_tables(
    table_names: Sequence[str],
    fetch_columns: ColumnSource,
    generator: CodeGenerator,
    generated_at: Optional[datetime] = None,
    output_dir: Optional[Path] = None,
    policy: UnknownTypePolicy = UnknownTypePolicy.ABORT,
    separator: str = "_",
    max_workers: int = 1,
) -> RunReport:
    """
    Generate classes for a list of tables.

    Args:
        table_names: Tables to generate, in order
        fetch_columns: Returns the raw columns of a table
        generator: Code generator to use
        generated_at: Timestamp for file headers (defaults to now)
        output_dir: Directory to write files to; None keeps results in memory
        policy: Handling for columns with an unmapped database type
        separator: Separator used when deriving class names
        max_workers: Tables processed concurrently

    Returns:
        RunReport with one outcome per table, in input order

    Raises:
        UnknownTypeError: For an unmapped column type under the abort policy
    """
    generated_at = generated_at or datetime.now()

    def run_one(table: str) -> TableOutcome:
        return generate_table(
            table, fetch_columns, generator, generated_at, output_dir, policy, separator
        )

    outcomes = _class_name_clashes(table_names, separator)
    pending = [i for i, outcome in enumerate(outcomes) if outcome is None]

    if max_workers <= 1 or len(pending) <= 1:
        for i in pending:
            outcomes[i] = run_one(table_names[i])
        return RunReport(outcomes)

    executor = ThreadPoolExecutor(max_workers=max_workers)
    try:
        futures = {i: executor.submit(run_one, table_names[i]) for i in pending}
        for i, future in futures.items():
            outcomes[i] = future.result()
    except BaseException:
        executor.shutdown(wait=True, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    return RunReport(outcomes)


def _class_name_clashes(
    table_names: Sequence[str], separator: str
) -> List[Optional[TableOutcome]]:
    """
    Fail every table whose class name an earlier table already claimed.

    Class names compare case-insensitively, like the file names they become.
    Returns one entry per table: None for tables to generate.
    """
    claimed: Dict[str, str] = {}
    outcomes: List[Optional[TableOutcome]] = []

    for table in table_names:
        class_name = to_class_name(table, separator)
        key = class_name.lower()
        owner = claimed.get(key)
        if owner is None:
            if key:
                claimed[key] = table
            outcomes.append(None)
            continue

        error = (
            f"Table '{table}' maps to class {class_name}, already generated "
            f"for table '{owner}'"
        )
        logger.error("Skipping table %s: %s", table, error)
        outcomes.append(TableOutcome(table=table, class_name=class_name, error=error))

    return outcomes


def run_generation(
    config: RunConfig,
    language: str = "java",
    tables: Optional[Sequence[str]] = None,
    write: bool = True,
    generated_at: Optional[datetime] = None,
) -> RunReport:
    """
    Run a full generation against the configured database.

    Args:
        config: Run configuration
        language: Target language
        tables: Restrict generation to these tables (default: all)
        write: Write files to ``config.output_dir``
        generated_at: Timestamp for file headers (defaults to now)

    Raises:
        DBConnectionError: If the database cannot be reached
        OutputError: If the output directory cannot be created
        UnknownTypeError: For an unmapped column type under the abort policy
        ValueError: If ``config.unknown_type_policy`` is not a known policy
    """
    generator = get_generator(language, config.options)
    policy = UnknownTypePolicy(config.unknown_type_policy)
    output_dir = ensure_output_dir(config.output_dir) if write else None

    with DatabaseHandle(DBConfig.from_dict(config.database)) as handle:
        # Unknown requested tables fail individually at column lookup
        selected = list(tables) if tables else list_tables(handle)
        logger.info("Generating %d tables", len(selected))

        return generate_tables(
            selected,
            lambda table: list_columns(handle, table),
            generator,
            generated_at=generated_at,
            output_dir=output_dir,
            policy=policy,
            separator=config.name_separator,
            max_workers=config.max_workers,
        )
