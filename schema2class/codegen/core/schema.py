"""
Core schema representation for code generation.

Converts raw table/column introspection results into a normalized
internal format that generators can work with consistently.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Tuple

from ...logging_config import get_logger
from .generator import GeneratorError
from .naming import is_valid_identifier, to_class_name, to_field_name
from .types import SemanticType, UnknownTypeError, map_type

logger = get_logger(__name__)


class SchemaError(GeneratorError):
    """Raised when a table or column cannot be turned into a valid name."""

    pass


class UnknownTypePolicy(Enum):
    """What to do with a column whose database type has no mapping."""

    ABORT = "abort"  # Propagate UnknownTypeError and stop the run
    SKIP = "skip"  # Drop the column with a warning


@dataclass(frozen=True)
class RawColumn:
    """Column descriptor exactly as reported by introspection."""

    name: str
    db_type_code: int
    db_type_name: str


@dataclass(frozen=True)
class ColumnDef:
    """A single column resolved for code generation."""

    raw_name: str  # Column name as reported by the schema
    semantic_type: SemanticType
    field_name: str  # Derived once from raw_name

    @classmethod
    def from_raw(cls, raw: RawColumn) -> "ColumnDef":
        """Resolve type and field name for a raw column."""
        return cls(
            raw_name=raw.name,
            semantic_type=map_type(raw.db_type_code, raw.db_type_name),
            field_name=to_field_name(raw.name),
        )


@dataclass(frozen=True)
class TableSchema:
    """Represents one table and the class generated for it."""

    raw_table_name: str
    class_name: str
    columns: Tuple[ColumnDef, ...] = field(default_factory=tuple)

    @property
    def field_names(self) -> list[str]:
        """Field names in column order."""
        return [column.field_name for column in self.columns]


def build_table_schema(
    raw_table_name: str,
    raw_columns: Iterable[RawColumn],
    policy: UnknownTypePolicy = UnknownTypePolicy.ABORT,
    separator: str = "_",
) -> TableSchema:
    """
    Assemble a TableSchema from raw introspection results.

    Args:
        raw_table_name: Table name as reported by the schema
        raw_columns: Column descriptors in schema-reported order
        policy: Handling for columns with an unmapped database type
        separator: Separator used when deriving the class name

    Returns:
        Populated TableSchema

    Raises:
        UnknownTypeError: For an unmapped type under UnknownTypePolicy.ABORT
        SchemaError: If a derived class or field name is empty or invalid
    """
    class_name = to_class_name(raw_table_name, separator)
    if not is_valid_identifier(class_name):
        raise SchemaError(
            f"Table '{raw_table_name}' does not yield a valid class name "
            f"(got '{class_name}')"
        )

    columns = []
    for raw in raw_columns:
        try:
            column = ColumnDef.from_raw(raw)
        except UnknownTypeError:
            if policy is UnknownTypePolicy.SKIP:
                logger.warning(
                    "Skipping column %s.%s: unknown type %s",
                    raw_table_name,
                    raw.name,
                    raw.db_type_name,
                )
                continue
            raise UnknownTypeError(
                raw.db_type_name, table=raw_table_name, column=raw.name
            ) from None

        if not is_valid_identifier(column.field_name):
            raise SchemaError(
                f"Column '{raw_table_name}.{raw.name}' does not yield a valid "
                f"field name (got '{column.field_name}')"
            )
        columns.append(column)

    logger.debug(
        "Built schema for %s -> %s with %d columns",
        raw_table_name,
        class_name,
        len(columns),
    )
    return TableSchema(
        raw_table_name=raw_table_name, class_name=class_name, columns=tuple(columns)
    )
