"""
schema2class - generate one source class per database table.
"""

from .codegen import (
    GenerationOptions,
    TableSchema,
    build_table_schema,
    emit_source,
    to_class_name,
    to_field_name,
)
from .pipeline import RunReport, TableOutcome, generate_tables, run_generation

__version__ = "0.1.0"

__all__ = [
    "GenerationOptions",
    "TableSchema",
    "build_table_schema",
    "emit_source",
    "to_class_name",
    "to_field_name",
    "RunReport",
    "TableOutcome",
    "generate_tables",
    "run_generation",
]
