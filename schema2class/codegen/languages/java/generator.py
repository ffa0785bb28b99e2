"""
Java code generator implementation.

Generates one Java value class per table, with optional methods that
load rows through a ResultSet.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from ....logging_config import get_logger
from ...core.config import GenerationOptions
from ...core.generator import CodeGenerator, GeneratorError
from ...core.schema import ColumnDef, TableSchema
from .naming import is_java_reserved, java_comment, java_string

logger = get_logger(__name__)

# Imports needed by the query accessor methods
QUERY_IMPORTS = ["java.sql.ResultSet", "java.util.ArrayList", "java.util.List"]

# java.lang types the generated class itself refers to
LANG_TYPES_USED = {"String", "System"}


class JavaGenerator(CodeGenerator):
    """Code generator for Java value classes."""

    def __init__(self, options: Optional[GenerationOptions] = None):
        """Initialize Java generator with generation options."""
        super().__init__(options)
        self.template_engine.add_filter("java_string", java_string)
        self.template_engine.add_filter("java_comment", java_comment)

    def get_template_directory(self) -> Path:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def render_source(self, schema: TableSchema, generated_at: datetime) -> str:
        """Render the Java class for one table."""
        context = self._build_context(schema, generated_at)
        logger.debug(
            "Rendering %s for table %s (query accessors: %s)",
            schema.class_name,
            schema.raw_table_name,
            self.options.include_query_accessors,
        )
        return self.render_template("class.java.j2", context)

    def _build_context(
        self, schema: TableSchema, generated_at: datetime
    ) -> Dict[str, Any]:
        """Build the template context for a table."""
        options = self.options
        with_queries = options.include_query_accessors

        return {
            "table_name": schema.raw_table_name,
            "class_name": schema.class_name,
            "generated_on": generated_at.strftime(options.timestamp_format),
            "package_name": options.package_name,
            "imports": QUERY_IMPORTS if with_queries else [],
            "implements_clause": (
                f" implements {options.fetch_interface}" if with_queries else ""
            ),
            "include_query_accessors": with_queries,
            "fetch_interface": options.fetch_interface,
            "data_access_class": options.data_access_class,
            "data_access_method": options.data_access_method,
            "fields": [
                self._field_data(column, index)
                for index, column in enumerate(schema.columns, start=1)
            ],
            "select_list": ", ".join(column.raw_name for column in schema.columns),
        }

    def _field_data(self, column: ColumnDef, index: int) -> Dict[str, Any]:
        """Template data for one column; ``index`` is its 1-based position."""
        semantic_type = column.semantic_type
        return {
            "name": column.field_name,
            "raw_name": column.raw_name,
            "java_type": semantic_type.java_type,
            "read_expression": semantic_type.read_expression("rs", index),
        }

    def validate_schema(self, schema: TableSchema) -> List[str]:
        """Validate a table for Java generation."""
        warnings = super().validate_schema(schema)

        shadowed = self._shadowed_type_names()
        if schema.class_name in shadowed:
            raise GeneratorError(
                f"Class name '{schema.class_name}' of table "
                f"'{schema.raw_table_name}' hides a type the generated code uses"
            )

        for column in schema.columns:
            if is_java_reserved(column.field_name):
                raise GeneratorError(
                    f"Column {schema.raw_table_name}.{column.raw_name} maps to "
                    f"the Java reserved word '{column.field_name}'"
                )

        if self.options.include_query_accessors and not schema.columns:
            raise GeneratorError(
                f"Cannot build a query for table '{schema.raw_table_name}' "
                f"without columns"
            )

        return warnings

    def _shadowed_type_names(self) -> Set[str]:
        """Simple type names a generated class must not take."""
        names = set(LANG_TYPES_USED)
        if self.options.include_query_accessors:
            names.update(name.rsplit(".", 1)[-1] for name in QUERY_IMPORTS)
            names.add(self.options.data_access_class)
            names.add(self.options.fetch_interface)
        return names


def emit_source(
    schema: TableSchema, options: GenerationOptions, generated_at: datetime
) -> str:
    """
    Generate the Java source for one table.

    Args:
        schema: Table to generate
        options: Generation options
        generated_at: Timestamp written into the file header

    Returns:
        Java source text
    """
    return JavaGenerator(options).emit(schema, generated_at)
