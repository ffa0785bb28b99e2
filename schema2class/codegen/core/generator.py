"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .config import GenerationOptions
from .templates import TemplateEngine, TemplateError, create_template_engine

if TYPE_CHECKING:
    from .schema import TableSchema


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class DuplicateFieldError(GeneratorError):
    """Raised when two columns of a table normalize to the same field name."""

    def __init__(self, table: str, field_name: str, columns: List[str]):
        self.table = table
        self.field_name = field_name
        self.columns = columns
        super().__init__(
            f"Columns {', '.join(columns)} of table '{table}' all map to "
            f"field '{field_name}'"
        )


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, options: Optional[GenerationOptions] = None):
        """Initialize generator with generation options."""
        self.options = options or GenerationOptions()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def render_source(self, schema: "TableSchema", generated_at: datetime) -> str:
        """Render the raw (unformatted) source for one table."""
        pass

    def emit(self, schema: "TableSchema", generated_at: datetime) -> str:
        """
        Generate the source file for one table.

        The same schema, options and timestamp always produce the same text.

        Args:
            schema: Table to generate a class for
            generated_at: Timestamp written into the file header

        Returns:
            Generated source text

        Raises:
            DuplicateFieldError: If two columns share a field name
            GeneratorError: If the table cannot be generated
        """
        code, _ = self.emit_with_warnings(schema, generated_at)
        return code

    def emit_with_warnings(
        self, schema: "TableSchema", generated_at: datetime
    ) -> Tuple[str, List[str]]:
        """Validate once, then render; returns the source and the warnings."""
        warnings = self.validate_schema(schema)
        return self.format_code(self.render_source(schema, generated_at)), warnings

    def validate_schema(self, schema: "TableSchema") -> List[str]:
        """
        Check a table before generation.

        Language generators should override this to add language-specific
        checks, calling the base implementation first.

        Raises:
            DuplicateFieldError: If two columns share a field name

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        counts = Counter(schema.field_names)
        for field_name, count in counts.items():
            if count > 1:
                columns = [
                    column.raw_name
                    for column in schema.columns
                    if column.field_name == field_name
                ]
                raise DuplicateFieldError(schema.raw_table_name, field_name, columns)

        if not schema.columns:
            warnings.append(f"Table '{schema.raw_table_name}' has no columns")

        return warnings

    def output_file_name(self, schema: "TableSchema") -> str:
        """File name the generated source should be written to."""
        return f"{schema.class_name}{self.file_extension}"

    def format_code(self, code: str) -> str:
        """
        Normalize generated code: strip trailing whitespace, collapse runs
        of blank lines and apply the configured line ending.
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        while formatted_lines and not formatted_lines[-1]:
            formatted_lines.pop()

        return self.options.line_ending.join(formatted_lines) + self.options.line_ending

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        file_name: str = "",
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            file_name: File name the code belongs in
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.file_name = file_name
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, schema: "TableSchema", generated_at: datetime
) -> GenerationResult:
    """
    Generate code for one table with error handling.

    Generation errors are captured in the result rather than raised so
    a driver can carry on with other tables.

    Args:
        generator: Code generator instance
        schema: Table to generate code for
        generated_at: Timestamp written into the file header

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        code, warnings = generator.emit_with_warnings(schema, generated_at)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "table": schema.raw_table_name,
            "class_name": schema.class_name,
            "column_count": len(schema.columns),
            "query_accessors": generator.options.include_query_accessors,
        }

        return GenerationResult(
            code, generator.output_file_name(schema), warnings, metadata
        )

    except (GeneratorError, TemplateError) as e:
        return GenerationResult.error(
            f"Code generation failed for {schema.raw_table_name}: {e}", exception=e
        )
