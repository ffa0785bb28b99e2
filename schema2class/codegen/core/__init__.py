"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    DuplicateFieldError,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .schema import (
    ColumnDef,
    RawColumn,
    SchemaError,
    TableSchema,
    UnknownTypePolicy,
    build_table_schema,
)
from .types import DbTypeCode, SemanticType, UnknownTypeError, map_type
from .naming import (
    is_valid_identifier,
    set_first_character,
    to_class_name,
    to_field_name,
)
from .config import (
    ConfigError,
    ConfigManager,
    GenerationOptions,
    RunConfig,
    load_config,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "DuplicateFieldError",
    "GenerationResult",
    "generate_code",
    # Schema system - core data structures
    "RawColumn",
    "ColumnDef",
    "TableSchema",
    "SchemaError",
    "UnknownTypePolicy",
    "build_table_schema",
    # Type mapping
    "DbTypeCode",
    "SemanticType",
    "UnknownTypeError",
    "map_type",
    # Naming utilities - language-agnostic
    "to_field_name",
    "to_class_name",
    "set_first_character",
    "is_valid_identifier",
    # Configuration system
    "GenerationOptions",
    "RunConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
