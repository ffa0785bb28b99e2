"""
schema2class code generation module.

Generates one source class per database table from its column layout.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_supported_languages,
)
from .core.generator import (
    CodeGenerator,
    DuplicateFieldError,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .core.schema import (
    ColumnDef,
    RawColumn,
    SchemaError,
    TableSchema,
    UnknownTypePolicy,
    build_table_schema,
)
from .core.types import DbTypeCode, SemanticType, UnknownTypeError, map_type
from .core.naming import to_class_name, to_field_name
from .core.config import ConfigError, GenerationOptions, RunConfig, load_config
from .languages.java import JavaGenerator, emit_source

__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GeneratorError",
    "DuplicateFieldError",
    "GenerationResult",
    "generate_code",
    "RawColumn",
    "ColumnDef",
    "TableSchema",
    "SchemaError",
    "UnknownTypePolicy",
    "build_table_schema",
    "DbTypeCode",
    "SemanticType",
    "UnknownTypeError",
    "map_type",
    "to_field_name",
    "to_class_name",
    "GenerationOptions",
    "RunConfig",
    "ConfigError",
    "load_config",
    "JavaGenerator",
    "emit_source",
    "get_generator",
    "get_language_info",
    "list_supported_languages",
]
