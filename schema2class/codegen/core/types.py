"""
Database type mapping for code generation.

Translates JDBC type codes reported by schema introspection into the
fixed set of semantic field types the generators understand.
"""

from enum import Enum, IntEnum
from typing import Dict, List

from .generator import GeneratorError


class UnknownTypeError(GeneratorError):
    """Raised when a database type has no semantic type mapping."""

    def __init__(self, db_type_name: str, table: str = "", column: str = ""):
        self.db_type_name = db_type_name
        self.table = table
        self.column = column

        location = ""
        if table and column:
            location = f" (column {table}.{column})"
        elif column:
            location = f" (column {column})"
        super().__init__(f"Unknown type: {db_type_name}{location}")


class DbTypeCode(IntEnum):
    """JDBC ``java.sql.Types`` codes understood by the type mapper."""

    LONGVARCHAR = -1
    TINYINT = -6
    BIGINT = -5
    CHAR = 1
    NUMERIC = 2
    DECIMAL = 3
    INTEGER = 4
    SMALLINT = 5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    VARCHAR = 12
    BOOLEAN = 16
    # Not mappable; introspection uses it for anything it cannot classify
    OTHER = 1111


class SemanticType(Enum):
    """Value kinds a generated field can hold."""

    INT64 = ("long", "Long", "")
    BYTE = ("byte", "Byte", "")
    CHAR = ("char", "String", ".charAt(0)")
    DOUBLE = ("double", "Double", "")
    FLOAT = ("float", "Float", "")
    INT32 = ("int", "Int", "")
    INT16 = ("short", "Short", "")
    TEXT = ("String", "String", "")

    def __init__(self, java_type: str, accessor: str, read_suffix: str):
        self.java_type = java_type  # Field declaration type
        self.accessor = accessor  # ResultSet.get<accessor>(index)
        self.read_suffix = read_suffix  # Appended to the accessor call

    def read_expression(self, cursor: str, index: int) -> str:
        """Expression reading column ``index`` (1-based) from ``cursor``."""
        return f"{cursor}.get{self.accessor}({index}){self.read_suffix}"


_TYPE_MAP: Dict[int, SemanticType] = {
    DbTypeCode.BIGINT: SemanticType.INT64,
    DbTypeCode.BOOLEAN: SemanticType.BYTE,
    DbTypeCode.CHAR: SemanticType.CHAR,
    DbTypeCode.NUMERIC: SemanticType.DOUBLE,
    DbTypeCode.DECIMAL: SemanticType.DOUBLE,
    DbTypeCode.DOUBLE: SemanticType.DOUBLE,
    DbTypeCode.REAL: SemanticType.DOUBLE,
    DbTypeCode.FLOAT: SemanticType.FLOAT,
    DbTypeCode.INTEGER: SemanticType.INT32,
    DbTypeCode.TINYINT: SemanticType.INT16,
    DbTypeCode.SMALLINT: SemanticType.INT16,
    DbTypeCode.VARCHAR: SemanticType.TEXT,
    DbTypeCode.LONGVARCHAR: SemanticType.TEXT,
}


def map_type(db_type_code: int, db_type_name: str) -> SemanticType:
    """
    Map a database type code to its semantic type.

    Args:
        db_type_code: JDBC type code reported by the schema
        db_type_name: Database type name, used for error reporting

    Returns:
        The semantic type for the code

    Raises:
        UnknownTypeError: If the code is outside the supported set
    """
    try:
        return _TYPE_MAP[db_type_code]
    except KeyError:
        raise UnknownTypeError(db_type_name) from None


def supported_type_codes() -> List[DbTypeCode]:
    """Type codes that map to a semantic type."""
    return sorted(_TYPE_MAP, key=int)
