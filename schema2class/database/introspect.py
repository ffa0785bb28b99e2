"""
Schema introspection through the SQLAlchemy inspector.

Reports tables and columns in the order the database gives them, with
column types translated to JDBC type codes.
"""

from typing import List, Optional, Tuple

from sqlalchemy import inspect
from sqlalchemy import types as sqltypes
from sqlalchemy.exc import CompileError, SQLAlchemyError

from ..codegen.core.schema import RawColumn
from ..codegen.core.types import DbTypeCode
from ..logging_config import get_logger
from .connection import DatabaseHandle, DBConnectionError

logger = get_logger(__name__)

# Checked in order: subclasses before their bases (BigInteger < Integer,
# REAL/Double < Float < Numeric, Text < String)
_TYPE_CODES: List[Tuple[type, DbTypeCode]] = [
    (sqltypes.BigInteger, DbTypeCode.BIGINT),
    (sqltypes.SmallInteger, DbTypeCode.SMALLINT),
    (sqltypes.Integer, DbTypeCode.INTEGER),
    (sqltypes.Boolean, DbTypeCode.BOOLEAN),
    (sqltypes.REAL, DbTypeCode.REAL),
    (sqltypes.Double, DbTypeCode.DOUBLE),
    (sqltypes.Float, DbTypeCode.FLOAT),
    (sqltypes.DECIMAL, DbTypeCode.DECIMAL),
    (sqltypes.Numeric, DbTypeCode.NUMERIC),
    (sqltypes.Text, DbTypeCode.LONGVARCHAR),
    (sqltypes.CHAR, DbTypeCode.CHAR),
    (sqltypes.NCHAR, DbTypeCode.CHAR),
    (sqltypes.String, DbTypeCode.VARCHAR),
]


def db_type_for(column_type: sqltypes.TypeEngine) -> Tuple[int, str]:
    """
    Translate a SQLAlchemy column type into a JDBC type code and name.

    Types with no JDBC counterpart in the supported set come back as
    ``DbTypeCode.OTHER`` so the type mapper can report them by name.
    """
    type_name = _type_name(column_type)

    # Dialect-only type with no generic SQLAlchemy base of its own
    if type(column_type).__name__.upper() == "TINYINT":
        return DbTypeCode.TINYINT, type_name

    for sa_type, code in _TYPE_CODES:
        if isinstance(column_type, sa_type):
            return code, type_name

    return DbTypeCode.OTHER, type_name


def _type_name(column_type: sqltypes.TypeEngine) -> str:
    try:
        return str(column_type)
    except CompileError:
        return type(column_type).__name__.upper()


def list_tables(handle: DatabaseHandle, schema: Optional[str] = None) -> List[str]:
    """
    Return the table names of the connected database.

    Raises:
        DBConnectionError: If the metadata cannot be read
    """
    schema = schema or handle.schema_name
    try:
        names = inspect(handle.engine).get_table_names(schema=schema)
    except SQLAlchemyError as e:
        raise DBConnectionError(f"Exception getting the table names: {e}") from e

    logger.info("Found %d tables", len(names))
    return list(names)


def list_columns(
    handle: DatabaseHandle, table: str, schema: Optional[str] = None
) -> List[RawColumn]:
    """
    Return raw column descriptors for a table, in schema order.

    Raises:
        DBConnectionError: If the metadata cannot be read
    """
    schema = schema or handle.schema_name
    try:
        columns = inspect(handle.engine).get_columns(table, schema=schema)
    except SQLAlchemyError as e:
        raise DBConnectionError(f"Exception getting columns for {table}: {e}") from e

    raw_columns = []
    for column in columns:
        code, type_name = db_type_for(column["type"])
        raw_columns.append(RawColumn(column["name"], int(code), type_name))

    logger.debug("Table %s has %d columns", table, len(raw_columns))
    return raw_columns
