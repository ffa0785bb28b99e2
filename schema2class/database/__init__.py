"""
Database collaborators: connection settings, connection lifecycle and
schema introspection.
"""

from .connection import DatabaseHandle, DBConnectionError
from .config import DBConfig
from .introspect import db_type_for, list_columns, list_tables

__all__ = [
    "DBConfig",
    "DatabaseHandle",
    "DBConnectionError",
    "db_type_for",
    "list_columns",
    "list_tables",
]
