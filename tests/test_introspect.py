"""Tests for database connection handling and schema introspection."""

import pytest
from sqlalchemy import types as sqltypes
from sqlalchemy.dialects import mysql

from schema2class.codegen.core.types import DbTypeCode, SemanticType, map_type
from schema2class.database import (
    DatabaseHandle,
    DBConfig,
    DBConnectionError,
    db_type_for,
    list_columns,
    list_tables,
)


@pytest.fixture
def handle(sqlite_db):
    with DatabaseHandle(DBConfig(url=f"sqlite:///{sqlite_db}")) as handle:
        yield handle


def test_list_tables(handle):
    assert list_tables(handle) == ["NDB_FOOD", "user_accounts"]


def test_list_columns_in_schema_order(handle):
    columns = list_columns(handle, "user_accounts")

    assert [column.name for column in columns] == ["Id", "user_name", "Created_At"]
    assert [column.db_type_code for column in columns] == [
        DbTypeCode.INTEGER,
        DbTypeCode.VARCHAR,
        DbTypeCode.DECIMAL,
    ]
    assert columns[1].db_type_name == "VARCHAR(40)"


def test_list_columns_type_codes(handle):
    codes = {
        column.name: column.db_type_code for column in list_columns(handle, "NDB_FOOD")
    }
    assert codes == {
        "NDB_No": DbTypeCode.BIGINT,
        "FLDNum_Can": DbTypeCode.SMALLINT,
        "Std_dev": DbTypeCode.NUMERIC,
        "Grade": DbTypeCode.CHAR,
        "Notes": DbTypeCode.LONGVARCHAR,
        "Ratio": DbTypeCode.REAL,
        "Weight": DbTypeCode.FLOAT,
        "Active": DbTypeCode.BOOLEAN,
    }


def test_codes_are_plain_ints(handle):
    column = list_columns(handle, "user_accounts")[0]
    assert type(column.db_type_code) is int


def test_missing_table(handle):
    with pytest.raises(DBConnectionError):
        list_columns(handle, "no_such_table")


@pytest.mark.parametrize(
    "column_type, code",
    [
        (sqltypes.BIGINT(), DbTypeCode.BIGINT),
        (sqltypes.Integer(), DbTypeCode.INTEGER),
        (sqltypes.SMALLINT(), DbTypeCode.SMALLINT),
        (mysql.TINYINT(), DbTypeCode.TINYINT),
        (sqltypes.Boolean(), DbTypeCode.BOOLEAN),
        (sqltypes.REAL(), DbTypeCode.REAL),
        (sqltypes.DOUBLE(), DbTypeCode.DOUBLE),
        (sqltypes.Float(), DbTypeCode.FLOAT),
        (sqltypes.DECIMAL(10, 2), DbTypeCode.DECIMAL),
        (sqltypes.Numeric(), DbTypeCode.NUMERIC),
        (sqltypes.Text(), DbTypeCode.LONGVARCHAR),
        (sqltypes.CHAR(1), DbTypeCode.CHAR),
        (sqltypes.NCHAR(1), DbTypeCode.CHAR),
        (sqltypes.VARCHAR(20), DbTypeCode.VARCHAR),
        (sqltypes.Unicode(20), DbTypeCode.VARCHAR),
    ],
)
def test_db_type_for(column_type, code):
    assert db_type_for(column_type)[0] == code


@pytest.mark.parametrize(
    "column_type", [sqltypes.Date(), sqltypes.DateTime(), sqltypes.LargeBinary()]
)
def test_unsupported_types_map_to_other(column_type):
    code, name = db_type_for(column_type)
    assert code == DbTypeCode.OTHER
    assert name


def test_reported_codes_feed_type_mapping():
    assert map_type(*db_type_for(sqltypes.CHAR(1))) is SemanticType.CHAR
    assert map_type(*db_type_for(sqltypes.REAL())) is SemanticType.DOUBLE


def test_handle_lifecycle(sqlite_db):
    handle = DatabaseHandle(DBConfig(db_type="sqlite", database=str(sqlite_db)))
    assert not handle.is_connected
    with pytest.raises(DBConnectionError, match="not connected"):
        handle.engine

    handle.connect()
    assert handle.is_connected
    assert handle.connect() is handle

    handle.close()
    handle.close()
    assert not handle.is_connected


def test_connect_failure_after_retries(tmp_path):
    # A directory cannot be opened as a SQLite database
    config = DBConfig(url=f"sqlite:///{tmp_path}")
    handle = DatabaseHandle(config, retries=2, retry_delay=0)

    with pytest.raises(DBConnectionError, match="after 2 attempt"):
        handle.connect()
    assert not handle.is_connected


def test_connect_unknown_dialect():
    handle = DatabaseHandle(DBConfig(url="nosuchdb://user@host/db"), retry_delay=0)
    with pytest.raises(DBConnectionError):
        handle.connect()


def test_url_from_parts():
    config = DBConfig(
        db_type="postgres",
        host="db.local",
        port=5432,
        database="inventory",
        username="reader",
        password="secret",
    )
    url = config.sqlalchemy_url()

    assert url.drivername == "postgresql+psycopg2"
    assert url.host == "db.local"
    assert url.port == 5432
    assert url.database == "inventory"
    assert url.username == "reader"


def test_url_wins_over_parts():
    config = DBConfig(db_type="postgres", url="sqlite:///x.db")
    assert config.sqlalchemy_url().drivername == "sqlite"


def test_url_errors():
    with pytest.raises(DBConnectionError, match="SQLite requires"):
        DBConfig(db_type="sqlite").sqlalchemy_url()
    with pytest.raises(DBConnectionError, match="username is required"):
        DBConfig(db_type="mysql", database="inventory").sqlalchemy_url()
    with pytest.raises(DBConnectionError, match="Invalid database URL"):
        DBConfig(url="not a url").sqlalchemy_url()


def test_from_dict():
    config = DBConfig.from_dict(
        {"url": "sqlite:///x.db", "schema_name": "main", "connect_retries": "3"}
    )
    assert config.url == "sqlite:///x.db"
    assert config.schema_name == "main"
    assert config.connect_retries == 3
    assert config.db_type == "sqlite"
