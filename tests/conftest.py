"""Shared fixtures for schema2class tests."""

from datetime import datetime
from pathlib import Path

import pytest
from sqlalchemy import create_engine, text

from schema2class.codegen import (
    DbTypeCode,
    GenerationOptions,
    RawColumn,
    build_table_schema,
)


@pytest.fixture
def generated_at() -> datetime:
    return datetime(2026, 10, 17, 9, 30, 0)


@pytest.fixture
def user_accounts_columns():
    return [
        RawColumn("Id", DbTypeCode.INTEGER, "INTEGER"),
        RawColumn("user_name", DbTypeCode.VARCHAR, "VARCHAR"),
        RawColumn("Created_At", DbTypeCode.DECIMAL, "DECIMAL"),
    ]


@pytest.fixture
def user_accounts(user_accounts_columns):
    return build_table_schema("user_accounts", user_accounts_columns)


@pytest.fixture
def plain_options() -> GenerationOptions:
    return GenerationOptions(package_name="app", include_query_accessors=False)


@pytest.fixture
def fetch_options() -> GenerationOptions:
    return GenerationOptions(package_name="app", include_query_accessors=True)


@pytest.fixture
def sqlite_db(tmp_path: Path) -> Path:
    """A small SQLite database with two tables."""
    path = tmp_path / "inventory.db"
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as conn:
        conn.execute(
            text(
                """
                CREATE TABLE user_accounts (
                    Id INTEGER,
                    user_name VARCHAR(40),
                    Created_At DECIMAL(12, 2)
                )
                """
            )
        )
        conn.execute(
            text(
                """
                CREATE TABLE NDB_FOOD (
                    NDB_No BIGINT,
                    FLDNum_Can SMALLINT,
                    Std_dev NUMERIC,
                    Grade CHAR(1),
                    Notes TEXT,
                    Ratio REAL,
                    Weight FLOAT,
                    Active BOOLEAN
                )
                """
            )
        )
    engine.dispose()
    return path
