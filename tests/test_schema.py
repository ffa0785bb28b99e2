"""Tests for table schema assembly."""

import dataclasses

import pytest

from schema2class.codegen.core.schema import (
    ColumnDef,
    RawColumn,
    SchemaError,
    UnknownTypePolicy,
    build_table_schema,
)
from schema2class.codegen.core.types import DbTypeCode, SemanticType, UnknownTypeError


def test_build_user_accounts(user_accounts):
    """Class name, field names and types are derived in column order."""
    assert user_accounts.raw_table_name == "user_accounts"
    assert user_accounts.class_name == "UserAccounts"
    assert [c.raw_name for c in user_accounts.columns] == [
        "Id",
        "user_name",
        "Created_At",
    ]
    assert user_accounts.field_names == ["id", "userName", "createdAt"]
    assert [c.semantic_type for c in user_accounts.columns] == [
        SemanticType.INT32,
        SemanticType.TEXT,
        SemanticType.DOUBLE,
    ]


def test_schema_is_immutable(user_accounts):
    with pytest.raises(dataclasses.FrozenInstanceError):
        user_accounts.class_name = "Other"
    with pytest.raises(dataclasses.FrozenInstanceError):
        user_accounts.columns[0].field_name = "other"


def test_column_def_from_raw():
    column = ColumnDef.from_raw(RawColumn("NDB_No", DbTypeCode.BIGINT, "BIGINT"))
    assert column == ColumnDef("NDB_No", SemanticType.INT64, "ndbNo")


def test_unknown_type_aborts_by_default():
    """The error names table, column and database type."""
    columns = [
        RawColumn("id", DbTypeCode.INTEGER, "INTEGER"),
        RawColumn("shipped_on", 91, "DATE"),
    ]
    with pytest.raises(UnknownTypeError) as excinfo:
        build_table_schema("orders", columns)

    message = str(excinfo.value)
    assert "orders" in message
    assert "shipped_on" in message
    assert "DATE" in message


def test_unknown_type_skip_policy_drops_column():
    columns = [
        RawColumn("id", DbTypeCode.INTEGER, "INTEGER"),
        RawColumn("shipped_on", 91, "DATE"),
        RawColumn("total", DbTypeCode.DECIMAL, "DECIMAL"),
    ]
    schema = build_table_schema("orders", columns, policy=UnknownTypePolicy.SKIP)
    assert schema.field_names == ["id", "total"]


def test_empty_field_name_is_rejected():
    with pytest.raises(SchemaError):
        build_table_schema("orders", [RawColumn("__", DbTypeCode.INTEGER, "INTEGER")])


def test_field_name_starting_with_digit_is_rejected():
    with pytest.raises(SchemaError):
        build_table_schema("orders", [RawColumn("2nd", DbTypeCode.INTEGER, "INTEGER")])


def test_invalid_class_name_is_rejected():
    with pytest.raises(SchemaError):
        build_table_schema("___", [RawColumn("id", DbTypeCode.INTEGER, "INTEGER")])
    with pytest.raises(SchemaError):
        build_table_schema("2019_sales", [])


def test_custom_separator():
    schema = build_table_schema("order-lines", [], separator="-")
    assert schema.class_name == "OrderLines"
    assert schema.columns == ()
