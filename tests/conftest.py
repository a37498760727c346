"""
Pytest configuration and fixtures for SchemaForge tests.
"""
import pytest

from schemaforge.models import ColumnDescriptor, SpreadsheetTemplate, TableSchema


@pytest.fixture
def users_schema():
    """id BIGINT primary key + username VARCHAR(50), both NOT NULL."""
    return TableSchema(
        name="users",
        columns=(
            ColumnDescriptor(name="id", native_type="bigint", is_primary_key=True, nullable=False),
            ColumnDescriptor(name="username", native_type="varchar", length=50, nullable=False),
        ),
    )


@pytest.fixture
def orders_schema():
    """Schema exercising defaults, comments, decimals and dates."""
    return TableSchema(
        name="orders",
        comment="Customer orders",
        columns=(
            ColumnDescriptor(name="id", native_type="int", length=11, is_primary_key=True,
                             nullable=False, comment="Order id"),
            ColumnDescriptor(name="customer", native_type="varchar", length=100,
                             comment="Customer's name"),
            ColumnDescriptor(name="amount", native_type="decimal", length=10, scale=2),
            ColumnDescriptor(name="created_at", native_type="datetime", length=6,
                             default_value="CURRENT_TIMESTAMP"),
            ColumnDescriptor(name="status", native_type="tinyint", length=4),
        ),
    )


@pytest.fixture
def dictionary_template():
    """Header in row 1; name A, type B, comment C, primary key D."""
    return SpreadsheetTemplate(
        name="Test Dictionary",
        data_start_row=2,
        name_col="A",
        type_col="B",
        comment_col="C",
        pk_col="D",
    )


@pytest.fixture
def dictionary_grid():
    """Data dictionary rows with a blank separator row."""
    return [
        ["Field", "Type", "Comment", "PK"],
        ["id", "BIGINT", "Primary key", "Y"],
        [None, None, None, None],
        ["username", "VARCHAR(50)", "Login name", None],
    ]


@pytest.fixture
def dictionary_csv(tmp_path):
    """Data dictionary as a CSV file."""
    path = tmp_path / "users_dictionary.csv"
    path.write_text(
        "Field,Type,Comment,PK\n"
        "id,bigint,Primary key,Y\n"
        "username,varchar(50),Login name,\n",
        encoding="utf-8",
    )
    return path
