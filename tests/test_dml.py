"""
Unit tests for the DML skeleton synthesizer
"""
import pytest

from schemaforge.errors import EmptySchema
from schemaforge.models import ColumnDescriptor, Dialect, TableSchema
from schemaforge.synthesis import (
    StatementKind,
    synthesize_delete,
    synthesize_dml,
    synthesize_insert,
    synthesize_select,
    synthesize_update,
)


@pytest.fixture
def profile_schema():
    return TableSchema(name="profile", columns=(
        ColumnDescriptor(name="user_id", native_type="int", is_primary_key=True),
        ColumnDescriptor(name="created_at", native_type="datetime"),
        ColumnDescriptor(name="age", native_type="tinyint"),
        ColumnDescriptor(name="score", native_type="decimal", length=5, scale=2),
        ColumnDescriptor(name="born", native_type="date"),
        ColumnDescriptor(name="login_at", native_type="datetime"),
        ColumnDescriptor(name="bio", native_type="text"),
    ))


class TestSelect:

    def test_mysql(self, users_schema):
        assert synthesize_select(users_schema, Dialect.MYSQL) == (
            "SELECT\n  `id`, `username`\nFROM `users`\nLIMIT 100;"
        )

    @pytest.mark.parametrize("dialect", [Dialect.ORACLE, Dialect.SQLSERVER])
    def test_limit_for_every_dialect(self, users_schema, dialect):
        sql = synthesize_select(users_schema, dialect)
        assert sql == 'SELECT\n  "id", "username"\nFROM "users"\nLIMIT 100;'


class TestInsert:

    def test_mysql_skips_primary_key(self, users_schema):
        assert synthesize_insert(users_schema, Dialect.MYSQL) == (
            "INSERT INTO `users`\n(`username`)\nVALUES\n('test_value');"
        )

    @pytest.mark.parametrize("dialect", [Dialect.POSTGRESQL, Dialect.DORIS, Dialect.ORACLE])
    def test_other_dialects_keep_primary_key(self, users_schema, dialect):
        sql = synthesize_insert(users_schema, dialect)
        assert "id" in sql.split("\n")[1]
        assert sql.endswith("VALUES\n(0, 'test_value');")

    def test_sample_values_by_type(self, profile_schema):
        sql = synthesize_insert(profile_schema, Dialect.POSTGRESQL)
        assert sql.endswith(
            "(0, '2024-01-01 12:00:00', 0, 0, '2024-01-01 12:00:00', "
            "'2024-01-01 12:00:00', 'test_value');"
        )

    def test_types_not_rewritten(self, profile_schema):
        assert "TIMESTAMP" not in synthesize_insert(profile_schema, Dialect.POSTGRESQL)


class TestUpdate:

    def test_mysql(self, users_schema):
        assert synthesize_update(users_schema, Dialect.MYSQL) == (
            "UPDATE `users`\nSET\n  `username` = 'new_value'\nWHERE `id` = 1;"
        )

    def test_first_three_non_key_columns_skipping_created_at(self, profile_schema):
        sql = synthesize_update(profile_schema, Dialect.POSTGRESQL)
        assert sql == (
            'UPDATE "profile"\n'
            "SET\n"
            '  "age" = 1,\n'
            "  \"score\" = 'new_value',\n"
            "  \"born\" = 'new_value'\n"
            'WHERE "user_id" = 1;'
        )

    def test_datetime_sample(self):
        schema = TableSchema(name="t", columns=(
            ColumnDescriptor(name="id", native_type="int", is_primary_key=True),
            ColumnDescriptor(name="seen", native_type="datetime"),
        ))
        assert "`seen` = NOW()" in synthesize_update(schema, Dialect.MYSQL)

    def test_first_column_is_key_without_primary_key(self):
        schema = TableSchema(name="t", columns=(
            ColumnDescriptor(name="code", native_type="varchar"),
            ColumnDescriptor(name="label", native_type="varchar"),
        ))
        assert synthesize_update(schema, Dialect.MYSQL).endswith("WHERE `code` = 1;")

    def test_key_only_table_assigns_key(self):
        schema = TableSchema(name="t", columns=(
            ColumnDescriptor(name="id", native_type="int", is_primary_key=True),
            ColumnDescriptor(name="created_at", native_type="datetime"),
        ))
        assert synthesize_update(schema, Dialect.POSTGRESQL) == (
            'UPDATE "t"\nSET\n  "id" = "id"\nWHERE "id" = 1;'
        )


class TestDelete:

    def test_mysql(self, users_schema):
        assert synthesize_delete(users_schema, Dialect.MYSQL) == "DELETE FROM `users`\nWHERE `id` = 1;"

    def test_sqlserver(self, profile_schema):
        assert synthesize_delete(profile_schema, "mssql") == 'DELETE FROM "profile"\nWHERE "user_id" = 1;'


class TestDispatch:

    @pytest.mark.parametrize("kind,func", [
        (StatementKind.SELECT, synthesize_select),
        ("insert", synthesize_insert),
        ("UPDATE", synthesize_update),
        ("delete", synthesize_delete),
    ])
    def test_synthesize_dml(self, users_schema, kind, func):
        assert synthesize_dml(kind, users_schema, Dialect.DORIS) == func(users_schema, Dialect.DORIS)

    def test_unknown_kind(self, users_schema):
        with pytest.raises(ValueError):
            synthesize_dml("merge", users_schema, Dialect.MYSQL)

    @pytest.mark.parametrize("func", [synthesize_select, synthesize_insert,
                                      synthesize_update, synthesize_delete])
    def test_empty_schema_raises(self, func):
        with pytest.raises(EmptySchema):
            func(TableSchema(name="t"), Dialect.MYSQL)
