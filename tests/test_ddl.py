"""
Unit tests for CREATE TABLE synthesis
"""
import re

import pytest

from schemaforge.errors import EmptySchema
from schemaforge.models import ColumnDescriptor, Dialect, TableSchema
from schemaforge.synthesis import synthesize_create_table, synthesize_ddl


class TestMySQL:

    def test_users_table(self, users_schema):
        sql = synthesize_create_table(users_schema, Dialect.MYSQL)

        assert sql == (
            "CREATE TABLE `users` (\n"
            "  `id` BIGINT NOT NULL AUTO_INCREMENT,\n"
            "  `username` VARCHAR(50) NOT NULL,\n"
            "  PRIMARY KEY (`id`)\n"
            ") ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;"
        )

    def test_table_options(self, orders_schema):
        sql = synthesize_create_table(orders_schema, "mysql")

        assert sql.endswith(") ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COMMENT='Customer orders';")
        assert "  `created_at` DATETIME DEFAULT CURRENT_TIMESTAMP,\n" in sql
        assert "  `amount` DECIMAL(10,2),\n" in sql
        assert "COMMENT 'Customer''s name'" in sql
        assert "COMMENT ON" not in sql

    def test_engine_hint(self, users_schema):
        schema = TableSchema(name="users", columns=users_schema.columns, engine_hint="MyISAM")
        assert "ENGINE=MyISAM DEFAULT CHARSET=utf8mb4" in synthesize_create_table(schema, Dialect.MYSQL)


class TestOracle:

    def test_users_table(self, users_schema):
        sql = synthesize_create_table(users_schema, Dialect.ORACLE)

        assert sql == (
            'CREATE TABLE "users" (\n'
            '  "id" NUMBER(19) NOT NULL,\n'
            '  "username" VARCHAR2(50) NOT NULL,\n'
            '  CONSTRAINT pk_users PRIMARY KEY ("id")\n'
            ');'
        )

    def test_deferred_comments(self, orders_schema):
        sql = synthesize_create_table(orders_schema, Dialect.ORACLE)
        statement, comments = sql.split("\n\n")

        assert statement.endswith(");")
        assert '"created_at" DATE DEFAULT SYSDATE' in statement
        assert comments == (
            'COMMENT ON COLUMN "orders"."id" IS \'Order id\';\n'
            'COMMENT ON COLUMN "orders"."customer" IS \'Customer\'\'s name\';\n'
            'COMMENT ON TABLE "orders" IS \'Customer orders\';\n'
        )


class TestPostgreSQL:

    def test_orders_table(self, orders_schema):
        sql = synthesize_create_table(orders_schema, Dialect.POSTGRESQL)

        assert sql.startswith(
            'CREATE TABLE "orders" (\n'
            '  "id" SERIAL,\n'
            '  "customer" VARCHAR(100),\n'
            '  "amount" DECIMAL,\n'
            '  "created_at" TIMESTAMP DEFAULT CURRENT_TIMESTAMP,\n'
            '  "status" SMALLINT,\n'
            '  CONSTRAINT pk_orders PRIMARY KEY ("id")\n'
            ');\n\n'
        )

    def test_table_comment_without_column_comments(self, users_schema):
        schema = TableSchema(name="users", columns=users_schema.columns, comment="People")
        sql = synthesize_create_table(schema, Dialect.POSTGRESQL)

        assert sql.endswith(');\n\nCOMMENT ON TABLE "users" IS \'People\';\n')


class TestSQLServer:

    def test_users_table(self, users_schema):
        sql = synthesize_create_table(users_schema, Dialect.SQLSERVER)

        assert '  "id" BIGINT NOT NULL IDENTITY(1,1),\n' in sql
        assert '  CONSTRAINT pk_users PRIMARY KEY ("id")\n' in sql
        assert sql.endswith(");")


class TestDoris:

    @pytest.fixture
    def interleaved(self):
        return TableSchema(name="events", columns=(
            ColumnDescriptor(name="payload", native_type="varchar", length=200, comment="Body"),
            ColumnDescriptor(name="id", native_type="bigint", is_primary_key=True, nullable=False),
            ColumnDescriptor(name="ts", native_type="datetime"),
            ColumnDescriptor(name="tenant", native_type="int", is_primary_key=True, nullable=False),
        ))

    def test_key_columns_first(self, interleaved):
        sql = synthesize_create_table(interleaved, Dialect.DORIS)
        names = re.findall(r"^  `(\w+)`", sql, flags=re.MULTILINE)

        assert names == ["id", "tenant", "payload", "ts"]

    def test_suffix(self, interleaved):
        sql = synthesize_create_table(interleaved, Dialect.DORIS)

        assert sql.endswith(
            "  `ts` DATETIME\n"
            ")\n"
            "ENGINE=OLAP\n"
            "UNIQUE KEY(`id`)\n"
            "DISTRIBUTED BY HASH(`id`) BUCKETS 10\n"
            "PROPERTIES (\n"
            "  \"replication_num\" = \"1\"\n"
            ");"
        )
        assert "PRIMARY KEY" not in sql
        assert "AUTO_INCREMENT" not in sql

    def test_key_is_id_even_without_id_column(self):
        schema = TableSchema(name="t", columns=(
            ColumnDescriptor(name="code", native_type="varchar", length=8, is_primary_key=True),
        ))
        assert "UNIQUE KEY(`id`)" in synthesize_create_table(schema, Dialect.DORIS)

    def test_inline_comments(self, interleaved):
        sql = synthesize_create_table(interleaved, Dialect.DORIS)

        assert "`payload` VARCHAR(200) COMMENT 'Body'" in sql
        assert "COMMENT ON" not in sql


class TestInvariants:

    @pytest.mark.parametrize("dialect", list(Dialect))
    def test_deterministic(self, orders_schema, dialect):
        assert synthesize_create_table(orders_schema, dialect) == synthesize_create_table(orders_schema, dialect)

    @pytest.mark.parametrize("dialect,quote", [
        (Dialect.MYSQL, "`"),
        (Dialect.DORIS, "`"),
        (Dialect.POSTGRESQL, '"'),
        (Dialect.ORACLE, '"'),
        (Dialect.SQLSERVER, '"'),
    ])
    def test_identifiers_quoted_once(self, orders_schema, dialect, quote):
        sql = synthesize_create_table(orders_schema, dialect)

        for name in orders_schema.column_names:
            assert f"{quote}{name}{quote}" in sql
            assert f"{quote}{quote}{name}" not in sql

    @pytest.mark.parametrize("dialect", [Dialect.POSTGRESQL, Dialect.ORACLE, Dialect.SQLSERVER])
    def test_no_inline_comments_for_deferred_dialects(self, orders_schema, dialect):
        statement = synthesize_create_table(orders_schema, dialect).split("\n\n")[0]
        assert " COMMENT '" not in statement

    def test_empty_schema_renders_empty_body(self):
        sql = synthesize_create_table(TableSchema(name="t"), Dialect.ORACLE)
        assert sql == 'CREATE TABLE "t" (\n\n);'

    def test_synthesize_ddl_rejects_empty_schema(self):
        with pytest.raises(EmptySchema):
            synthesize_ddl(TableSchema(name="t"), Dialect.MYSQL)

    def test_synthesize_ddl_matches_create_table(self, users_schema):
        assert synthesize_ddl(users_schema, "postgres") == synthesize_create_table(users_schema, Dialect.POSTGRESQL)
