"""
Unit tests for the sqlparse-based formatter
"""
import pytest

from schemaforge.models import Dialect
from schemaforge.synthesis import synthesize_create_table, synthesize_select
from schemaforge.utils.sql_formatter import format_sql, split_statements


class TestFormatSql:

    def test_keywords_upper_cased(self):
        result = format_sql("select a, b from t where x=1")

        assert result.startswith("SELECT")
        assert "FROM t" in result
        assert "x = 1" in result
        assert result.endswith("\n")

    def test_expanded_one_column_per_line(self):
        result = format_sql("select a, b, c from t", style="expanded")
        assert result.splitlines() == ["SELECT a", "    , b", "    , c", "FROM t"]

    def test_comma_first(self):
        result = format_sql("select a, b from t", style="comma_first")
        assert "FROM t" in result

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            format_sql("select 1", style="fancy")

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_input_returned(self, text):
        assert format_sql(text) == text

    def test_generated_select_keeps_identifiers(self, users_schema):
        result = format_sql(synthesize_select(users_schema, Dialect.MYSQL))

        assert "`id`" in result
        assert "`username`" in result
        assert "LIMIT 100" in result


class TestSplitStatements:

    def test_ddl_with_deferred_comments(self, orders_schema):
        sql = synthesize_create_table(orders_schema, Dialect.POSTGRESQL)
        statements = split_statements(sql)

        assert len(statements) == 4
        assert statements[0].startswith('CREATE TABLE "orders"')
        assert statements[-1].startswith('COMMENT ON TABLE')

    def test_empty_statements_dropped(self):
        assert split_statements("select 1;\n\n  \n") == ["select 1;"]
