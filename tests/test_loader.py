"""
Unit tests for the spreadsheet loader
"""
import pandas as pd
import pytest

from schemaforge.errors import SpreadsheetLoadError
from schemaforge.models import ImportMapping
from schemaforge.spreadsheet import extract_schema, list_sheets, load_sheet, LoadWarningLevel
from schemaforge.spreadsheet import loader as loader_module
from schemaforge.synthesis import synthesize_batch_insert

requires_openpyxl = pytest.mark.skipif(
    not __import__('importlib.util').util.find_spec('openpyxl'),
    reason="openpyxl not installed"
)


class TestCsv:

    def test_grid_without_header_interpretation(self, dictionary_csv):
        sheet = load_sheet(dictionary_csv)

        assert sheet.row_count == 3
        assert sheet.grid[0] == ["Field", "Type", "Comment", "PK"]
        assert sheet.sheet_name is None
        assert sheet.available_sheets == []
        assert sheet.warning_level == LoadWarningLevel.NONE

    def test_feeds_extractor(self, dictionary_csv, dictionary_template):
        schema = extract_schema(load_sheet(dictionary_csv).grid, dictionary_template, "users")

        assert schema.column_names == ["id", "username"]
        assert schema.columns[0].is_primary_key
        assert schema.columns[1].length == 50

    def test_semicolon_separator(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("Name;Age\nJohn;30\nJane;25\n", encoding="utf-8")

        sheet = load_sheet(path)

        assert sheet.headers() == ["Name", "Age"]
        assert sheet.data_rows() == [["John", "30"], ["Jane", "25"]]

    def test_header_row(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("Report,\nName,Age\nJohn,30\n", encoding="utf-8")

        sheet = load_sheet(path)

        assert sheet.headers(header_row=2) == ["Name", "Age"]
        assert sheet.data_rows(header_row=2) == [["John", "30"]]
        assert sheet.headers(header_row=9) == []

    def test_nrows_cap(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("a\n1\n2\n3\n", encoding="utf-8")

        sheet = load_sheet(path, nrows=2)

        assert sheet.row_count == 2
        assert sheet.warning_level == LoadWarningLevel.INFO

    def test_large_sheet_warning(self, tmp_path, monkeypatch):
        monkeypatch.setattr(loader_module, "LARGE_SHEET_THRESHOLD", 2)
        path = tmp_path / "data.csv"
        path.write_text("a\n1\n2\n3\n", encoding="utf-8")
        seen = []

        sheet = load_sheet(path, on_large_sheet=seen.append)

        assert sheet.warning_level == LoadWarningLevel.WARNING
        assert "4" in sheet.warning_message
        assert seen == [4]


class TestErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpreadsheetLoadError):
            load_sheet(tmp_path / "missing.xlsx")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(SpreadsheetLoadError):
            load_sheet(path)

    @requires_openpyxl
    def test_corrupt_workbook(self, tmp_path):
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"not a zip file")
        with pytest.raises(SpreadsheetLoadError) as exc_info:
            load_sheet(path)
        assert exc_info.value.__cause__ is not None


@requires_openpyxl
class TestExcel:

    @pytest.fixture
    def workbook(self, tmp_path):
        path = tmp_path / "dictionary.xlsx"
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            pd.DataFrame([
                ["Field", "Type", "Comment", "PK"],
                ["id", "bigint", "Primary key", "Y"],
                ["username", "varchar(50)", "Login name", None],
            ]).to_excel(writer, sheet_name="users", header=False, index=False)
            pd.DataFrame([
                ["Name", "Qty"],
                ["bolt", 3],
            ]).to_excel(writer, sheet_name="items", header=False, index=False)
        return path

    def test_list_sheets(self, workbook):
        assert list_sheets(workbook) == ["users", "items"]

    def test_first_sheet_by_default(self, workbook, dictionary_template):
        sheet = load_sheet(workbook)
        schema = extract_schema(sheet.grid, dictionary_template, "users")

        assert sheet.available_sheets == ["users", "items"]
        assert schema.column_names == ["id", "username"]
        assert schema.columns[1].comment == "Login name"

    def test_sheet_by_name(self, workbook):
        sheet = load_sheet(workbook, sheet_name="items")

        assert sheet.sheet_name == "items"
        assert sheet.headers() == ["Name", "Qty"]
        assert sheet.data_rows()[0][0] == "bolt"

    def test_missing_sheet(self, workbook):
        with pytest.raises(SpreadsheetLoadError):
            load_sheet(workbook, sheet_name="nope")


class TestFeedsImport:

    def test_empty_csv_cell_becomes_null(self, tmp_path, users_schema):
        path = tmp_path / "users.csv"
        path.write_text("Id,Name\n1,\n2,bob\n", encoding="utf-8")
        sheet = load_sheet(path)

        sql = synthesize_batch_insert(
            users_schema, {"username": ImportMapping(source_header="Name")},
            sheet.data_rows(), headers=sheet.headers(),
        )

        assert sql.endswith("(NULL),\n('bob');")

    @requires_openpyxl
    def test_csv_and_excel_agree(self, tmp_path, users_schema):
        csv_path = tmp_path / "users.csv"
        csv_path.write_text("Id,Name\n1,\n", encoding="utf-8")
        xlsx_path = tmp_path / "users.xlsx"
        pd.DataFrame([["Id", "Name"], [1, None]]).to_excel(
            xlsx_path, header=False, index=False, engine="openpyxl"
        )
        mappings = {"username": ImportMapping(source_header="Name")}

        results = []
        for path in (csv_path, xlsx_path):
            sheet = load_sheet(path)
            results.append(synthesize_batch_insert(
                users_schema, mappings, sheet.data_rows(), headers=sheet.headers()
            ))

        assert results[0] == results[1]
        assert results[0].endswith("(NULL);")
