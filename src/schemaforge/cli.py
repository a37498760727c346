"""
SchemaForge command line

    schemaforge ddl dictionary.xlsx --table users --dialect postgresql
    schemaforge dml dictionary.xlsx --table users --kind update
    schemaforge import data.xlsx --definition dictionary.xlsx --table users
    schemaforge convert dictionary.xlsx --table users --target doris
    schemaforge templates

SQL is written to stdout, diagnostics to stderr.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from . import __version__
from .errors import SchemaForgeError
from .models import Dialect, ImportMapping, SpreadsheetTemplate, TableSchema
from .spreadsheet import SpreadsheetTemplateLoader, extract_schema, load_sheet
from .synthesis import (
    StatementKind,
    auto_match_mappings,
    synthesize_batch_insert,
    synthesize_ddl,
    synthesize_dml,
)
from .utils import FORMAT_STYLES, convert_ddl, format_sql

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "standard_dictionary"
EXIT_ERROR = 2


def _sheet_arg(value: str):
    """Sheet names that are plain digits address sheets by position."""
    return int(value) if value.isdigit() else value


def _add_schema_source(parser: argparse.ArgumentParser, file_help: str):
    parser.add_argument("file", type=Path, help=file_help)
    parser.add_argument("--sheet", type=_sheet_arg, default=0,
                        help="Sheet name or 0-based index (default: first sheet)")
    parser.add_argument("--template", default=DEFAULT_TEMPLATE,
                        help=f"Template id or name (default: {DEFAULT_TEMPLATE})")
    parser.add_argument("--template-file", type=Path,
                        help="Template YAML file, overrides --template")
    parser.add_argument("--table", help="Table name (default: file name)")
    parser.add_argument("--comment", help="Table comment")
    parser.add_argument("--engine", help="MySQL storage engine")


def _add_dialect(parser: argparse.ArgumentParser):
    parser.add_argument("--dialect", default=Dialect.MYSQL.value,
                        help="mysql, postgresql, doris, oracle or sqlserver (default: mysql)")


def _add_format(parser: argparse.ArgumentParser):
    parser.add_argument("--format", choices=FORMAT_STYLES, dest="format_style",
                        help="Re-layout the output with sqlparse")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schemaforge",
        description="Generate DDL and DML from spreadsheet data dictionaries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  schemaforge ddl dict.xlsx --table users --dialect oracle
  schemaforge import data.csv --definition dict.xlsx --table users --set source=excel
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--templates-dir", type=Path, action="append", default=[],
                        help="Extra directory of template YAML files (repeatable)")

    sub = parser.add_subparsers(dest="command", required=True)

    ddl = sub.add_parser("ddl", help="CREATE TABLE from a data dictionary sheet")
    _add_schema_source(ddl, "Data dictionary (.xlsx, .xls, .csv)")
    _add_dialect(ddl)
    _add_format(ddl)

    dml = sub.add_parser("dml", help="SELECT/INSERT/UPDATE/DELETE skeleton")
    _add_schema_source(dml, "Data dictionary (.xlsx, .xls, .csv)")
    dml.add_argument("--kind", choices=[k.value for k in StatementKind], default="select")
    _add_dialect(dml)
    _add_format(dml)

    imp = sub.add_parser("import", help="Batch INSERT from a data sheet")
    imp.add_argument("data", type=Path, help="Data file (.xlsx, .xls, .csv)")
    imp.add_argument("--data-sheet", type=_sheet_arg, default=0,
                     help="Sheet of the data file (default: first sheet)")
    imp.add_argument("--header-row", type=int, default=1, help="1-based header row (default: 1)")
    imp.add_argument("--definition", type=Path, required=True,
                     help="Data dictionary describing the target table")
    imp.add_argument("--definition-sheet", type=_sheet_arg, default=0)
    imp.add_argument("--template", default=DEFAULT_TEMPLATE)
    imp.add_argument("--template-file", type=Path)
    imp.add_argument("--table", help="Target table (default: data file name)")
    imp.add_argument("--map", action="append", default=[], metavar="COLUMN=HEADER",
                     help="Bind a column to a header, overriding auto-match (repeatable)")
    imp.add_argument("--set", action="append", default=[], metavar="COLUMN=VALUE",
                     help="Fixed literal for a column (repeatable)")
    imp.add_argument("--batch", type=int, help="Rows per INSERT statement")
    imp.add_argument("--strict", action="store_true", help="Fail on headers missing from the data")
    _add_dialect(imp)

    conv = sub.add_parser("convert", help="Convert a table between MySQL and Doris")
    _add_schema_source(conv, "Data dictionary (.xlsx, .xls, .csv)")
    conv.add_argument("--ddl-file", type=Path, help="Original CREATE TABLE text")
    conv.add_argument("--target", choices=[Dialect.MYSQL.value, Dialect.DORIS.value],
                      help="Target engine (default: the other one)")

    sub.add_parser("templates", help="List spreadsheet templates")
    return parser


def _resolve_template(loader: SpreadsheetTemplateLoader, name: str,
                      template_file: Optional[Path]) -> SpreadsheetTemplate:
    if template_file is not None:
        return loader.load_file(template_file)
    template = loader.get_template(name) or loader.get_template_by_name(name)
    if template is None:
        raise SchemaForgeError(f"Unknown template: {name}")
    return template


def _read_schema(loader: SpreadsheetTemplateLoader, path: Path, sheet, template_name: str,
                 template_file: Optional[Path], table: Optional[str],
                 comment: Optional[str] = None, engine: Optional[str] = None) -> TableSchema:
    template = _resolve_template(loader, template_name, template_file)
    sheet_data = load_sheet(path, sheet_name=sheet)
    return extract_schema(
        sheet_data.grid,
        template,
        table_name=table or path.stem,
        comment=comment,
        engine_hint=engine,
    )


def _parse_pairs(pairs: List[str], option: str) -> Dict[str, str]:
    result = {}
    for pair in pairs:
        column, sep, value = pair.partition("=")
        if not sep or not column.strip():
            raise SchemaForgeError(f"{option} expects COLUMN=VALUE, got {pair!r}")
        result[column.strip()] = value
    return result


def _emit(sql: str, format_style: Optional[str] = None):
    if format_style:
        sql = format_sql(sql, format_style)
    sys.stdout.write(sql if sql.endswith("\n") else sql + "\n")


def _run_ddl(args, loader):
    schema = _read_schema(loader, args.file, args.sheet, args.template, args.template_file,
                          args.table, args.comment, args.engine)
    _emit(synthesize_ddl(schema, args.dialect), args.format_style)


def _run_dml(args, loader):
    schema = _read_schema(loader, args.file, args.sheet, args.template, args.template_file,
                          args.table, args.comment, args.engine)
    _emit(synthesize_dml(args.kind, schema, args.dialect), args.format_style)


def _run_import(args, loader):
    table = args.table or args.data.stem
    schema = _read_schema(loader, args.definition, args.definition_sheet, args.template,
                          args.template_file, table)

    data = load_sheet(args.data, sheet_name=args.data_sheet)
    headers = data.headers(args.header_row)

    mappings = {m.column: m for m in auto_match_mappings(schema, headers)}
    for column, header in _parse_pairs(args.map, "--map").items():
        mappings[column] = ImportMapping(column=column, source_header=header)
    for column, value in _parse_pairs(args.set, "--set").items():
        mappings[column] = ImportMapping(column=column, literal=value)

    _emit(synthesize_batch_insert(
        schema,
        mappings,
        data.data_rows(args.header_row),
        headers=headers,
        dialect=args.dialect,
        batch_size=args.batch,
        strict=args.strict,
    ))


def _run_convert(args, loader):
    schema = _read_schema(loader, args.file, args.sheet, args.template, args.template_file,
                          args.table, args.comment, args.engine)
    ddl = ""
    if args.ddl_file is not None:
        ddl = args.ddl_file.read_text(encoding="utf-8")
    _emit(convert_ddl(schema, ddl, args.target))


def _run_templates(args, loader):
    for template in loader.get_all_templates():
        letters = f"name={template.name_col} type={template.type_col}"
        if template.comment_col:
            letters += f" comment={template.comment_col}"
        if template.pk_col:
            letters += f" pk={template.pk_col}"
        sys.stdout.write(
            f"{template.id}\t{template.name}\trow {template.data_start_row}\t{letters}\n"
        )


_COMMANDS = {
    "ddl": _run_ddl,
    "dml": _run_dml,
    "import": _run_import,
    "convert": _run_convert,
    "templates": _run_templates,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the schemaforge console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    loader = SpreadsheetTemplateLoader(template_dirs=args.templates_dir)
    try:
        _COMMANDS[args.command](args, loader)
    except (SchemaForgeError, ValueError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        sys.stderr.write(f"ERROR: {e}\n")
        return EXIT_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())
