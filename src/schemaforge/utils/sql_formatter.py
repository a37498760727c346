"""
SQL Formatter - Re-layout generated statements with sqlparse

Styles:
- compact: sqlparse reindent, several items per line up to 120 chars
- expanded: one SELECT column per line, comma first
- comma_first: leading commas

Synthesized SQL is already laid out; formatting is opt-in (CLI --format).
Comment lines ("-- Import to ...") are passed through.
"""

import logging

import sqlparse

logger = logging.getLogger(__name__)

FORMAT_STYLES = ("compact", "expanded", "comma_first")


def format_sql(sql_text: str, style: str = "compact") -> str:
    """
    Format SQL text with the given style.

    Args:
        sql_text: One or more statements
        style: "compact", "expanded" or "comma_first"

    Returns:
        Formatted SQL string

    Raises:
        ValueError: for an unknown style
    """
    if not sql_text or not sql_text.strip():
        return sql_text

    if style == "compact":
        options = dict(indent_width=2, wrap_after=120)
    elif style == "expanded":
        options = dict(indent_width=4)
    elif style == "comma_first":
        options = dict(indent_width=4, comma_first=True)
    else:
        raise ValueError(f"Unknown format style: {style} (expected one of {', '.join(FORMAT_STYLES)})")

    formatted = sqlparse.format(
        sql_text,
        reindent=True,
        keyword_case="upper",
        use_space_around_operators=True,
        **options
    )
    if style == "expanded":
        formatted = _force_one_item_per_line(formatted)
    return formatted.strip() + "\n"


def split_statements(sql_text: str) -> list:
    """Split SQL text into statements, dropping empty ones."""
    return [s.strip() for s in sqlparse.split(sql_text) if s.strip()]


def _split_top_level(text: str) -> list:
    """Split on commas outside parentheses and quotes."""
    items, current, depth, quote = [], [], 0, None
    for ch in text:
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"', "`"):
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch == "," and depth == 0:
            items.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    items.append("".join(current).strip())
    return [i for i in items if i]


def _force_one_item_per_line(sql_text: str) -> str:
    """Rewrite SELECT column lists as one comma-first item per line."""
    result = []
    select_items = None

    def flush():
        items = _split_top_level(" ".join(select_items))
        if items:
            result.append(f"SELECT {items[0]}")
            result.extend(f"    , {item}" for item in items[1:])

    for line in sql_text.split("\n"):
        stripped = line.strip()
        upper = stripped.upper()

        if upper.startswith("SELECT"):
            select_items = [stripped[len("SELECT"):]]
        elif select_items is not None and upper.startswith(("FROM", "WHERE", "ORDER BY", "GROUP BY", "LIMIT")):
            flush()
            select_items = None
            result.append(line)
        elif select_items is not None:
            select_items.append(stripped)
        else:
            result.append(line)

    if select_items is not None:
        flush()
    return "\n".join(result)
