"""Extraction primitives that mark what they have understood.

Every ``consume_*`` function replaces the subtree it read with a comment
embedding the extracted value (or removes it outright), so after a full parse
any live, non-comment content left in the tree is something the parser did
not account for.
"""

from __future__ import annotations

import json

from lol_api_doc.domain.exceptions import RowShapeError, StructuralError

from .selection import Sel, is_text


def _comment_safe(text: str) -> str:
    # "--" may not appear inside an HTML comment
    return text.replace("--", "-\\u002d")


def _quote(text: str) -> str:
    return _comment_safe(json.dumps(text, ensure_ascii=False))


def _ensure_leaf(sel: Sel) -> None:
    count = len(sel.children())
    if count != 0:
        raise StructuralError(
            f"cannot read text: node must not have a child, but has {count}",
            sel.dump(),
        )


def read_text(sel: Sel) -> str:
    """Return the direct text of a leaf element, ignoring comments."""
    _ensure_leaf(sel)
    return "".join(str(node) for node in sel.contents() if is_text(node)).strip()


def consume_text(sel: Sel) -> str:
    """Read the text of a leaf element and replace it with a marker comment."""
    text = read_text(sel)
    sel.replace_with_comment(_quote(text))
    return text


def consume_exact(sel: Sel, expected: str) -> None:
    """Remove a fixed label after checking its text."""
    got = read_text(sel)
    if got != expected:
        raise StructuralError(f"want {expected!r}, but got {got!r}", sel.dump())
    sel.remove()


def consume_table_row(tr: Sel, is_head: bool = False) -> list[str]:
    tr.ensure("tr")
    cell_tag = "th" if is_head else "td"

    values = [read_text(cell.ensure(cell_tag)) for cell in tr.children()]
    tr.replace_with_comment(f"Row: {_comment_safe(json.dumps(values, ensure_ascii=False))}")
    return values


def consume_table_rows(tbody: Sel) -> list[list[str]]:
    tbody.ensure("tbody")
    return [consume_table_row(tr) for tr in tbody.children()]


def consume_table(table: Sel) -> list[dict[str, str]]:
    """Consume a ``<table>`` with a header row into header-keyed row mappings."""
    table.ensure("table")

    thead = table.children_filtered("thead").must_be_single()
    tbody = table.children_filtered("tbody").must_be_single()

    columns = consume_table_row(thead.children().first(), is_head=True)
    rows = consume_table_rows(tbody)

    data: list[dict[str, str]] = []
    for row in rows:
        if len(row) != len(columns):
            raise RowShapeError(len(columns), len(row), table.dump())
        data.append(dict(zip(columns, row)))
    return data


def consume_select(sel: Sel) -> dict[str, str]:
    """Consume a ``<select>`` into an option value to label mapping."""
    sel.ensure("select")

    values: dict[str, str] = {}
    for option in sel.children():
        option.ensure("option")
        text = read_text(option)
        value = option.attr("value")
        if value is None:
            raise StructuralError(f"no value for option {text!r}", sel.dump())
        values[value] = text

    sel.replace_with_comment(f"select: {_comment_safe(json.dumps(values, ensure_ascii=False))}")
    return values
