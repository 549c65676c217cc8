# gfm_tables/core/functions/table_structure.py
"""
Table Structure - Structural Predicates for HTML Tables

Pure helpers that inspect a table's DOM shape or its rendered Markdown lines.
None of them look at cell text except should_skip_table, and none raise on
malformed input.

Module Components:
- is_heading_row(): thead row, or first row made only of th cells
- is_leading_row(): first row of the table, sections included
- get_table_col_count(): max colspan-weighted cell count over all rows
- is_separator_row(): recognizes a GFM '| --- | :-: |' line
- should_skip_table(): degenerate table filter
- build_separator_row(): '| --- | --- |' for a column count
"""
import logging
import re
from typing import Iterator, Optional

from gfm_tables.core.dom import BaseDomNode, ELEMENT_NODE
from gfm_tables.core.functions.cell_processor import parse_colspan

logger = logging.getLogger("gfm-tables")


CELL_TAGS = ("TD", "TH")
ROW_TAGS = ("TR", "THEAD", "TBODY", "TFOOT")
SECTION_TAGS = ("THEAD", "TBODY", "TFOOT")

_SEPARATOR_CELL_RE = re.compile(r'^ *:?-{3,}:? *$')


def _iter_cells(row: BaseDomNode) -> Iterator[BaseDomNode]:
    for child in row.child_nodes:
        if child.node_type == ELEMENT_NODE and child.node_name in CELL_TAGS:
            yield child


def is_heading_row(tr: Optional[BaseDomNode]) -> bool:
    """
    Decide whether a tr is a header row.

    A row is a header when its parent is a THEAD, or when it is the first
    element child of a TABLE/TBODY and every element child is a TH.
    """
    if tr is None:
        return False
    parent = tr.parent_node
    if parent is None:
        return False

    if parent.node_name == "THEAD":
        return True

    if parent.node_name not in ("TABLE", "TBODY"):
        return False

    if parent.first_element_child() != tr:
        return False

    cells = tr.element_children()
    if not cells:
        return False
    return all(cell.node_name == "TH" for cell in cells)


def _preceded_by_row(node: BaseDomNode) -> bool:
    # caption and colgroup siblings do not count
    sibling = node.previous_element_sibling()
    while sibling is not None:
        if sibling.node_name in ROW_TAGS:
            return True
        sibling = sibling.previous_element_sibling()
    return False


def is_leading_row(tr: Optional[BaseDomNode]) -> bool:
    """
    Decide whether a tr is the first row of its table.

    Only the leading header row may carry a separator line, since a GFM table
    has exactly one. A row inside a section is leading when no row precedes it
    in the section and no row or section precedes the section itself.
    """
    if tr is None:
        return False
    parent = tr.parent_node
    if parent is None or _preceded_by_row(tr):
        return False

    if parent.node_name in SECTION_TAGS:
        return not _preceded_by_row(parent)
    return True


def get_table_col_count(table: Optional[BaseDomNode]) -> int:
    """Effective column count: the largest per-row colspan sum, 0 for no rows/cells."""
    if table is None:
        return 0

    max_cols = 0
    for row in table.rows:
        col_count = sum(parse_colspan(cell) for cell in _iter_cells(row))
        max_cols = max(max_cols, col_count)
    return max_cols


def is_separator_row(line: Optional[str]) -> bool:
    """Check if a rendered line is a valid GFM separator row."""
    stripped = (line or "").strip()
    if len(stripped) < 2 or not stripped.startswith("|") or not stripped.endswith("|"):
        return False

    cells = stripped.split("|")[1:-1]
    if not cells:
        return False
    return all(_SEPARATOR_CELL_RE.match(cell) for cell in cells)


def should_skip_table(table: Optional[BaseDomNode]) -> bool:
    """
    Decide whether a table is degenerate and should vanish from the output.

    Skipped: no table, no rows, no cells, or a single cell with only whitespace.
    """
    if table is None:
        return True

    rows = table.rows
    if not rows:
        return True

    total_cells = 0
    content_cells = 0
    for row in rows:
        for cell in _iter_cells(row):
            total_cells += 1
            if cell.text_content.strip():
                content_cells += 1
            # Two cells are always enough to render
            if total_cells > 1:
                return False

    return total_cells == 0 or content_cells == 0


def build_separator_row(col_count: int) -> str:
    """Separator line with one '---' segment per column, '' for col_count <= 0."""
    if col_count <= 0:
        return ""
    return "|" + " --- |" * col_count
