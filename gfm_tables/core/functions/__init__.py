# gfm_tables/core/functions/__init__.py
"""
Functions - Table Cell and Structure Helpers

Module Components:
- cell_processor: Cell content sanitizing, colspan parsing, cell rendering
- table_structure: Header row detection, column counting, separator
  detection/synthesis, degenerate table filter

Usage Example:
    from gfm_tables.core.functions import clean_cell_content, is_separator_row
"""

from gfm_tables.core.functions.cell_processor import (
    clean_cell_content,
    parse_colspan,
    render_cell,
    COLSPAN_PADDING,
    DEFAULT_MIN_CELL_WIDTH,
    MAX_COLSPAN,
)
from gfm_tables.core.functions.table_structure import (
    build_separator_row,
    get_table_col_count,
    is_heading_row,
    is_leading_row,
    is_separator_row,
    should_skip_table,
)

__all__ = [
    # Cell processor
    "clean_cell_content",
    "parse_colspan",
    "render_cell",
    "COLSPAN_PADDING",
    "DEFAULT_MIN_CELL_WIDTH",
    "MAX_COLSPAN",
    # Table structure
    "build_separator_row",
    "get_table_col_count",
    "is_heading_row",
    "is_leading_row",
    "is_separator_row",
    "should_skip_table",
]
