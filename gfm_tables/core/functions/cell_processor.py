# gfm_tables/core/functions/cell_processor.py
"""
Cell Processor - Table Cell Sanitizing and Rendering

Turns the already-converted Markdown of one td/th into a pipe-table segment.

================================================================================
PROCESSING FLOW
================================================================================

render_cell(content, node, index)
│
├─ index is None?
│   └─► node.is_first_element()   (preceding sibling check)
│
├─ clean_cell_content(content)
│   ├─ strip + collapse whitespace (newlines/CR included)
│   ├─ escape '\\' then '|'
│   └─ right-pad to min_width
│
├─ parse_colspan(node)
│
└─ "| " or " " + content + " |" + "   |" * (colspan - 1)

================================================================================
"""
import logging
import re
from typing import Optional

from gfm_tables.core.dom import BaseDomNode

logger = logging.getLogger("gfm-tables")


DEFAULT_MIN_CELL_WIDTH = 3

# Fixed padding segment for each column a cell spans beyond the first
COLSPAN_PADDING = "   |"

# HTML caps colspan at 1000
MAX_COLSPAN = 1000

_WHITESPACE_RE = re.compile(r'\s+')


def clean_cell_content(content: Optional[str], min_width: int = DEFAULT_MIN_CELL_WIDTH) -> str:
    """
    Normalize cell content into a pipe-table-safe string.

    Original backslashes are doubled before pipes are escaped, so the
    backslash introduced by a pipe escape is never escaped again.

    Args:
        content: Markdown already produced for the cell's children
        min_width: Minimum width; shorter content is right-padded with spaces

    Returns:
        Sanitized content, or a blank placeholder of min_width spaces
    """
    placeholder = " " * min_width
    if not content:
        return placeholder

    cleaned = _WHITESPACE_RE.sub(" ", content.strip())
    if not cleaned:
        return placeholder

    cleaned = cleaned.replace("\\", "\\\\").replace("|", "\\|")

    if len(cleaned) < min_width:
        cleaned = cleaned.ljust(min_width)
    return cleaned


def parse_colspan(node: Optional[BaseDomNode]) -> int:
    """Effective colspan of a cell: a positive integer, 1 when missing or invalid."""
    if node is None:
        return 1

    raw = node.get_attribute("colspan")
    if raw is None or not raw.strip():
        return 1

    # Leading-integer parse, so "2px" counts as 2
    match = re.match(r'\s*([+-]?\d+)', raw)
    if not match:
        logger.debug(f"Ignoring non-numeric colspan {raw!r}")
        return 1

    colspan = int(match.group(1))
    if colspan < 1:
        logger.debug(f"Ignoring non-positive colspan {raw!r}")
        return 1
    if colspan > MAX_COLSPAN:
        logger.debug(f"Clamping colspan {colspan} to {MAX_COLSPAN}")
        return MAX_COLSPAN
    return colspan


def render_cell(
    content: Optional[str],
    node: Optional[BaseDomNode],
    index: Optional[int] = None,
    min_width: int = DEFAULT_MIN_CELL_WIDTH,
) -> str:
    """
    Render one cell as a pipe-delimited fragment.

    Args:
        content: Markdown of the cell's children
        node: The td/th node (colspan and sibling position)
        index: Position among the row's cells; when None only the preceding
            element sibling is checked
        min_width: Width floor passed to clean_cell_content

    Returns:
        "| x |" for the first cell, " x |" otherwise, plus colspan padding
    """
    if index is None:
        is_first = node is None or node.is_first_element()
    else:
        is_first = index == 0

    prefix = "| " if is_first else " "
    segment = prefix + clean_cell_content(content, min_width) + " |"

    return segment + COLSPAN_PADDING * (parse_colspan(node) - 1)
