# gfm_tables/core/processor/table_rules.py
"""
Table Rules - GFM Pipe Table Replacement Rules

Provides the replacement rules that turn table, tr, td/th and section
elements into GitHub-Flavored-Markdown pipe tables.

================================================================================
RULE ARCHITECTURE
================================================================================

The host engine converts children before parents, so the rules run
innermost first:

    tableCell     (td, th)                 → "| a |" / " b |" (+ colspan padding)
    tableRow      (tr)                     → "\\n" + cells (+ separator for the leading header row)
    tableSection  (thead, tbody, tfoot)    → content unchanged
    tableCaption  (caption)                → ""
    tableColgroup (colgroup, col)          → ""
    table         (table)                  → "\\n\\n" + lines + "\\n\\n"

Table assembly:

table_replacement(content, node)
│
├─ should_skip_table(node)? ──► ""
├─ collapse blank lines, trim, drop empty lines
├─ line 2 already a separator? ──► keep
├─ otherwise insert build_separator_row(n) after line 1
│       n = get_table_col_count(node)          (ColumnCountSource.COLSPAN)
│       n = pipes in line 1 - 1                (ColumnCountSource.FIRST_LINE_PIPES)
└─ wrap in blank lines

================================================================================
"""
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from gfm_tables.core.dom import BaseDomNode
from gfm_tables.core.functions.cell_processor import render_cell, DEFAULT_MIN_CELL_WIDTH
from gfm_tables.core.functions.table_structure import (
    build_separator_row,
    get_table_col_count,
    is_heading_row,
    is_leading_row,
    is_separator_row,
    should_skip_table,
)
from gfm_tables.core.rules import BaseRuleRegistry, Rule

logger = logging.getLogger("gfm-tables")


class ColumnCountSource(Enum):
    """How the table rule sizes a synthesized separator."""
    COLSPAN = "colspan"
    FIRST_LINE_PIPES = "first_line_pipes"


@dataclass(frozen=True)
class TableRulesConfig:
    """Configuration for table rules.

    Attributes:
        min_cell_width: Width floor for sanitized cell content
        separator_column_source: Column counting used by the table rule
        skip_degenerate_tables: Drop empty and single-empty-cell tables
    """
    min_cell_width: int = DEFAULT_MIN_CELL_WIDTH
    separator_column_source: ColumnCountSource = ColumnCountSource.COLSPAN
    skip_degenerate_tables: bool = True


class TableRuleSet:
    """
    Replacement functions for table elements, bound to one configuration.

    Instances hold no state besides the config and may be shared across
    conversions.
    """

    def __init__(self, config: Optional[TableRulesConfig] = None):
        self.config = config or TableRulesConfig()
        self.logger = logging.getLogger("gfm-tables")

    def cell_replacement(self, content: str, node: BaseDomNode) -> str:
        return render_cell(content, node, None, self.config.min_cell_width)

    def row_replacement(self, content: str, node: BaseDomNode) -> str:
        """Row line, followed by a separator line for the leading header row."""
        if not content or not content.strip():
            self.logger.debug("Dropping empty table row")
            return ""

        separator = ""
        if is_heading_row(node) and is_leading_row(node):
            table = node.closest("table")
            separator = build_separator_row(get_table_col_count(table))

        if separator:
            return "\n" + content + "\n" + separator
        return "\n" + content

    def table_replacement(self, content: str, node: BaseDomNode) -> str:
        if self.config.skip_degenerate_tables and should_skip_table(node):
            self.logger.debug("Skipping degenerate table")
            return ""

        content = re.sub(r'\n+', '\n', content or "").strip()
        if not content:
            return ""

        lines = [line for line in content.split("\n") if line.strip()]
        if not lines:
            return ""

        if len(lines) < 2 or not is_separator_row(lines[1]):
            col_count = self._separator_col_count(lines[0], node)
            if col_count > 0:
                self.logger.debug(f"Synthesized separator with {col_count} columns")
                lines.insert(1, build_separator_row(col_count))
            else:
                self.logger.debug("Cannot determine column count, leaving table without separator")

        return "\n\n" + "\n".join(lines) + "\n\n"

    def section_replacement(self, content: str, node: BaseDomNode) -> str:
        return content

    def discard_replacement(self, content: str, node: BaseDomNode) -> str:
        return ""

    def _separator_col_count(self, first_line: str, node: BaseDomNode) -> int:
        if self.config.separator_column_source == ColumnCountSource.FIRST_LINE_PIPES:
            return first_line.count("|") - 1
        return get_table_col_count(node)

    def build_rules(self) -> Dict[str, Rule]:
        return {
            "tableCell": Rule(("th", "td"), self.cell_replacement),
            "tableRow": Rule(("tr",), self.row_replacement),
            "table": Rule(("table",), self.table_replacement),
            "tableSection": Rule(("thead", "tbody", "tfoot"), self.section_replacement),
            "tableCaption": Rule(("caption",), self.discard_replacement),
            "tableColgroup": Rule(("colgroup", "col"), self.discard_replacement),
        }


def create_table_rule_set(config: Optional[TableRulesConfig] = None) -> TableRuleSet:
    """
    Factory function to create a TableRuleSet.

    Args:
        config: Table rules configuration

    Returns:
        Configured TableRuleSet instance
    """
    return TableRuleSet(config)


def build_table_rules(config: Optional[TableRulesConfig] = None) -> Dict[str, Rule]:
    """Fresh mapping of rule name to Rule for every table element."""
    return create_table_rule_set(config).build_rules()


def register_table_rules(
    registry: BaseRuleRegistry,
    config: Optional[TableRulesConfig] = None,
) -> BaseRuleRegistry:
    """Register every table rule on the registry and return it."""
    for name, rule in build_table_rules(config).items():
        registry.add_rule(name, rule)
    return registry


# Setup-function name used by rule plugins
tables = register_table_rules

# Default configuration
DEFAULT_TABLE_RULES_CONFIG = TableRulesConfig()
