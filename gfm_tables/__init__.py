# gfm_tables/__init__.py
"""
GFM Tables

Replacement rules that turn HTML table DOM nodes into GitHub-Flavored-Markdown
pipe tables, for use inside a rule-based HTML to Markdown engine.

Package Structure:
- core: Rule engine contracts and table rules
    - dom: BaseDomNode, the read-only DOM interface the rules rely on
    - rules: Rule and RuleRegistry
    - converter: MarkdownConverter, a minimal host that dispatches rules
    - functions: Cell sanitizing/rendering and table structure helpers
    - processor: Table rule set and the BeautifulSoup DOM adapter

Usage:
    from bs4 import BeautifulSoup
    from gfm_tables import MarkdownConverter, tables

    converter = MarkdownConverter().use(tables)
    markdown = converter.convert_soup(BeautifulSoup(html, "lxml"))
"""

__version__ = "0.1.0"

from gfm_tables.core import (
    BaseDomNode,
    MarkdownConverter,
    Rule,
    RuleRegistry,
    SoupNode,
    TableRulesConfig,
    ColumnCountSource,
    build_table_rules,
    register_table_rules,
    tables,
)

from gfm_tables import core

__all__ = [
    "__version__",
    "BaseDomNode",
    "MarkdownConverter",
    "Rule",
    "RuleRegistry",
    "SoupNode",
    "TableRulesConfig",
    "ColumnCountSource",
    "build_table_rules",
    "register_table_rules",
    "tables",
    "core",
]
