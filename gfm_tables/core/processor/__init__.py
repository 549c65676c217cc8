# gfm_tables/core/processor/__init__.py
"""
Processor - Table Rule Set and DOM Adapters

Module Components:
- table_rules: TableRuleSet, its configuration and registration helpers
- html_helper/: BeautifulSoup adapter implementing BaseDomNode
"""

from gfm_tables.core.processor.table_rules import (
    ColumnCountSource,
    TableRulesConfig,
    TableRuleSet,
    build_table_rules,
    create_table_rule_set,
    register_table_rules,
    tables,
    DEFAULT_TABLE_RULES_CONFIG,
)
from gfm_tables.core.processor.html_helper import SoupNode

__all__ = [
    "ColumnCountSource",
    "TableRulesConfig",
    "TableRuleSet",
    "build_table_rules",
    "create_table_rule_set",
    "register_table_rules",
    "tables",
    "DEFAULT_TABLE_RULES_CONFIG",
    "SoupNode",
]
