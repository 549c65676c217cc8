# gfm_tables/core/__init__.py
"""
Core - Rule Contracts, Table Rules and Host Walker

Usage Example:
    from gfm_tables.core import RuleRegistry, register_table_rules

    registry = register_table_rules(RuleRegistry())
"""

from gfm_tables.core.dom import (
    BaseDomNode,
    ELEMENT_NODE,
    TEXT_NODE,
    COMMENT_NODE,
    DOCUMENT_NODE,
)
from gfm_tables.core.rules import (
    Rule,
    BaseRuleRegistry,
    RuleRegistry,
)
from gfm_tables.core.processor import (
    ColumnCountSource,
    TableRulesConfig,
    TableRuleSet,
    SoupNode,
    build_table_rules,
    create_table_rule_set,
    register_table_rules,
    tables,
    DEFAULT_TABLE_RULES_CONFIG,
)
from gfm_tables.core.converter import MarkdownConverter

__all__ = [
    # DOM interface
    "BaseDomNode",
    "ELEMENT_NODE",
    "TEXT_NODE",
    "COMMENT_NODE",
    "DOCUMENT_NODE",
    # Rules
    "Rule",
    "BaseRuleRegistry",
    "RuleRegistry",
    # Table rules
    "ColumnCountSource",
    "TableRulesConfig",
    "TableRuleSet",
    "build_table_rules",
    "create_table_rule_set",
    "register_table_rules",
    "tables",
    "DEFAULT_TABLE_RULES_CONFIG",
    # DOM adapters
    "SoupNode",
    # Host
    "MarkdownConverter",
]
