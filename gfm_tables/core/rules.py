# gfm_tables/core/rules.py
"""
Rules - Node Replacement Rules and Rule Registry

A Rule pairs a tag filter with a replacement function
(rendered_child_content, node) -> markdown. A registry collects named rules
for a conversion engine. Registries are plain instances: independent engines
never share rule state.

Module Components:
- ReplacementFunc: Signature of a rule's replacement function
- Rule: Frozen rule specification
- BaseRuleRegistry: Abstract interface expected by register_* setup functions
- RuleRegistry: Ordered, name-keyed registry (last registration wins)
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

from gfm_tables.core.dom import BaseDomNode, ELEMENT_NODE

logger = logging.getLogger("gfm-tables")

ReplacementFunc = Callable[[str, BaseDomNode], str]


@dataclass(frozen=True)
class Rule:
    """Replacement rule for a set of HTML tags.

    Attributes:
        filter: Lowercase tag names this rule applies to
        replacement: Function receiving the children's Markdown and the node
    """
    filter: Tuple[str, ...]
    replacement: ReplacementFunc

    def __post_init__(self):
        tags = _normalize_filter(self.filter)
        if not tags:
            raise ValueError("Rule filter must name at least one tag")
        if not callable(self.replacement):
            raise TypeError(f"Rule replacement must be callable, got {type(self.replacement).__name__}")
        object.__setattr__(self, "filter", tags)

    def matches(self, node: BaseDomNode) -> bool:
        return node.node_type == ELEMENT_NODE and node.node_name.lower() in self.filter


def _normalize_filter(tags: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    if isinstance(tags, str):
        tags = (tags,)
    return tuple(tag.lower() for tag in tags)


class BaseRuleRegistry(ABC):
    """Anything rules can be registered on."""

    @abstractmethod
    def add_rule(self, name: str, rule: Rule) -> "BaseRuleRegistry":
        pass


class RuleRegistry(BaseRuleRegistry):
    """
    Name-keyed rule registry.

    Re-adding a name replaces the earlier rule in place, so registering the
    same rule set twice leaves the registry unchanged in effect.
    """

    def __init__(self):
        self._rules: Dict[str, Rule] = {}

    def add_rule(self, name: str, rule: Rule) -> "RuleRegistry":
        if not isinstance(rule, Rule):
            raise TypeError(f"Expected Rule for {name!r}, got {type(rule).__name__}")
        if name in self._rules:
            logger.debug(f"Replacing rule {name!r}")
        self._rules[name] = rule
        return self

    @property
    def rules(self) -> Mapping[str, Rule]:
        return MappingProxyType(self._rules)

    def find_rule(self, node: BaseDomNode) -> Optional[Rule]:
        """First registered rule whose filter matches the node."""
        for rule in self._rules.values():
            if rule.matches(node):
                return rule
        return None

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)
