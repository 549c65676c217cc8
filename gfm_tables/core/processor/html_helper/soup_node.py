# gfm_tables/core/processor/html_helper/soup_node.py
"""
SoupNode - BeautifulSoup Adapter for BaseDomNode

Exposes a BeautifulSoup tree through the read-only DOM interface used by the
table rules. Adapters are created on demand and compare equal when they wrap
the same bs4 object.

Node type mapping:
- BeautifulSoup         → DOCUMENT_NODE ('#document')
- Tag                   → ELEMENT_NODE  (uppercase tag name)
- NavigableString       → TEXT_NODE     ('#text')
- Comment, Doctype, ... → COMMENT_NODE  ('#comment')
"""
import logging
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement

from gfm_tables.core.dom import (
    BaseDomNode,
    COMMENT_NODE,
    DOCUMENT_NODE,
    ELEMENT_NODE,
    TEXT_NODE,
)

logger = logging.getLogger("gfm-tables")

TABLE_SECTION_TAGS = ("thead", "tbody", "tfoot")


class SoupNode(BaseDomNode):
    """BaseDomNode implementation over a bs4 PageElement."""

    def __init__(self, element: PageElement):
        if not isinstance(element, PageElement):
            raise TypeError(f"SoupNode expects a bs4 element, got {type(element).__name__}")
        self.element = element

    @property
    def node_type(self) -> int:
        if isinstance(self.element, BeautifulSoup):
            return DOCUMENT_NODE
        if isinstance(self.element, Tag):
            return ELEMENT_NODE
        if type(self.element) is NavigableString:
            return TEXT_NODE
        return COMMENT_NODE

    @property
    def node_name(self) -> str:
        node_type = self.node_type
        if node_type == ELEMENT_NODE:
            return self.element.name.upper()
        if node_type == TEXT_NODE:
            return "#text"
        if node_type == DOCUMENT_NODE:
            return "#document"
        return "#comment"

    @property
    def child_nodes(self) -> List["SoupNode"]:
        if not isinstance(self.element, Tag):
            return []
        return [SoupNode(child) for child in self.element.contents]

    @property
    def parent_node(self) -> Optional["SoupNode"]:
        parent = self.element.parent
        return SoupNode(parent) if parent is not None else None

    @property
    def text_content(self) -> str:
        if isinstance(self.element, Tag):
            return self.element.get_text()
        return str(self.element)

    def get_attribute(self, name: str) -> Optional[str]:
        if self.node_type != ELEMENT_NODE:
            return None
        value = self.element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def closest(self, selector: str) -> Optional["SoupNode"]:
        if self.node_type == ELEMENT_NODE and self.element.name == selector.lower():
            return self
        parent = self.element.find_parent(selector.lower())
        return SoupNode(parent) if parent is not None else None

    def first_element_child(self) -> Optional["SoupNode"]:
        if not isinstance(self.element, Tag):
            return None
        child = self.element.find(True, recursive=False)
        return SoupNode(child) if child is not None else None

    def previous_element_sibling(self) -> Optional["SoupNode"]:
        sibling = self.element.find_previous_sibling(True)
        return SoupNode(sibling) if sibling is not None else None

    @property
    def rows(self) -> List["SoupNode"]:
        """tr rows of this table and its thead/tbody/tfoot, nested tables excluded."""
        if self.node_type != ELEMENT_NODE or self.element.name != "table":
            return []

        rows = []
        for child in self.element.find_all(True, recursive=False):
            if child.name == "tr":
                rows.append(SoupNode(child))
            elif child.name in TABLE_SECTION_TAGS:
                rows.extend(SoupNode(tr) for tr in child.find_all("tr", recursive=False))
        return rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SoupNode):
            return NotImplemented
        return self.element is other.element

    def __hash__(self) -> int:
        return id(self.element)

    def __repr__(self) -> str:
        return f"SoupNode({self.node_name})"
