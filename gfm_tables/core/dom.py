# gfm_tables/core/dom.py
"""
DOM - Abstract Node Interface

Defines the read-only capability surface the table rules need from a parsed
HTML tree. Any DOM implementation (BeautifulSoup adapter, browser bridge,
test fake) can drive the rules by implementing BaseDomNode.

Module Components:
- ELEMENT_NODE / TEXT_NODE / COMMENT_NODE / DOCUMENT_NODE: node type codes
- BaseDomNode: Abstract base class for DOM node adapters

Usage Example:
    from gfm_tables.core.dom import BaseDomNode, ELEMENT_NODE

    class MyNode(BaseDomNode):
        @property
        def node_type(self) -> int:
            return ELEMENT_NODE
        ...
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

logger = logging.getLogger("gfm-tables")


ELEMENT_NODE = 1
TEXT_NODE = 3
COMMENT_NODE = 8
DOCUMENT_NODE = 9


class BaseDomNode(ABC):
    """Abstract base class for DOM node adapters.

    Implementations only need read access. The rules never mutate a node.

    Required members:
        node_type: One of the *_NODE constants
        node_name: Uppercase tag name for elements, '#text' etc. otherwise
        child_nodes: Ordered children (text nodes included)
        parent_node: Parent node or None for a root
        text_content: Concatenated text of the subtree
        get_attribute(): Attribute value or None
        closest(): Nearest ancestor-or-self with the given tag name
        rows: Logical rows of a TABLE (empty for other nodes)
    """

    @property
    @abstractmethod
    def node_type(self) -> int:
        pass

    @property
    @abstractmethod
    def node_name(self) -> str:
        pass

    @property
    @abstractmethod
    def child_nodes(self) -> List["BaseDomNode"]:
        pass

    @property
    @abstractmethod
    def parent_node(self) -> Optional["BaseDomNode"]:
        pass

    @property
    @abstractmethod
    def text_content(self) -> str:
        pass

    @abstractmethod
    def get_attribute(self, name: str) -> Optional[str]:
        pass

    @abstractmethod
    def closest(self, selector: str) -> Optional["BaseDomNode"]:
        pass

    @property
    @abstractmethod
    def rows(self) -> List["BaseDomNode"]:
        pass

    def element_children(self) -> List["BaseDomNode"]:
        """Children of element type, text and comment nodes skipped."""
        return [child for child in self.child_nodes if child.node_type == ELEMENT_NODE]

    def first_element_child(self) -> Optional["BaseDomNode"]:
        for child in self.child_nodes:
            if child.node_type == ELEMENT_NODE:
                return child
        return None

    def previous_element_sibling(self) -> Optional["BaseDomNode"]:
        """Nearest preceding element sibling. Adapters with sibling links should override."""
        parent = self.parent_node
        if parent is None:
            return None
        previous = None
        for sibling in parent.element_children():
            if sibling == self:
                return previous
            previous = sibling
        return None

    def is_first_element(self) -> bool:
        """True when no element sibling precedes this node (orphans included)."""
        return self.previous_element_sibling() is None
