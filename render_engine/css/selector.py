"""
CSS Selector matching.
This module matches the simple selector forms the cascade supports against DOM elements.
"""

from enum import Enum
from typing import Optional

from ..dom import Node, NodeType


class SelectorType(Enum):
    """The closed set of supported selector forms."""
    TAG = "tag"
    CLASS = "class"
    ID = "id"
    TAG_WITH_PSEUDO = "tag_with_pseudo"
    ANY = "any"


class Selector:
    """
    A simple selector: tag, class, id, tag with pseudo-class, or wildcard.

    Build instances with the constructors below rather than directly.
    """

    __slots__ = ('selector_type', 'value', 'pseudo_class')

    def __init__(self, selector_type: SelectorType, value: Optional[str] = None,
                 pseudo_class: Optional[str] = None):
        """
        Initialize a selector.

        Args:
            selector_type: Selector form
            value: Tag name, class or id value (None for ANY)
            pseudo_class: Pseudo-class name for TAG_WITH_PSEUDO
        """
        self.selector_type = selector_type
        self.value = value
        self.pseudo_class = pseudo_class

    @classmethod
    def tag(cls, name: str) -> 'Selector':
        return cls(SelectorType.TAG, name)

    @classmethod
    def class_(cls, name: str) -> 'Selector':
        return cls(SelectorType.CLASS, name)

    @classmethod
    def id(cls, name: str) -> 'Selector':
        return cls(SelectorType.ID, name)

    @classmethod
    def tag_with_pseudo(cls, name: str, pseudo_class: str) -> 'Selector':
        return cls(SelectorType.TAG_WITH_PSEUDO, name, pseudo_class)

    @classmethod
    def any(cls) -> 'Selector':
        return cls(SelectorType.ANY)

    def matches(self, node: Node) -> bool:
        """
        Check whether this selector matches a node.

        Class and id compare against the whole attribute value, so
        class="a b" does not match '.a'. Pseudo-classes are not evaluated:
        'a:hover' matches every 'a'.

        Args:
            node: DOM node to test; only elements can match

        Returns:
            True if the selector matches
        """
        if node.node_type != NodeType.ELEMENT_NODE:
            return False

        if self.selector_type == SelectorType.ANY:
            return True
        if self.selector_type == SelectorType.TAG:
            return self.value == '*' or self.value == node.tag_name
        if self.selector_type == SelectorType.TAG_WITH_PSEUDO:
            return self.value == node.tag_name
        if self.selector_type == SelectorType.ID:
            return any(key == 'id' and value == self.value for key, value in node.attributes)
        if self.selector_type == SelectorType.CLASS:
            return any(key == 'class' and value == self.value for key, value in node.attributes)
        return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return (self.selector_type, self.value, self.pseudo_class) == \
            (other.selector_type, other.value, other.pseudo_class)

    def __hash__(self) -> int:
        return hash((self.selector_type, self.value, self.pseudo_class))

    def __repr__(self) -> str:
        if self.selector_type == SelectorType.ANY:
            return "Selector(*)"
        if self.selector_type == SelectorType.CLASS:
            return f"Selector(.{self.value})"
        if self.selector_type == SelectorType.ID:
            return f"Selector(#{self.value})"
        if self.selector_type == SelectorType.TAG_WITH_PSEUDO:
            return f"Selector({self.value}:{self.pseudo_class})"
        return f"Selector({self.value})"
