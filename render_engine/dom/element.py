"""
Element implementation for the DOM.
"""

from typing import Iterable, List, Optional, Tuple
from .node import Node, NodeType


class Element(Node):
    """
    Element node implementation for the DOM.

    Attributes are kept as an ordered list of (key, value) pairs, in the
    order the markup declared them.
    """

    def __init__(self,
                 tag_name: str,
                 attributes: Optional[Iterable[Tuple[str, str]]] = None,
                 owner_document: Optional['Document'] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Optional initial (key, value) attribute pairs
            owner_document: The document that owns this element
        """
        super().__init__(NodeType.ELEMENT_NODE, owner_document)

        self.tag_name = tag_name.lower()
        self.node_name = self.tag_name.upper()
        self.attributes: List[Tuple[str, str]] = []

        for key, value in attributes or ():
            self.set_attribute(key, value)

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of the first attribute with the given name.

        Args:
            name: Attribute name

        Returns:
            The attribute value, or None if absent
        """
        for key, value in self.attributes:
            if key == name:
                return value
        return None

    def set_attribute(self, name: str, value: str) -> None:
        """
        Set an attribute, replacing an existing value in place.

        Args:
            name: Attribute name
            value: Attribute value
        """
        for index, (key, _) in enumerate(self.attributes):
            if key == name:
                self.attributes[index] = (name, value)
                return
        self.attributes.append((name, value))

    def has_attribute(self, name: str) -> bool:
        return any(key == name for key, _ in self.attributes)

    def remove_attribute(self, name: str) -> None:
        self.attributes = [(key, value) for key, value in self.attributes if key != name]

    def __repr__(self) -> str:
        return f"<Element {self.tag_name} id={self.node_id}>"
