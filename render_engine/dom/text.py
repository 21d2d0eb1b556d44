"""
Text and Comment node implementations for the DOM.
"""

from typing import Optional
from .node import Node, NodeType


class Text(Node):
    """Text node implementation for the DOM."""

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        """
        Initialize a text node.

        Args:
            data: The text content
            owner_document: The document that owns this node
        """
        super().__init__(NodeType.TEXT_NODE, owner_document)

        if data is None:
            data = ""

        self.node_name = "#text"
        self.node_value = data

    @property
    def data(self) -> str:
        return self.node_value

    @data.setter
    def data(self, value: str) -> None:
        self.node_value = value or ""


class Comment(Node):
    """Comment node; never styled."""

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        super().__init__(NodeType.COMMENT_NODE, owner_document)
        self.node_name = "#comment"
        self.node_value = data or ""
