"""
Node implementation for the DOM.
This module implements the minimal DOM Node interface the style resolver reads.
"""

from enum import IntEnum
from typing import List, Optional


class NodeType(IntEnum):
    """Node types as defined in the HTML5 specification."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9


class Node:
    """
    Base Node implementation for the DOM.

    Every node carries an opaque integer id assigned by its owning
    document, so collaborators can address nodes without holding references.
    """

    def __init__(self, node_type: NodeType, owner_document: Optional['Document'] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            owner_document: The document that owns this node
        """
        self.node_type = node_type
        self.owner_document = owner_document
        self.node_id: Optional[int] = None

        # Node relationships
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []
        self.previous_sibling: Optional['Node'] = None
        self.next_sibling: Optional['Node'] = None

        self.node_name: str = "#node"
        self.node_value: Optional[str] = None

    @property
    def parent_id(self) -> Optional[int]:
        """Get the id of the parent node, or None for a root."""
        return self.parent_node.node_id if self.parent_node is not None else None

    @property
    def children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if child.node_type == NodeType.ELEMENT_NODE]

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        # If child already has a parent, remove it first
        if child.parent_node is not None:
            child.parent_node.remove_child(child)

        child.parent_node = self

        if self.child_nodes:
            last_child = self.child_nodes[-1]
            last_child.next_sibling = child
            child.previous_sibling = last_child

        self.child_nodes.append(child)
        return child

    def remove_child(self, child: 'Node') -> 'Node':
        """
        Remove a child node from this node.

        Args:
            child: The node to remove

        Returns:
            The removed node

        Raises:
            ValueError: If the node is not a child of this node
        """
        if child not in self.child_nodes:
            raise ValueError("Child not found in child nodes")

        prev_sibling = child.previous_sibling
        next_sibling = child.next_sibling

        if prev_sibling is not None:
            prev_sibling.next_sibling = next_sibling
        if next_sibling is not None:
            next_sibling.previous_sibling = prev_sibling

        child.parent_node = None
        child.previous_sibling = None
        child.next_sibling = None

        self.child_nodes.remove(child)
        return child

    def ancestors(self) -> List['Node']:
        """
        Get the ancestor chain of this node.

        Returns:
            Ancestors ordered from the root down to the direct parent
        """
        chain = []
        current = self.parent_node
        while current is not None:
            chain.append(current)
            current = current.parent_node
        chain.reverse()
        return chain

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.node_name} id={self.node_id}>"
