"""
DOM Implementation for the render engine.
This package provides the id-addressable document tree the style resolver reads.
"""

from .node import Node, NodeType
from .element import Element
from .text import Text, Comment
from .document import Document

__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'Comment', 'Document'
]
