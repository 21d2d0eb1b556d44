"""
Document implementation for the DOM.
This module owns the node tree and addresses nodes by opaque integer id.
"""

import logging
from typing import Dict, Iterator, List, Optional, Union

import html5lib

from .node import Node, NodeType
from .element import Element
from .text import Text, Comment

logger = logging.getLogger(__name__)


class Document(Node):
    """
    Document node implementation for the DOM.

    The document is the root of the tree (id 0) and the registry every
    node id resolves through.
    """

    def __init__(self, create_base_structure: bool = True):
        """
        Initialize a new Document object.

        Args:
            create_base_structure: Whether to create empty html/head/body elements
        """
        super().__init__(NodeType.DOCUMENT_NODE)
        self.node_name = "#document"
        self.document_element: Optional[Element] = None
        self.head: Optional[Element] = None
        self.body: Optional[Element] = None

        self._nodes: Dict[int, Node] = {}
        self._next_id = 0
        self._register(self)

        if create_base_structure:
            self._create_base_structure()

    def _create_base_structure(self) -> None:
        """Create the basic HTML document structure."""
        html = self.create_element("html")
        self.append_child(html)
        self.document_element = html

        head = self.create_element("head")
        html.append_child(head)
        self.head = head

        body = self.create_element("body")
        html.append_child(body)
        self.body = body

    def _register(self, node: Node) -> Node:
        """Assign the next free id to a node and index it."""
        node.node_id = self._next_id
        node.owner_document = self
        self._nodes[node.node_id] = node
        self._next_id += 1
        return node

    def adopt(self, node: Node) -> Node:
        """
        Register a node (and its subtree) created outside this document.

        Args:
            node: Root of the subtree to adopt

        Returns:
            The adopted node
        """
        stack = [node]
        while stack:
            current = stack.pop()
            if current.owner_document is not self or current.node_id is None:
                self._register(current)
            stack.extend(reversed(current.child_nodes))
        return node

    def create_element(self, tag_name: str, attributes=None) -> Element:
        """
        Create a new element owned by this document.

        Args:
            tag_name: Element tag name
            attributes: Optional iterable of (key, value) pairs

        Returns:
            The new element
        """
        return self._register(Element(tag_name, attributes))

    def create_text_node(self, data: str) -> Text:
        """Create a new text node owned by this document."""
        return self._register(Text(data))

    def create_comment(self, data: str) -> Comment:
        """Create a new comment node owned by this document."""
        return self._register(Comment(data))

    def get_node(self, node_id: int) -> Node:
        """
        Look up a node by id.

        Args:
            node_id: Node id assigned by this document

        Returns:
            The node

        Raises:
            KeyError: If no node with this id belongs to the document
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise KeyError(f"Unknown node id: {node_id}") from None

    def __contains__(self, node_id: int) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def iter_nodes(self) -> Iterator[Node]:
        """Iterate attached nodes in document (pre-)order, starting with the document itself."""
        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.child_nodes))

    def get_elements_by_tag_name(self, tag_name: str) -> List[Element]:
        """
        Get all elements with the given tag name in document order.

        Args:
            tag_name: Tag name, or '*' for every element

        Returns:
            Matching elements
        """
        tag_name = tag_name.lower()
        return [node for node in self.iter_nodes()
                if node.node_type == NodeType.ELEMENT_NODE
                and (tag_name == '*' or node.tag_name == tag_name)]

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        for element in self.get_elements_by_tag_name('*'):
            if element.get_attribute('id') == element_id:
                return element
        return None

    @property
    def style_texts(self) -> List[str]:
        """Get the contents of every <style> element in document order."""
        return [element.style_content for element in self.get_elements_by_tag_name('style')
                if getattr(element, 'style_content', None)]

    def parse_html(self, html_content: Union[str, bytes]) -> bool:
        """
        Parse HTML content and replace this document's tree.

        Args:
            html_content: The HTML content to parse

        Returns:
            True if parsing was successful, False otherwise
        """
        if html_content is None:
            logger.error("Cannot parse None HTML content")
            return False

        if isinstance(html_content, bytes):
            html_content = html_content.decode('utf-8', errors='replace')

        # Clear existing content and ids
        for child in list(self.child_nodes):
            self.remove_child(child)
        self._nodes = {}
        self._next_id = 0
        self._register(self)
        self.document_element = None
        self.head = None
        self.body = None

        logger.debug(f"Parsing HTML content (first 100 chars): {html_content[:100]}...")

        parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
        try:
            parsed = parser.parse(html_content)
        except (ValueError, TypeError) as e:
            logger.error(f"Error in HTML parser: {e}")
            self._create_base_structure()
            return False

        self._convert_parsed_document(parsed)
        self._update_references()

        if self.document_element is None:
            logger.warning("No document element after parsing, creating base structure")
            self._create_base_structure()

        logger.debug(f"Parsed document with {len(self._nodes)} nodes")
        return True

    def _convert_parsed_document(self, parsed_doc) -> None:
        """
        Convert a parsed html5lib document to our DOM structure.

        Args:
            parsed_doc: The parsed document from html5lib
        """
        root = getattr(parsed_doc, 'documentElement', None)
        if root is None:
            return

        html_element = self._convert_element(root)
        self.append_child(html_element)
        self.document_element = html_element

        for child in root.childNodes:
            self._convert_parsed_nodes(child, html_element)

    def _convert_parsed_nodes(self, node, parent: Node) -> None:
        """
        Recursively convert parsed nodes to our DOM structure.

        Args:
            node: The parsed node from html5lib
            parent: The parent node in our DOM structure
        """
        node_type = getattr(node, 'nodeType', None)

        if node_type == NodeType.TEXT_NODE:
            # Whitespace-only runs between tags carry no content
            text_content = node.nodeValue
            if text_content and text_content.strip():
                parent.append_child(self.create_text_node(text_content))
        elif node_type == NodeType.COMMENT_NODE:
            parent.append_child(self.create_comment(node.nodeValue))
        elif node_type == NodeType.ELEMENT_NODE:
            element = self._convert_element(node)
            parent.append_child(element)

            # Style and script bodies are data, not rendered text
            if element.tag_name in ('style', 'script'):
                return

            for child in node.childNodes:
                self._convert_parsed_nodes(child, element)

    def _convert_element(self, element) -> Element:
        """
        Convert an html5lib element to our Element implementation.

        Args:
            element: The element from html5lib to convert

        Returns:
            Our Element implementation
        """
        tag_name = element.tagName.lower()
        attributes = [(name, value) for name, value in element.attributes.items()
                      if name is not None and value is not None]
        new_element = self.create_element(tag_name, attributes)

        if tag_name == 'style':
            new_element.style_content = "".join(
                child.nodeValue for child in element.childNodes
                if child.nodeType == NodeType.TEXT_NODE
            )

        return new_element

    def _update_references(self) -> None:
        """Update references to the head and body elements."""
        if self.document_element is None:
            return

        for child in self.document_element.children:
            if child.tag_name == 'head' and self.head is None:
                self.head = child
            elif child.tag_name == 'body' and self.body is None:
                self.body = child
