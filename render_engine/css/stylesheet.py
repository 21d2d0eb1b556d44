"""
Stylesheet and cascade engine.

Resolves the effective style of a document node from four ordered layers:
inherited parent properties, user-agent defaults, author rules, and media
rules active for the viewport. Within and across layers the last write to
a property wins; there is no specificity weighting.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Union

from ..dom import Document, Node, NodeType
from ..utils.logging import PerformanceLogger
from .defaults import user_agent_defaults
from .selector import Selector
from .style import Style
from .viewport import MediaCondition, Viewport

logger = logging.getLogger(__name__)

INHERITABLE_PROPERTIES = frozenset({
    'font-family', 'font-size', 'font-weight', 'font-style',
    'color', 'line-height', 'text-align', 'text-decoration',
    'font-variant', 'letter-spacing', 'word-spacing',
})


def is_inheritable_property(name: str) -> bool:
    """Check whether a property propagates from parent to child elements."""
    return name in INHERITABLE_PROPERTIES


class Rule:
    """A selector paired with the declarations it applies."""

    def __init__(self, selector: Selector, declarations: Union[Style, Mapping[str, str]]):
        """
        Initialize a rule.

        Args:
            selector: Selector deciding which elements the rule applies to
            declarations: Properties written to matching elements
        """
        self.selector = selector
        self.declarations = declarations if isinstance(declarations, Style) else Style(declarations)

    def apply_to(self, node: Node, style: Style) -> bool:
        """
        Overwrite style with this rule's declarations if the node matches.

        Returns:
            True if the rule matched
        """
        if not self.selector.matches(node):
            return False
        style.update(self.declarations)
        return True

    def __repr__(self) -> str:
        return f"Rule({self.selector!r}, {self.declarations.properties!r})"


class MediaRule:
    """An ordered list of rules gated by a single media condition."""

    def __init__(self, condition: MediaCondition, rules: Iterable[Rule]):
        self.condition = condition
        self.rules: List[Rule] = list(rules)

    def __repr__(self) -> str:
        return f"MediaRule({self.condition!r}, {len(self.rules)} rules)"


class Stylesheet:
    """
    Author stylesheet and cascade engine.

    Register rules first, then query. Registration is additive only and
    must not overlap with queries in flight.
    """

    def __init__(self, viewport: Optional[Viewport] = None):
        """
        Initialize an empty stylesheet.

        Args:
            viewport: Default viewport for compute_style (1200x800 if omitted)
        """
        self.rules: List[Rule] = []
        self.media_rules: List[MediaRule] = []
        self._viewport = viewport if viewport is not None else Viewport()
        self._perf = PerformanceLogger(logger, "Stylesheet")

    @classmethod
    def from_css(cls, css_text: str, viewport: Optional[Viewport] = None) -> 'Stylesheet':
        """
        Build a stylesheet from CSS text.

        Args:
            css_text: CSS source; unsupported constructs are skipped
            viewport: Default viewport

        Returns:
            A populated stylesheet
        """
        from .loader import load_rules

        stylesheet = cls(viewport)
        load_rules(css_text, stylesheet)
        return stylesheet

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def set_viewport(self, viewport: Viewport) -> None:
        """Set the viewport used by compute_style."""
        self._viewport = viewport

    def add_rule(self, selector: Selector, declarations: Union[Style, Mapping[str, str]]) -> Rule:
        """
        Register an unconditional author rule.

        Args:
            selector: Rule selector
            declarations: Properties the rule sets

        Returns:
            The registered rule
        """
        rule = Rule(selector, declarations)
        self.rules.append(rule)
        return rule

    def add_media_rule(self, condition: MediaCondition, rules: Iterable[Rule]) -> MediaRule:
        """
        Register a block of rules that applies only while a condition holds.

        Args:
            condition: Media condition evaluated against the viewport
            rules: Rules in the block, applied in order

        Returns:
            The registered media rule
        """
        media_rule = MediaRule(condition, rules)
        self.media_rules.append(media_rule)
        return media_rule

    def compute_style(self, document: Document, node_id: int) -> Style:
        """
        Compute the style of a node using the stylesheet's viewport.

        Args:
            document: Document owning the node
            node_id: Id of the node to resolve

        Returns:
            A new Style owned by the caller

        Raises:
            KeyError: If node_id is not part of the document
        """
        return self.compute_style_with_viewport(document, node_id, self._viewport)

    def compute_style_with_viewport(self, document: Document, node_id: int, viewport: Viewport) -> Style:
        """
        Compute the style of a node against an explicit viewport.

        Args:
            document: Document owning the node
            node_id: Id of the node to resolve
            viewport: Viewport the media rules are evaluated against

        Returns:
            A new Style owned by the caller

        Raises:
            KeyError: If node_id is not part of the document
        """
        return self._resolve(document, node_id, viewport, {})

    def compute_all_styles(self, document: Document, viewport: Optional[Viewport] = None) -> Dict[int, Style]:
        """
        Compute the style of every node in one top-down pass.

        Each node is resolved once; results are identical to calling
        compute_style_with_viewport per node.

        Args:
            document: Document to resolve
            viewport: Viewport override (the stylesheet's viewport if omitted)

        Returns:
            Mapping of node id to an independent Style
        """
        if viewport is None:
            viewport = self._viewport

        self._perf.start("compute_all_styles")
        memo: Dict[int, Style] = {}
        for node in document.iter_nodes():
            if node.node_id is None:
                # Attached with append_child but never registered on the document
                logger.debug(f"Skipping unregistered node {node!r}")
                continue
            self._resolve(document, node.node_id, viewport, memo)
        self._perf.end("compute_all_styles")

        logger.debug(f"Resolved {len(memo)} node styles at {viewport!r}")
        return memo

    def _resolve(self, document: Document, node_id: int, viewport: Viewport,
                 memo: Dict[int, Style]) -> Style:
        """Resolve a node, resolving any unresolved ancestors root-first."""
        if node_id in memo:
            return memo[node_id]

        # Collect the unresolved part of the ancestor chain
        chain = []
        current_id = node_id
        while current_id is not None and current_id not in memo:
            node = document.get_node(current_id)
            chain.append(node)
            current_id = node.parent_id

        for node in reversed(chain):
            parent_id = node.parent_id
            parent_style = memo[parent_id] if parent_id is not None else None
            memo[node.node_id] = self._cascade(node, parent_style, viewport)

        return memo[node_id]

    def _cascade(self, node: Node, parent_style: Optional[Style], viewport: Viewport) -> Style:
        """
        Run the cascade for one node given its parent's resolved style.

        Args:
            node: Node to resolve
            parent_style: Fully resolved parent style, or None at the root
            viewport: Active viewport

        Returns:
            The node's resolved style
        """
        if node.node_type == NodeType.TEXT_NODE:
            # Text takes the parent's complete style, not just inheritable properties
            return parent_style.copy() if parent_style is not None else Style()

        result = Style()
        if node.node_type != NodeType.ELEMENT_NODE:
            return result

        # 1. Inherited properties
        if parent_style is not None:
            for key, value in parent_style.items():
                if key in INHERITABLE_PROPERTIES:
                    result[key] = value

        # 2. User-agent defaults
        for key, value in user_agent_defaults(node.tag_name):
            result[key] = value

        # 3. Author rules
        for rule in self.rules:
            rule.apply_to(node, result)

        # 4. Media rules, always after every author rule
        for media_rule in self.media_rules:
            if not media_rule.condition.matches(viewport):
                continue
            for rule in media_rule.rules:
                rule.apply_to(node, result)

        return result

    def __repr__(self) -> str:
        return (f"Stylesheet({len(self.rules)} rules, {len(self.media_rules)} media rules, "
                f"viewport={self._viewport!r})")
