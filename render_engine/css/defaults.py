"""
User-agent default styles.

Baseline presentation per tag name, applied before any author rule. The
table is plain data so it can be inspected or extended without touching
the cascade.
"""

from typing import Dict, List, Tuple

Declarations = List[Tuple[str, str]]

_BLOCK_MARGIN = "0.3em 0.5em"
_RULE_BORDER = "1px solid #ccc"

USER_AGENT_STYLES: Dict[str, Declarations] = {
    # Hyperlink
    "a": [("color", "#0000ff"), ("text-decoration", "underline")],

    # Text formatting
    "b": [("font-weight", "bold")],
    "strong": [("font-weight", "bold")],
    "i": [("font-style", "italic")],
    "em": [("font-style", "italic")],
    "u": [("text-decoration", "underline")],
    "s": [("text-decoration", "line-through")],
    "del": [("text-decoration", "line-through")],
    "code": [("font-family", "monospace")],
    "pre": [("font-family", "monospace"), ("margin", "1em 0.5em")],

    # Headings
    "h1": [("font-size", "2em"), ("font-weight", "bold"), ("margin", "0.3em 0.5em")],
    "h2": [("font-size", "1.5em"), ("font-weight", "bold"), ("margin", "0.25em 0.5em")],
    "h3": [("font-size", "1.17em"), ("font-weight", "bold"), ("margin", "0.2em 0.5em")],
    "h4": [("font-size", "1em"), ("font-weight", "bold"), ("margin", "0.2em 0.5em")],
    "h5": [("font-size", "0.83em"), ("font-weight", "bold"), ("margin", "0.2em 0.5em")],
    "h6": [("font-size", "0.67em"), ("font-weight", "bold"), ("margin", "0.2em 0.5em")],

    "p": [("margin", _BLOCK_MARGIN)],

    # Lists
    "ul": [("margin", _BLOCK_MARGIN), ("padding-left", "40px")],
    "ol": [("margin", _BLOCK_MARGIN), ("padding-left", "40px")],
    "li": [("margin", "0")],
    "dl": [("margin", _BLOCK_MARGIN)],
    "dt": [("font-weight", "bold")],
    "dd": [("margin-left", "2em")],

    # Blocks
    "blockquote": [("margin", "0.3em 0 0.3em 2em")],
    "hr": [("margin", _BLOCK_MARGIN), ("border", _RULE_BORDER)],
    "address": [("margin", _BLOCK_MARGIN), ("font-style", "italic")],

    # HTML5 sectioning
    "article": [("margin", "0")],
    "aside": [("margin", "0")],
    "section": [("margin", "0")],
    "header": [("margin", "0")],
    "footer": [("margin", "0")],
    "nav": [("margin", "0")],
    "main": [("margin", "0")],
    "figure": [("margin", "0.3em 2em")],
    "figcaption": [("font-style", "italic"), ("margin", "0")],

    # Forms
    "form": [("margin", _BLOCK_MARGIN)],
    "fieldset": [("margin", _BLOCK_MARGIN), ("padding", "0.5em"), ("border", _RULE_BORDER)],
    "legend": [("padding", "0 0.25em")],

    "table": [("margin", _BLOCK_MARGIN), ("border-collapse", "collapse")],

    "body": [("margin", "8px")],
}


def user_agent_defaults(tag_name: str) -> Declarations:
    """
    Get the user-agent declarations for a tag.

    Args:
        tag_name: Element tag name

    Returns:
        (property, value) pairs; empty for tags without defaults
    """
    return list(USER_AGENT_STYLES.get(tag_name, ()))
