"""
Rule import from CSS text.

Parsing is delegated to cssutils; this module only converts the parsed
style and @media rules into Rule / MediaRule objects. Selectors and media
queries outside the supported simple forms are skipped, never approximated.
"""

import logging
import re
import xml.dom
from typing import List, Optional, Tuple

import cssutils
from cssutils import css

from ..utils.logging import log_exception
from .selector import Selector
from .style import Style
from .viewport import MaxWidth, MediaCondition, MinWidth

logger = logging.getLogger(__name__)

# Suppress cssutils warning logs
cssutils.log.setLevel(logging.CRITICAL)

_TAG = re.compile(r'^[a-zA-Z][a-zA-Z0-9-]*$')
_CLASS = re.compile(r'^\.([_a-zA-Z][\w-]*)$')
_ID = re.compile(r'^#([\w-]+)$')
_TAG_WITH_PSEUDO = re.compile(r'^([a-zA-Z][a-zA-Z0-9-]*)::?([\w-]+)$')
_MEDIA_WIDTH = re.compile(
    r'^(?:(?:only\s+)?(?:all|screen)\s+and\s+)?\(\s*(min|max)-width\s*:\s*([0-9]*\.?[0-9]+)(?:px)?\s*\)$',
    re.IGNORECASE,
)


def parse_selector(selector_text: str) -> Optional[Selector]:
    """
    Convert one simple selector to a Selector.

    Args:
        selector_text: e.g. 'h1', '.note', '#main', 'a:hover', '*'

    Returns:
        The selector, or None for unsupported forms (combinators, compounds, attributes)
    """
    text = selector_text.strip()
    if text == '*':
        return Selector.any()

    if _TAG.match(text):
        return Selector.tag(text.lower())

    match = _CLASS.match(text)
    if match:
        return Selector.class_(match.group(1))

    match = _ID.match(text)
    if match:
        return Selector.id(match.group(1))

    match = _TAG_WITH_PSEUDO.match(text)
    if match:
        return Selector.tag_with_pseudo(match.group(1).lower(), match.group(2))

    return None


def parse_media_condition(media_text: str) -> Optional[MediaCondition]:
    """
    Convert a media query to a MediaCondition.

    Args:
        media_text: e.g. '(min-width: 768px)' or 'screen and (max-width: 600px)'

    Returns:
        MinWidth / MaxWidth, or None for anything else
    """
    match = _MEDIA_WIDTH.match(media_text.strip())
    if not match:
        return None

    kind, width = match.groups()
    if kind.lower() == 'min':
        return MinWidth(float(width))
    return MaxWidth(float(width))


def _convert_style_rule(rule: css.CSSStyleRule) -> List[Tuple[Selector, Style]]:
    """Convert a cssutils style rule into one (selector, declarations) pair per supported selector."""
    declarations = Style({prop.name.lower(): prop.value for prop in rule.style})

    converted = []
    for selector in rule.selectorList:
        parsed = parse_selector(selector.selectorText)
        if parsed is None:
            logger.debug(f"Skipping unsupported selector {selector.selectorText!r}")
            continue
        converted.append((parsed, declarations.copy()))
    return converted


def load_rules(css_text: str, stylesheet=None):
    """
    Parse CSS text and register its rules on a stylesheet.

    Args:
        css_text: CSS source
        stylesheet: Stylesheet to populate (a new one if omitted)

    Returns:
        The populated stylesheet
    """
    from .stylesheet import Rule, Stylesheet

    if stylesheet is None:
        stylesheet = Stylesheet()

    try:
        sheet = cssutils.parseString(css_text)
    except (xml.dom.DOMException, ValueError) as e:
        log_exception(logger, e, "Error parsing CSS")
        return stylesheet

    rule_count = 0
    for rule in sheet.cssRules:
        if rule.type == css.CSSRule.STYLE_RULE:
            for selector, declarations in _convert_style_rule(rule):
                stylesheet.add_rule(selector, declarations)
                rule_count += 1

        elif rule.type == css.CSSRule.MEDIA_RULE:
            media_text = rule.media.mediaText
            condition = parse_media_condition(media_text)
            if condition is None:
                logger.warning(f"Skipping unsupported media query {media_text!r}")
                continue

            rules = []
            for inner in rule.cssRules:
                if inner.type == css.CSSRule.STYLE_RULE:
                    rules.extend(Rule(selector, declarations)
                                 for selector, declarations in _convert_style_rule(inner))
            stylesheet.add_media_rule(condition, rules)
            rule_count += len(rules)

    logger.debug(f"Loaded {rule_count} rules from CSS ({len(stylesheet.media_rules)} media blocks)")
    return stylesheet
