"""
CSS style resolution for the render engine.
This package provides the viewport model, typed style values, selector matching and the cascade.
"""

from .viewport import Viewport, Breakpoint, MediaCondition, MinWidth, MaxWidth, BreakpointIs
from .style import Style, parse_color, parse_spacing_value, parse_spacing_value_with_viewport
from .selector import Selector, SelectorType
from .defaults import USER_AGENT_STYLES, user_agent_defaults
from .stylesheet import Rule, MediaRule, Stylesheet, INHERITABLE_PROPERTIES, is_inheritable_property
from .loader import load_rules

__all__ = [
    'Viewport', 'Breakpoint', 'MediaCondition', 'MinWidth', 'MaxWidth', 'BreakpointIs',
    'Style', 'parse_color', 'parse_spacing_value', 'parse_spacing_value_with_viewport',
    'Selector', 'SelectorType',
    'USER_AGENT_STYLES', 'user_agent_defaults',
    'Rule', 'MediaRule', 'Stylesheet', 'INHERITABLE_PROPERTIES', 'is_inheritable_property',
    'load_rules',
]
