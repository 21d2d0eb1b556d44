"""
Render Engine - style resolution core of a small document-rendering engine.
"""

# Package information
__version__ = "0.1.0"
__description__ = "Style resolution core: cascade, inheritance and responsive overrides"

from render_engine.css import Stylesheet, Style, Selector, Viewport, Breakpoint  # noqa: E402
from render_engine.dom import Document  # noqa: E402

__all__ = ['Stylesheet', 'Style', 'Selector', 'Viewport', 'Breakpoint', 'Document']
