"""
Font loading and text metrics for the render engine.
"""

from .manager import FontManager, estimate_text_width
from .table import FONT_TABLE, canonical_family, candidate_paths, current_platform, font_search_dirs

__all__ = [
    'FontManager', 'estimate_text_width',
    'FONT_TABLE', 'canonical_family', 'candidate_paths', 'current_platform', 'font_search_dirs',
]
