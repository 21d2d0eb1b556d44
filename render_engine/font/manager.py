"""
Font loading and text measurement.
This module resolves font families to files, owns their bytes, and measures text with Pillow.
"""

import io
import logging
from typing import Dict, List, Optional, Tuple

from PIL import ImageFont

from .table import candidate_paths, current_platform, font_search_dirs

logger = logging.getLogger(__name__)

# Average glyph advance as a fraction of font size when no font resolves
FALLBACK_ADVANCE = 0.5

FontKey = Tuple[str, bool, bool]


def estimate_text_width(text: str, font_size: float) -> float:
    """Heuristic width used when no font file is available."""
    return len(text) * font_size * FALLBACK_ADVANCE


class FontManager:
    """
    Font cache and text measurer.

    Loaded font bytes are owned by the manager and released by clear().
    Not thread-safe: callers sharing an instance must serialize access.
    """

    def __init__(self, platform: Optional[str] = None, search_dirs: Optional[List[str]] = None,
                 extra_dirs: Optional[List[str]] = None):
        """
        Initialize the font manager.

        Args:
            platform: Font table platform key (the running OS if omitted)
            search_dirs: Font directories (the platform's defaults if omitted)
            extra_dirs: Directories searched before the defaults
        """
        self.platform = platform if platform is not None else current_platform()
        if search_dirs is None:
            search_dirs = font_search_dirs(self.platform)
        self.search_dirs: List[str] = list(extra_dirs or []) + list(search_dirs)

        # None records a family/variant that failed to resolve
        self._font_data: Dict[FontKey, Optional[bytes]] = {}
        self._sized_fonts: Dict[Tuple[FontKey, float], ImageFont.FreeTypeFont] = {}

        logger.debug(f"FontManager initialized (platform: {self.platform}, dirs: {self.search_dirs})")

    @classmethod
    def from_config(cls, config) -> 'FontManager':
        """
        Create a font manager from configuration.

        Args:
            config: Config providing 'fonts.extra_dirs'
        """
        extra_dirs = config.get('fonts.extra_dirs', []) or []
        return cls(extra_dirs=[str(path) for path in extra_dirs])

    def load_font_variant(self, family: str, bold: bool = False, italic: bool = False) -> Optional[bytes]:
        """
        Load font bytes for a family list and variant.

        Comma-separated family lists are tried in order.

        Args:
            family: Font family or comma-separated family list
            bold: Bold variant
            italic: Italic variant

        Returns:
            Font file bytes, or None if nothing resolved
        """
        key = (family, bold, italic)
        if key in self._font_data:
            return self._font_data[key]

        data = None
        for name in (part.strip() for part in family.split(',')):
            if not name:
                continue
            data = self._read_first_valid(name, bold, italic)
            if data is not None:
                break

        if data is None:
            logger.debug(f"No font found for {family!r} (bold={bold}, italic={italic})")
        self._font_data[key] = data
        return data

    def _read_first_valid(self, family: str, bold: bool, italic: bool) -> Optional[bytes]:
        for path in candidate_paths(family, bold, italic, self.platform, self.search_dirs):
            try:
                with open(path, 'rb') as f:
                    data = f.read()
            except OSError:
                continue

            try:
                ImageFont.truetype(io.BytesIO(data), 12)
            except OSError as e:
                logger.debug(f"Unusable font file {path}: {e}")
                continue

            logger.debug(f"Loaded font {path} for {family!r}")
            return data
        return None

    def get_font(self, family: str, size: float, bold: bool = False,
                 italic: bool = False) -> Optional[ImageFont.FreeTypeFont]:
        """
        Get a sized Pillow font for a family and variant.

        Returns:
            The font, or None if the family did not resolve
        """
        key = (family, bold, italic)
        sized_key = (key, size)
        if sized_key in self._sized_fonts:
            return self._sized_fonts[sized_key]

        data = self.load_font_variant(family, bold, italic)
        if data is None:
            return None

        font = ImageFont.truetype(io.BytesIO(data), size)
        self._sized_fonts[sized_key] = font
        return font

    def measure_text(self, text: str, font_family: str, font_size: float,
                     bold: bool = False, italic: bool = False) -> float:
        """
        Measure the advance width of a text run.

        Args:
            text: Text to measure
            font_family: Font family or comma-separated family list
            font_size: Font size in pixels
            bold: Bold variant
            italic: Italic variant

        Returns:
            Width in pixels; len(text) * font_size * 0.5 when no font resolves
        """
        if font_size <= 0:
            return estimate_text_width(text, font_size)

        font = self.get_font(font_family, font_size, bold, italic)
        if font is None:
            return estimate_text_width(text, font_size)
        return float(font.getlength(text))

    def clear(self) -> None:
        """Release every cached font."""
        self._font_data.clear()
        self._sized_fonts.clear()
