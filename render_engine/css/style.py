"""
Resolved style property bag and typed value accessors.

Properties are stored as raw strings. Accessors parse on read and never
raise: absent or malformed values degrade to the documented default so a
bad author declaration only loses fidelity for that one property.
"""

import logging
import re
from typing import Dict, Iterator, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

# Pixels per em/rem; there is no font-relative context at this layer
EM_SIZE = 16.0

DEFAULT_FONT_FAMILY = "Times New Roman"
DEFAULT_FONT_SIZE = 16.0

BOLD_WEIGHTS = {"bold", "700", "800", "900"}

RGB = Tuple[int, int, int]
Edges = Tuple[float, float, float, float]

_HEX_PAIR = re.compile(r'^[0-9a-fA-F]{2}$')


def parse_number(text: str) -> Optional[float]:
    """
    Parse a bare number.

    Args:
        text: Number text (already stripped of any unit)

    Returns:
        The value, or None if the text is not a number
    """
    try:
        return float(text)
    except (TypeError, ValueError):
        return None


def _strip_unit(text: str, unit: str) -> str:
    return text[:-len(unit)]


def _hex_channel(pair: str) -> int:
    return int(pair, 16) if _HEX_PAIR.match(pair) else 0


def parse_color(color: str) -> RGB:
    """
    Parse a hex color.

    Supports '#rgb' and '#rrggbb' (extra digits after the sixth are
    ignored). Anything else, including named colors and rgb() notation,
    yields black. Each channel parses independently, so one bad digit
    only zeroes its own channel.

    Args:
        color: Raw color value

    Returns:
        (r, g, b) tuple of ints in 0..255
    """
    color = color.strip()
    if not color.startswith('#'):
        logger.debug(f"Unsupported color value {color!r}, using black")
        return (0, 0, 0)

    digits = color[1:]
    if len(digits) == 3:
        return (_hex_channel(digits[0] * 2), _hex_channel(digits[1] * 2), _hex_channel(digits[2] * 2))
    if len(digits) >= 6:
        return (_hex_channel(digits[0:2]), _hex_channel(digits[2:4]), _hex_channel(digits[4:6]))

    logger.debug(f"Malformed hex color {color!r}, using black")
    return (0, 0, 0)


def parse_spacing_value(value: str) -> float:
    """
    Parse a padding/margin component without viewport context.

    'vh' returns its raw magnitude; the caller scales it by viewport height.

    Args:
        value: A single length token

    Returns:
        Length in pixels, 0.0 if unparsable
    """
    s = value.strip()
    if s.endswith('px'):
        number = parse_number(_strip_unit(s, 'px'))
    elif s.endswith('em'):
        number = parse_number(_strip_unit(s, 'em'))
        number = number * EM_SIZE if number is not None else None
    elif s.endswith('vh'):
        number = parse_number(_strip_unit(s, 'vh'))
    else:
        number = parse_number(s)
    return number if number is not None else 0.0


def parse_spacing_value_with_viewport(value: str, viewport_height: float) -> float:
    """
    Parse a padding/margin component, resolving 'vh' against the viewport.

    'vw' still returns its raw magnitude since only the height is known here.

    Args:
        value: A single length token
        viewport_height: Viewport height in pixels

    Returns:
        Length in pixels, 0.0 if unparsable
    """
    s = value.strip()
    if s.endswith('vh'):
        number = parse_number(_strip_unit(s, 'vh'))
        return viewport_height * number / 100.0 if number is not None else 0.0
    if s.endswith('vw'):
        number = parse_number(_strip_unit(s, 'vw'))
        return number if number is not None else 0.0
    return parse_spacing_value(s)


def expand_shorthand(parts) -> Tuple[str, str, str, str]:
    """
    Expand 1-4 box shorthand tokens to (top, right, bottom, left).

    Tokens past the fourth are ignored.
    """
    if len(parts) == 1:
        return (parts[0], parts[0], parts[0], parts[0])
    if len(parts) == 2:
        return (parts[0], parts[1], parts[0], parts[1])
    if len(parts) == 3:
        return (parts[0], parts[1], parts[2], parts[1])
    return (parts[0], parts[1], parts[2], parts[3])


class Style:
    """
    A resolved property bag: property name -> raw string value.

    Every cascade resolution produces its own Style; mutating one never
    affects another.
    """

    def __init__(self, properties: Optional[Mapping[str, str]] = None):
        """
        Initialize a style.

        Args:
            properties: Optional initial property values
        """
        self.properties: Dict[str, str] = dict(properties) if properties else {}

    # Mapping surface

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.properties.get(key, default)

    def set(self, key: str, value: str) -> None:
        self.properties[key] = value

    def update(self, other) -> None:
        """Overwrite properties from another Style or mapping, key by key."""
        if isinstance(other, Style):
            other = other.properties
        self.properties.update(other)

    def copy(self) -> 'Style':
        return Style(self.properties)

    def items(self):
        return self.properties.items()

    def __getitem__(self, key: str) -> str:
        return self.properties[key]

    def __setitem__(self, key: str, value: str) -> None:
        self.properties[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.properties

    def __iter__(self) -> Iterator[str]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    def __eq__(self, other) -> bool:
        if isinstance(other, Style):
            return self.properties == other.properties
        if isinstance(other, Mapping):
            return self.properties == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Style({self.properties!r})"

    # Font

    @property
    def font_family(self) -> str:
        return self.get('font-family', DEFAULT_FONT_FAMILY)

    @property
    def font_size(self) -> float:
        """
        Get the font size in pixels.

        Accepts a bare number or a px, em or rem suffix; em and rem are
        relative to a fixed 16px base.
        """
        value = self.get('font-size')
        if value is None:
            return DEFAULT_FONT_SIZE

        s = value.strip()
        if s.endswith('px'):
            size = parse_number(_strip_unit(s, 'px'))
        elif s.endswith('rem'):
            size = parse_number(_strip_unit(s, 'rem'))
            size = size * EM_SIZE if size is not None else None
        elif s.endswith('em'):
            size = parse_number(_strip_unit(s, 'em'))
            size = size * EM_SIZE if size is not None else None
        else:
            size = parse_number(s)

        if size is None:
            logger.debug(f"Unparsable font-size {value!r}, using {DEFAULT_FONT_SIZE}")
            return DEFAULT_FONT_SIZE
        return size

    @property
    def font_weight(self) -> str:
        return self.get('font-weight', 'normal')

    @property
    def is_bold(self) -> bool:
        return self.font_weight in BOLD_WEIGHTS

    @property
    def font_style(self) -> str:
        return self.get('font-style', 'normal')

    @property
    def is_italic(self) -> bool:
        return self.font_style == 'italic'

    # Color and decoration

    @property
    def color(self) -> RGB:
        value = self.get('color')
        return parse_color(value) if value is not None else (0, 0, 0)

    @property
    def background_color(self) -> Optional[RGB]:
        """Get the background color from 'background' or 'background-color', if either is set."""
        value = self.get('background')
        if value is None:
            value = self.get('background-color')
        return parse_color(value) if value is not None else None

    @property
    def opacity(self) -> float:
        value = self.get('opacity')
        number = parse_number(value.strip()) if value is not None else None
        return number if number is not None else 1.0

    @property
    def text_decoration(self) -> Optional[str]:
        return self.get('text-decoration')

    def has_text_decoration(self, decoration: str) -> bool:
        """
        Check whether text-decoration mentions a token.

        Args:
            decoration: Token such as 'underline' (substring match)
        """
        value = self.text_decoration
        return value is not None and decoration in value

    # Widths

    @property
    def width_percentage(self) -> Optional[float]:
        """
        Get the width as a fraction of the viewport.

        Returns:
            value / 100 for '%' or 'vw' widths, None for any other unit
        """
        value = self.get('width')
        if value is None:
            return None

        s = value.strip()
        if s.endswith('vw'):
            number = parse_number(_strip_unit(s, 'vw'))
        elif s.endswith('%'):
            number = parse_number(_strip_unit(s, '%'))
        else:
            return None
        return number / 100.0 if number is not None else None

    def width_px(self, viewport_width: float) -> Optional[float]:
        """Resolve 'width' to pixels against the viewport width."""
        return self._length_px('width', viewport_width)

    def max_width_px(self, viewport_width: float) -> Optional[float]:
        """Resolve 'max-width' to pixels against the viewport width."""
        return self._length_px('max-width', viewport_width)

    def _length_px(self, key: str, viewport_width: float) -> Optional[float]:
        value = self.get(key)
        if value is None:
            return None

        s = value.strip()
        if s.endswith('vw'):
            number = parse_number(_strip_unit(s, 'vw'))
            return viewport_width * number / 100.0 if number is not None else None
        if s.endswith('%'):
            number = parse_number(_strip_unit(s, '%'))
            return viewport_width * number / 100.0 if number is not None else None
        if s.endswith('px'):
            return parse_number(_strip_unit(s, 'px'))
        return parse_number(s)

    # Box spacing

    def padding(self) -> Edges:
        """Get padding as (top, right, bottom, left) pixels; 'vh' stays unscaled."""
        return self._padding(parse_spacing_value)

    def padding_with_viewport(self, viewport_height: float) -> Edges:
        """Get padding as (top, right, bottom, left) pixels with 'vh' resolved."""
        return self._padding(lambda v: parse_spacing_value_with_viewport(v, viewport_height))

    def margin(self) -> Edges:
        """
        Get margin as (top, right, bottom, left) pixels.

        The 'margin' shorthand is expanded first; margin-top/right/bottom/left
        then override their side. 'auto' counts as 0.
        """
        return self._margin(parse_spacing_value)

    def margin_with_viewport(self, viewport_height: float) -> Edges:
        """Get margin like margin(), resolving 'vh' against the viewport height."""
        return self._margin(lambda v: parse_spacing_value_with_viewport(v, viewport_height))

    def has_auto_horizontal_margin(self) -> bool:
        """Check whether left and right margins are both 'auto' (horizontal centering)."""
        left = self.get('margin-left')
        right = self.get('margin-right')
        if left is not None and right is not None and left.strip() == 'auto' and right.strip() == 'auto':
            return True

        shorthand = self.get('margin')
        if shorthand is None:
            return False

        parts = shorthand.split()
        if len(parts) == 2:
            return parts[1] == 'auto'
        if len(parts) == 4:
            return parts[1] == 'auto' and parts[3] == 'auto'
        return False

    def _padding(self, parse) -> Edges:
        shorthand = self.get('padding')
        parts = shorthand.split() if shorthand is not None else []
        if not parts:
            return (0.0, 0.0, 0.0, 0.0)
        top, right, bottom, left = expand_shorthand(parts)
        return (parse(top), parse(right), parse(bottom), parse(left))

    def _margin(self, parse) -> Edges:
        def parse_margin(value: str) -> float:
            # Centering is left to layout
            return 0.0 if value.strip() == 'auto' else parse(value)

        edges = [0.0, 0.0, 0.0, 0.0]

        shorthand = self.get('margin')
        parts = shorthand.split() if shorthand is not None else []
        if parts:
            edges = [parse_margin(part) for part in expand_shorthand(parts)]

        for index, side in enumerate(('top', 'right', 'bottom', 'left')):
            longhand = self.get(f'margin-{side}')
            if longhand is not None:
                edges[index] = parse_margin(longhand)

        return (edges[0], edges[1], edges[2], edges[3])
