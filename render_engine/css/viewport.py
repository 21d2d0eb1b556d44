"""
Viewport and responsive breakpoint model.
This module classifies viewport widths into breakpoint tiers and evaluates media conditions.
"""

from enum import Enum

DEFAULT_VIEWPORT_WIDTH = 1200.0
DEFAULT_VIEWPORT_HEIGHT = 800.0

# Lower bounds (inclusive) of the tablet and desktop tiers
TABLET_MIN_WIDTH = 768.0
DESKTOP_MIN_WIDTH = 1024.0


class Breakpoint(Enum):
    """Named viewport-width tiers."""
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"

    @classmethod
    def from_width(cls, width: float) -> 'Breakpoint':
        """
        Classify a viewport width.

        Args:
            width: Viewport width in pixels

        Returns:
            MOBILE below 768, TABLET below 1024, DESKTOP otherwise
        """
        if width < TABLET_MIN_WIDTH:
            return cls.MOBILE
        if width < DESKTOP_MIN_WIDTH:
            return cls.TABLET
        return cls.DESKTOP


class Viewport:
    """Immutable viewport dimensions."""

    __slots__ = ('_width', '_height')

    def __init__(self, width: float = DEFAULT_VIEWPORT_WIDTH, height: float = DEFAULT_VIEWPORT_HEIGHT):
        """
        Initialize a viewport.

        Args:
            width: Viewport width in pixels
            height: Viewport height in pixels
        """
        object.__setattr__(self, '_width', float(width))
        object.__setattr__(self, '_height', float(height))

    def __setattr__(self, name, value):
        raise AttributeError("Viewport is immutable")

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def breakpoint(self) -> Breakpoint:
        """Get the breakpoint tier for this viewport's width."""
        return Breakpoint.from_width(self._width)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Viewport):
            return NotImplemented
        return self._width == other._width and self._height == other._height

    def __hash__(self) -> int:
        return hash((self._width, self._height))

    def __repr__(self) -> str:
        return f"Viewport({self._width:g}x{self._height:g})"


class MediaCondition:
    """
    A single viewport condition gating a block of rules.

    Use the MinWidth, MaxWidth and BreakpointIs subclasses.
    """

    def matches(self, viewport: Viewport) -> bool:
        raise NotImplementedError

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def _key(self):
        raise NotImplementedError


class MinWidth(MediaCondition):
    """Matches viewports at least this wide (inclusive)."""

    def __init__(self, width: float):
        self.width = float(width)

    def matches(self, viewport: Viewport) -> bool:
        return viewport.width >= self.width

    def _key(self):
        return self.width

    def __repr__(self) -> str:
        return f"MinWidth({self.width:g})"


class MaxWidth(MediaCondition):
    """Matches viewports at most this wide (inclusive)."""

    def __init__(self, width: float):
        self.width = float(width)

    def matches(self, viewport: Viewport) -> bool:
        return viewport.width <= self.width

    def _key(self):
        return self.width

    def __repr__(self) -> str:
        return f"MaxWidth({self.width:g})"


class BreakpointIs(MediaCondition):
    """Matches viewports whose width falls in the given breakpoint tier."""

    def __init__(self, breakpoint: Breakpoint):
        self.breakpoint = breakpoint

    def matches(self, viewport: Viewport) -> bool:
        return viewport.breakpoint() == self.breakpoint

    def _key(self):
        return self.breakpoint

    def __repr__(self) -> str:
        return f"BreakpointIs({self.breakpoint.name})"
