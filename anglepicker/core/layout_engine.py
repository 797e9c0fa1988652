"""
Proportional layout of the angle picker elements.

Every element is sized and placed as a fixed fraction of a single scalar,
the side of the largest square that fits the content area, so the control
stays self-similar at any scale.
"""

from dataclasses import dataclass


# Fractions of the pane size
BACKGROUND_RADIUS = 0.5
FOREGROUND_RADIUS = 0.4787234
FOREGROUND_INSET = 0.0212766
INDICATOR_WIDTH = 0.20
INDICATOR_HEIGHT = 0.01587302
INDICATOR_X = 0.77777778
PIVOT_OFFSET_X = 0.27777778
SHADOW_RADIUS = 0.0212766
SHADOW_OFFSET_Y = 0.0106383
FONT_SIZE = 0.19148936
TEXT_BOX_WIDTH = 0.6
TEXT_BOX_HEIGHT = 0.22


@dataclass(frozen=True)
class Insets:
    """Padding between the outer bounds and the content area."""
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Circle:
    """Circle given by the top-left corner of its bounding box."""
    x: float
    y: float
    radius: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.radius, self.y + self.radius)


@dataclass(frozen=True)
class Shadow:
    radius: float
    offset_y: float


@dataclass(frozen=True)
class LayoutResult:
    """Geometry records for one container size.

    ``pane`` is in outer coordinates; every other record is relative to the
    pane's top-left corner, except ``pivot.y`` which is measured from the
    indicator's top edge.
    """
    size: float
    pane: Rect
    background: Circle
    foreground: Circle
    indicator: Rect
    pivot: Point
    shadow: Shadow
    label_font_size: float
    text_box: Rect
    text_box_font_size: float

    def rotation_center(self) -> Point:
        """Indicator pivot in pane coordinates."""
        return Point(self.pivot.x, self.indicator.y + self.pivot.y)


def compute_layout(outer_width, outer_height, insets=None):
    """Derive all element geometries, or None if the content area is empty."""
    insets = insets or Insets()
    content_width = outer_width - insets.left - insets.right
    content_height = outer_height - insets.top - insets.bottom
    if content_width <= 0 or content_height <= 0:
        return None

    size = content_width if content_width < content_height else content_height

    pane = Rect((outer_width - size) * 0.5, (outer_height - size) * 0.5, size, size)

    indicator_height = size * INDICATOR_HEIGHT
    indicator = Rect(
        size * INDICATOR_X,
        (size - indicator_height) * 0.5,
        size * INDICATOR_WIDTH,
        indicator_height,
    )

    text_box_width = size * TEXT_BOX_WIDTH
    text_box_height = size * TEXT_BOX_HEIGHT

    return LayoutResult(
        size=size,
        pane=pane,
        background=Circle(0.0, 0.0, size * BACKGROUND_RADIUS),
        foreground=Circle(size * FOREGROUND_INSET, size * FOREGROUND_INSET, size * FOREGROUND_RADIUS),
        indicator=indicator,
        pivot=Point(indicator.x - size * PIVOT_OFFSET_X, indicator.height * 0.5),
        shadow=Shadow(size * SHADOW_RADIUS, size * SHADOW_OFFSET_Y),
        label_font_size=size * FONT_SIZE,
        text_box=Rect(
            (size - text_box_width) * 0.5,
            (size - text_box_height) * 0.5,
            text_box_width,
            text_box_height,
        ),
        text_box_font_size=size * FONT_SIZE,
    )


class ProportionalLayoutEngine:
    """Keeps the most recent valid layout across resizes."""

    def __init__(self):
        self.layout = None

    @property
    def size(self):
        return self.layout.size if self.layout else 0.0

    def relayout(self, outer_width, outer_height, insets=None):
        """Recompute the layout; a degenerate size leaves the last one in place."""
        result = compute_layout(outer_width, outer_height, insets)
        if result is None:
            return None
        self.layout = result
        return result
