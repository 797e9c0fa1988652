"""
Toolkit independent state of the angle picker.

The model owns the angle, the four paints, the current layout and the
display/edit state. Rendering adapters subscribe to it and redraw when
told to; they never hold state of their own beyond their scene objects.
"""

import re
from enum import Enum

from anglepicker.config import (
    ANGLE_OFFSET,
    DEAD_ZONE_RADIUS,
    DEGREE_SIGN,
    EDIT_FORMAT,
    LABEL_FORMAT,
    NUMBER_PATTERN,
)
from anglepicker.core.angle_mapper import angle_from_pointer, normalize_angle
from anglepicker.core.layout_engine import ProportionalLayoutEngine
from anglepicker.core.observable import Observable


PAINT_NAMES = ("background_paint", "foreground_paint", "indicator_paint", "text_paint")

# Element each paint is applied to during the appearance pass
PAINT_TARGETS = {
    "background_paint": "background",
    "foreground_paint": "foreground",
    "indicator_paint": "indicator",
    "text_paint": "text",
}

TOPICS = ("angle", "state", "layout", "appearance") + PAINT_NAMES

_NUMBER_RE = re.compile(NUMBER_PATTERN)


class PickerState(Enum):
    DISPLAY = "display"
    EDIT = "edit"


def format_label(angle):
    return LABEL_FORMAT.format(angle)


def format_edit(angle):
    return EDIT_FORMAT.format(angle)


def parse_angle_text(text):
    """Parse edit box text into an angle.

    Returns the angle, None for empty text, and raises ValueError for text
    that is not a non-negative number with at most 3 integer digits and
    1 decimal digit.
    """
    cleaned = text.replace("\\n", "").replace(DEGREE_SIGN, "").strip()
    if not _NUMBER_RE.fullmatch(cleaned):
        raise ValueError(f"Not a valid angle: '{text}'")
    if not cleaned:
        return None
    # "." passes the pattern but is not a number
    return float(cleaned)


class AnglePickerModel:
    """Angle, text, paint and geometry state of one picker."""

    def __init__(self, angle=0.0, background_paint=None, foreground_paint=None,
                 indicator_paint=None, text_paint=None, angle_offset=ANGLE_OFFSET,
                 dead_zone=DEAD_ZONE_RADIUS, logger=None):
        self.events = Observable(TOPICS)
        self.logger = logger
        self.angle_offset = angle_offset
        self.dead_zone = dead_zone
        self.engine = ProportionalLayoutEngine()

        self._angle = normalize_angle(angle)
        self._state = PickerState.DISPLAY
        self._paints = {
            "background_paint": background_paint,
            "foreground_paint": foreground_paint,
            "indicator_paint": indicator_paint,
            "text_paint": text_paint,
        }
        self.label_text = format_label(self._angle)
        self.edit_text = format_edit(self._angle)
        self.appearance = {}

    def subscribe(self, topic, callback):
        return self.events.subscribe(topic, callback)

    # Angle ---------------------------------------------------------------

    @property
    def angle(self):
        return self._angle

    @angle.setter
    def angle(self, value):
        old = self._angle
        self._angle = normalize_angle(value)
        self.label_text = format_label(self._angle)
        self.edit_text = format_edit(self._angle)
        if self._angle != old:
            self.events.notify("angle", old, self._angle)

    @property
    def rotation(self):
        """Indicator rotation in degrees, clockwise on a y-down screen."""
        return self._angle

    def drag_to(self, dx, dy):
        """Track a drag at (dx, dy) relative to the disc centre.

        Returns the new angle, or None if the event was dropped.
        """
        if self._state is PickerState.EDIT:
            return None
        half = self.engine.size * 0.5
        angle = angle_from_pointer(dx + half, dy + half, half, half, self.angle_offset, self.dead_zone)
        if angle is None:
            return None
        self.angle = angle
        return angle

    # Paints --------------------------------------------------------------

    def get_paint(self, name):
        return self._paints[name]

    def set_paint(self, name, paint):
        if name not in self._paints:
            raise ValueError(f"Unknown paint '{name}'")
        old = self._paints[name]
        self._paints[name] = paint
        self.events.notify(name, old, paint)
        self.apply_appearance()

    background_paint = property(lambda self: self._paints["background_paint"],
                                lambda self, paint: self.set_paint("background_paint", paint))
    foreground_paint = property(lambda self: self._paints["foreground_paint"],
                                lambda self, paint: self.set_paint("foreground_paint", paint))
    indicator_paint = property(lambda self: self._paints["indicator_paint"],
                               lambda self, paint: self.set_paint("indicator_paint", paint))
    text_paint = property(lambda self: self._paints["text_paint"],
                          lambda self, paint: self.set_paint("text_paint", paint))

    # Layout and appearance -----------------------------------------------

    @property
    def layout(self):
        return self.engine.layout

    @property
    def size(self):
        return self.engine.size

    def recompute_geometry(self, outer_width, outer_height, insets=None):
        """Geometry pass only. Returns the new layout or None if skipped."""
        old = self.engine.layout
        result = self.engine.relayout(outer_width, outer_height, insets)
        if result is None:
            if self.logger:
                self.logger.log_layout(f"Skipped relayout for {outer_width}x{outer_height}")
            return None
        self.events.notify("layout", old, result)
        return result

    def apply_appearance(self):
        """Appearance pass only: map each paint onto its element."""
        self.appearance = {PAINT_TARGETS[name]: paint for name, paint in self._paints.items()}
        self.events.notify("appearance", None, dict(self.appearance))
        return self.appearance

    def relayout(self, outer_width, outer_height, insets=None):
        """Geometry pass followed by the appearance pass."""
        result = self.recompute_geometry(outer_width, outer_height, insets)
        if result is not None:
            self.apply_appearance()
        return result

    # Display / edit ------------------------------------------------------

    @property
    def state(self):
        return self._state

    @property
    def editing(self):
        return self._state is PickerState.EDIT

    def _set_state(self, state):
        old = self._state
        if state is old:
            return
        self._state = state
        self.events.notify("state", old, state)

    def click(self, count):
        if count == 2:
            self.begin_edit()

    def begin_edit(self):
        if self._state is PickerState.EDIT:
            return
        self.edit_text = format_edit(self._angle)
        self._set_state(PickerState.EDIT)

    def commit_edit(self, text=None):
        """Leave edit mode, taking the edit text as the new angle if valid.

        Invalid text is ignored: the angle stays as it was but the picker
        still returns to display mode.
        """
        if self._state is not PickerState.EDIT:
            return False
        if text is None:
            text = self.edit_text

        committed = False
        try:
            value = parse_angle_text(text)
        except ValueError:
            if self.logger:
                self.logger.log_warning(f"Ignored angle text '{text}'")
            self.edit_text = format_edit(self._angle)
        else:
            if value is not None:
                self.angle = value
                committed = True
                if self.logger:
                    self.logger.log_edit(f"Angle set to {self._angle:.1f} from text")
            else:
                self.edit_text = format_edit(self._angle)

        self._set_state(PickerState.DISPLAY)
        return committed

    def cancel_edit(self):
        if self._state is not PickerState.EDIT:
            return
        self.edit_text = format_edit(self._angle)
        self._set_state(PickerState.DISPLAY)
