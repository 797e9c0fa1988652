"""
Toolkit independent logic of the angle picker.
"""

from anglepicker.core.angle_mapper import angle_from_pointer, normalize_angle
from anglepicker.core.layout_engine import (
    Circle,
    Insets,
    LayoutResult,
    Point,
    ProportionalLayoutEngine,
    Rect,
    Shadow,
    compute_layout,
)
from anglepicker.core.model import AnglePickerModel, PickerState, parse_angle_text
from anglepicker.core.observable import Observable
