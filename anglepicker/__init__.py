"""
Circular angle picker control for PySide6.
"""

from anglepicker.core import AnglePickerModel, Insets, PickerState, angle_from_pointer, compute_layout
