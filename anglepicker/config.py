"""
Constants for the angle picker control.
"""

# 0 -> angle 0 sits at 3 o'clock, 90 -> angle 0 sits at 12 o'clock
ANGLE_OFFSET = 0.0

# Pointer events closer to the centre than this are dropped
DEAD_ZONE_RADIUS = 0.0

# Widget size constraints (pixels)
PREFERRED_WIDTH = 63
PREFERRED_HEIGHT = 63
MINIMUM_WIDTH = 20
MINIMUM_HEIGHT = 20
MAXIMUM_WIDTH = 1024
MAXIMUM_HEIGHT = 1024

# Text handling
DEGREE_SIGN = "°"
LABEL_FORMAT = "{:.0f}" + DEGREE_SIGN
EDIT_FORMAT = "{:.1f}" + DEGREE_SIGN
NUMBER_PATTERN = r"[0-9]{0,3}(\.[0-9]?)?"

# Default paints
BACKGROUND_RGB = (32, 32, 32)
FOREGROUND_STOPS = (
    (0.0, (61, 61, 61)),
    (0.5, (50, 50, 50)),
    (1.0, (42, 42, 42)),
)
INDICATOR_RGB = (159, 159, 159)
TEXT_RGB = (230, 230, 230)
SHADOW_RGBA = (255, 255, 255, 77)
