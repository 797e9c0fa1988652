"""
Pointer position to angle conversion.
"""

import math

from anglepicker.config import ANGLE_OFFSET, DEAD_ZONE_RADIUS


def normalize_angle(angle):
    """Reduce an angle in degrees into [0, 360)."""
    angle = float(angle) % 360.0
    # x % 360.0 rounds up to 360.0 for tiny negative x
    if angle >= 360.0:
        angle = 0.0
    return angle


def angle_from_pointer(x, y, center_x, center_y, angle_offset=ANGLE_OFFSET, dead_zone=DEAD_ZONE_RADIUS):
    """Return the angle in [0, 360) of the pointer (x, y) around the centre.

    Screen coordinates are y-down, so with an offset of 0 the 3 o'clock
    direction is 0 degrees and 6 o'clock is 90 degrees. An offset of 90
    moves 0 degrees to 12 o'clock.

    Returns None when the pointer lies within ``dead_zone`` of the centre
    (always at the centre itself), where no direction is defined.
    """
    delta_x = x - center_x
    delta_y = y - center_y
    radius = math.sqrt(delta_x * delta_x + delta_y * delta_y)
    if radius <= dead_zone or radius == 0.0:
        return None

    nx = delta_x / radius
    ny = delta_y / radius
    theta = math.degrees(math.atan2(ny, nx))
    if theta < 0.0:
        theta += 360.0

    return normalize_angle(theta + angle_offset)
