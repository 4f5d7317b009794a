# -*- coding: utf-8 -*-
"""
General settings at application-level
"""

base_width: int = 320
"""Width of the unscaled frame, in pixels"""

base_height: int = 200
"""Height of the unscaled frame, in pixels"""

scale: int = 3
"""Pixel magnification of the base frame. Typical values are 3, 5 or 8
(8 gives a 2560 x 1600 frame)"""

fps: int = 60
"""Target tick rate of the main loop, in ticks per second"""

zoom_factor: float = 1.5
"""Multiplicative zoom step for one zoom-in / zoom-out event"""

move_factor: float = 0.1
"""Fraction of the visible span the center moves by for one arrow-key
press"""

default_zoom: float = 2.0
"""Initial zoom, also the floor for zooming out. 2.0 means the unscaled
view spans [-2, 2] on both axes"""

default_detail: int = 255
"""Initial maximal iteration count"""

escape_radius_sq: float = 32.0
"""Squared escape radius. Any value above 4.0 is a valid divergence test,
a larger value reduces false early escapes near the boundary"""

color_scale: int = 16
"""Scaling constant of the escape-time color formula"""

inset_color: int = 0xFFFFFF
"""Packed RGB color for the points that do not escape (white)"""

verbosity: int = 1
"""
Controls the verbosity for the log messages:

    - 0: WARNING & higher severity, output to stderr
    - 1 (default): INFO & higher severity, output to stdout
    - 2:

        - INFO & higher severity, output to stdout
        - DEBUG & higher severity, output to a log file

    - 3 (highest verbosity):

        - INFO & higher severity, output to stdout
        - ALL message (incl. NOTSET), output to a log file
"""

log_directory: str = None
""" The logging directory for this session - as str"""


def frame_size():
    """
    Returns the (width, height) of the pixel buffer, in pixels
    """
    width = base_width * scale
    height = base_height * scale
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid frame size: {width} x {height}")
    return width, height
