# -*- coding: utf-8 -*-
"""
General settings at application-level
"""

surface_width: int = 1000
"""Width in pixels of the default drawing surface"""

surface_height: int = 600
"""Height in pixels of the default drawing surface. The viewport constants
are expressed as fractions of width and height, so that the 5:3 ratio of
the default surface is the one giving undistorted images"""

default_parameter_a: float = -0.5
"""Initial value of parameter a (Julia constant real part, Henon a)"""

default_parameter_b: float = -0.99998
"""Initial value of parameter b (Julia constant imaginary part, Henon b)"""

escape_max_iter: int = 100
"""Number of iterations for the escape-time sets. All iterations are always
performed (no early exit on divergence)"""

henon_max_steps: int = 40000
"""Number of points plotted for the Henon map"""

lorenz_xy_max_steps: int = 400000
"""Number of points plotted for the Lorenz attractor, xy projection"""

lorenz_yz_max_steps: int = 100000
"""Number of points plotted for the Lorenz attractor, yz projection"""

lorenz_xz_max_steps: int = 100000
"""Number of points plotted for the Lorenz attractor, xz projection"""

colors = {
    "foreground": (0, 0, 0),
    "escaped": (128, 128, 128),
    "background": (217, 217, 217),
}
"""RGB values (0-255) used by `fractalpaint.surface.Pixel_surface`"""

progress_log_interval: float = 1.
"""Minimal time in seconds between 2 progress messages (DEBUG level)"""

verbosity: int = 2
"""
Controls the verbosity for the log messages:

    - 0: WARNING & higher severity, output to stderr
    - 1: INFO & higher severity, output to stdout
    - 2 (default):

        - INFO & higher severity, output to stdout
        - DEBUG & higher severity, output to a log file

    - 3 (highest verbosity):

        - INFO & higher severity, output to stdout
        - ALL message (incl. NOTSET), output to a log file

Note: Severities in descending order:
CRITICAL, ERROR, WARNING, INFO, DEBUG, NOTSET """

log_directory: str = None
""" The logging directory for this session - as str"""
