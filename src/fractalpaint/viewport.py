# -*- coding: utf-8 -*-
"""
Affine mapping between the mathematical plane of a model and the pixels of
the drawing surface.

The constants are expressed as fractions of the surface dimensions. For the
default 1000 x 600 surface:

    ===================  =========  =========  ========  ========
    kind                 scale_x    scale_y    offset_x  offset_y
    ===================  =========  =========  ========  ========
    Mandelbrot           200        200        2.5       1.5
    Julia, JuliaSine     200        200        2.0       1.5
    Henon                1000/6.67  150        3.335     2.0
    Lorenz (all)         10         6          50        50
    ===================  =========  =========  ========  ========
"""
import math


class Viewport:
    def __init__(self, scale_x, scale_y, offset_x, offset_y, invert_y=True,
                 width=None, height=None):
        """
An affine transform between a model coordinates and screen pixels.

    screen_x = (math_x + offset_x) * scale_x
    screen_y = (offset_y - math_y) * scale_y     (invert_y)
    screen_y = (math_y + offset_y) * scale_y     (not invert_y)

Screen coordinates are truncated toward zero. The origin of the screen is the
upper left corner, hence the vertical axis is usually inverted.

Parameters
----------
scale_x, scale_y : float
    Pixels per unit along each axis
offset_x, offset_y : float
    Translation applied in the mathematical plane before scaling
invert_y : bool
    If True, the vertical axis points upward in the mathematical plane
width, height : int | None
    Dimensions of the target surface, only used by `contains`
"""
        if not (scale_x > 0. and scale_y > 0.):
            raise ValueError(
                f"Viewport scales shall be > 0, given: {scale_x}, {scale_y}"
            )
        self.scale_x = float(scale_x)
        self.scale_y = float(scale_y)
        self.offset_x = float(offset_x)
        self.offset_y = float(offset_y)
        self.invert_y = invert_y
        self.width = width
        self.height = height

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(scale_x={self.scale_x!r}, "
            f"scale_y={self.scale_y!r}, offset_x={self.offset_x!r}, "
            f"offset_y={self.offset_y!r}, invert_y={self.invert_y!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, Viewport):
            return NotImplemented
        return (
            (self.scale_x, self.scale_y, self.offset_x, self.offset_y,
             self.invert_y)
            == (other.scale_x, other.scale_y, other.offset_x, other.offset_y,
                other.invert_y)
        )

    def to_pixel(self, math_x, math_y):
        """ Screen pixel (screen_x, screen_y) of a model point.
        A non-finite coordinate maps to -1 (always outside the surface)
        """
        d_screen_x = (math_x + self.offset_x) * self.scale_x
        if self.invert_y:
            d_screen_y = (self.offset_y - math_y) * self.scale_y
        else:
            d_screen_y = (math_y + self.offset_y) * self.scale_y
        return _trunc(d_screen_x), _trunc(d_screen_y)

    def to_math(self, screen_x, screen_y):
        """ Model point (a, b) of a screen pixel """
        a = screen_x / self.scale_x - self.offset_x
        if self.invert_y:
            b = -(screen_y / self.scale_y - self.offset_y)
        else:
            b = screen_y / self.scale_y - self.offset_y
        return a, b

    def contains(self, screen_x, screen_y):
        """ True if the pixel lies on the target surface """
        if self.width is None or self.height is None:
            raise RuntimeError("Viewport not bound to a surface")
        return (0 <= screen_x < self.width) and (0 <= screen_y < self.height)


def _trunc(val):
    if math.isfinite(val):
        return int(val)
    return -1


def escape_time_viewport(width, height, offset_x):
    """ Viewport for the complex-plane sets: 5 units wide, 3 units high """
    return Viewport(
        scale_x=width / 5., scale_y=height / 3.,
        offset_x=offset_x, offset_y=1.5,
        width=width, height=height
    )


def mandelbrot_viewport(width, height):
    # Origin placed left of center, to show the whole set
    return escape_time_viewport(width, height, 2.5)


def julia_viewport(width, height):
    return escape_time_viewport(width, height, 2.0)


def henon_viewport(width, height):
    return Viewport(
        scale_x=width / 6.67, scale_y=height / 4.,
        offset_x=3.335, offset_y=2.0,
        width=width, height=height
    )


def lorenz_viewport(width, height):
    return Viewport(
        scale_x=width / 100., scale_y=height / 100.,
        offset_x=50., offset_y=50.,
        width=width, height=height
    )
