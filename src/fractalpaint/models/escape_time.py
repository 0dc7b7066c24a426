# -*- coding: utf-8 -*-
import enum
import math

import numba

import fractalpaint as fp
import fractalpaint.settings
from fractalpaint.core import Color, Pixel_event


RULE_QUADRATIC = 0
RULE_QUADRATIC_CONJUGATE = 1
RULE_SINE_COSINE = 2


class Escape_rule(enum.Enum):
    """ The recurrences z -> f(z) available for escape-time sets """
    QUADRATIC = "quadratic"
    QUADRATIC_CONJUGATE = "quadratic_conjugate"
    SINE_COSINE = "sine_cosine"

    @property
    def code(self):
        return _RULE_CODES[self]

    @classmethod
    def from_str(cls, rule):
        if isinstance(rule, cls):
            return rule
        try:
            return cls(rule)
        except ValueError:
            raise ValueError(f"Unknown escape-time rule: {rule!r}") from None


_RULE_CODES = {
    Escape_rule.QUADRATIC: RULE_QUADRATIC,
    Escape_rule.QUADRATIC_CONJUGATE: RULE_QUADRATIC_CONJUGATE,
    Escape_rule.SINE_COSINE: RULE_SINE_COSINE,
}


@numba.njit(nogil=True)
def numba_escape_time(x, y, a, b, rule, max_iter):
    """
    Iterates exactly max_iter times z -> f(z) from z0 = x + iy, with
    constant c = a + ib, then tests the square of the modulus against 4.
    Returns True if escaped. NaN does not compare < 4 and is therefore
    classified as escaped.
    """
    for _ in range(max_iter):
        if rule == RULE_QUADRATIC:
            x_new = x * x - y * y + a
            y_new = 2. * x * y + b
        elif rule == RULE_QUADRATIC_CONJUGATE:
            x_new = x * x - y * y - a
            y_new = 2. * x * y - b
        else:
            x_new = math.sin(x) * math.cosh(y) + a
            y_new = math.cos(x) * math.sinh(y) + b
        x = x_new
        y = y_new

    mzsq = x * x + y * y
    return not(mzsq < 4.)


def evaluate(a, b, rule, max_iterations, x0=0., y0=0.):
    """
    Escape-time test for one point.

    Parameters
    ----------
    a, b : float
        Real and imaginary parts of the constant c
    rule : `Escape_rule` | str
        The recurrence: "quadratic" (z**2 + c), "quadratic_conjugate"
        (z**2 - c) or "sine_cosine" (sin(z) + c)
    max_iterations : int
        The number of iterations, all performed (no early exit)
    x0, y0 : float
        Real and imaginary parts of the starting value z0

    Returns
    -------
    escaped : bool
        True if the squared modulus after the last iteration is not < 4
    """
    rule = Escape_rule.from_str(rule)
    max_iterations = int(max_iterations)
    if max_iterations < 1:
        raise ValueError(
            f"max_iterations shall be >= 1, given: {max_iterations}"
        )
    return bool(numba_escape_time(
        float(x0), float(y0), float(a), float(b), rule.code, max_iterations
    ))


class Escape_time(fp.Algorithm):
    family = fp.Algorithm.ESCAPE_TIME
    min_budget = 1

    def __init__(self, kind, viewport_factory, rule, start_from_pixel,
                 max_iter=None):
        """
An escape-time set, scanned column by column.

Parameters
----------
kind : `fractalpaint.Algorithm_kind`
    The model rendered
viewport_factory : callable
    viewport_factory(width, height) returns the `fractalpaint.Viewport`
rule : `Escape_rule`
    The recurrence iterated
start_from_pixel : bool
    If False (Mandelbrot), iterations start from 0 and the pixel
    coordinates are the constant c. If True (Julia sets), iterations
    start from the pixel coordinates and c = a + ib is read from the
    parameters.
max_iter : int | None
    Iterations per pixel. If None, `fractalpaint.settings.escape_max_iter`
    is used.
"""
        super().__init__(kind, viewport_factory)
        self.rule = Escape_rule.from_str(rule)
        self.start_from_pixel = start_from_pixel
        self.max_iter = max_iter

    @property
    def budget(self):
        if self.max_iter is None:
            return fp.settings.escape_max_iter
        return self.max_iter

    def domain_size(self, width, height, budget=None):
        # Column 0 and row 0 are not computed
        return (width - 1) * (height - 1)

    def pixel_steps(self, viewport, params, budget):
        width = viewport.width
        height = viewport.height
        max_iter = budget
        rule = self.rule.code
        start_from_pixel = self.start_from_pixel

        for screen_x in range(1, width):
            for screen_y in range(1, height):
                pix_a, pix_b = viewport.to_math(screen_x, screen_y)
                if start_from_pixel:
                    a, b = params.snapshot()
                    escaped = numba_escape_time(
                        pix_a, pix_b, a, b, rule, max_iter
                    )
                else:
                    escaped = numba_escape_time(
                        0., 0., pix_a, pix_b, rule, max_iter
                    )
                color = Color.ESCAPED if escaped else Color.FOREGROUND
                yield Pixel_event(screen_x, screen_y, color)
