# -*- coding: utf-8 -*-
"""
Discrete (Henon) and Euler-integrated continuous (Lorenz) dynamical systems,
plotted as clouds of isolated points.

Lorenz equations, after P. Bourke (paulbourke.net/fractals/lorenz):

    dx / dt = A (y - x)
    dy / dt = x (B - z) - y
    dz / dt = xy - C z

with the commonly used set of constants A = 10, B = 28, C = 8 / 3.
"""
import numba

import fractalpaint as fp
import fractalpaint.settings
from fractalpaint.core import Algorithm_kind, Color, Pixel_event


HENON_INITIAL_STATE = (0.1, 0.1)
LORENZ_INITIAL_STATE = (0.1, 0., 0.)

LORENZ_A = 10.
LORENZ_B = 28.
LORENZ_C = 8. / 3.
LORENZ_H = 0.01

HENON = "henon"
LORENZ = "lorenz"

_SYSTEMS = {
    Algorithm_kind.HENON: HENON,
    Algorithm_kind.LORENZ_XY: LORENZ,
    Algorithm_kind.LORENZ_YZ: LORENZ,
    Algorithm_kind.LORENZ_XZ: LORENZ,
}


@numba.njit(nogil=True)
def numba_henon_step(x, y, a, b):
    x_new = 1. - a * x * x + y
    y_new = b * x
    return x_new, y_new


@numba.njit(nogil=True)
def numba_lorenz_step(x, y, z, h, A, B, C):
    # Explicit Euler step
    x_new = x + h * A * (y - x)
    y_new = y + h * (x * (B - z) - y)
    z_new = z + h * (x * y - C * z)
    return x_new, y_new, z_new


def system_of(kind):
    """ "henon" | "lorenz" """
    kind = Algorithm_kind.from_str(kind)
    try:
        return _SYSTEMS[kind]
    except KeyError:
        raise ValueError(f"{kind.value} is not a trajectory") from None


def initial_state(kind):
    if system_of(kind) == HENON:
        return HENON_INITIAL_STATE
    return LORENZ_INITIAL_STATE


def step(state, kind, a=None, b=None):
    """
    Advances the dynamical system by one step.

    Parameters
    ----------
    state : tuple of float
        (x, y) for the Henon map, (x, y, z) for the Lorenz system
    kind : `fractalpaint.Algorithm_kind`
        The 3 Lorenz projections share the same system
    a, b : float
        Henon map parameters, ignored by the Lorenz system

    Returns
    -------
    new_state : tuple of float
    """
    if system_of(kind) == HENON:
        if a is None or b is None:
            raise ValueError("Henon map needs parameters a and b")
        x, y = state
        return numba_henon_step(float(x), float(y), float(a), float(b))
    x, y, z = state
    return numba_lorenz_step(
        float(x), float(y), float(z),
        LORENZ_H, LORENZ_A, LORENZ_B, LORENZ_C
    )


class Trajectory(fp.Algorithm):
    family = fp.Algorithm.TRAJECTORY

    def __init__(self, kind, viewport_factory, projection, budget_setting,
                 max_steps=None):
        """
A trajectory plot: each step of the system paints one isolated point.

Parameters
----------
kind : `fractalpaint.Algorithm_kind`
    The model rendered
viewport_factory : callable
    viewport_factory(width, height) returns the `fractalpaint.Viewport`
projection : (int, int)
    Indices of the 2 state variables mapped to (screen_x, screen_y)
budget_setting : str
    Name of the `fractalpaint.settings` attribute giving the number of steps
max_steps : int | None
    If not None, overrides the number of steps from the settings
"""
        super().__init__(kind, viewport_factory)
        self.system = system_of(kind)
        self.projection = projection
        self.budget_setting = budget_setting
        self.max_steps = max_steps

    @property
    def budget(self):
        if self.max_steps is None:
            return getattr(fp.settings, self.budget_setting)
        return self.max_steps

    def domain_size(self, width, height, budget=None):
        return self.budget if budget is None else budget

    @property
    def initial_state(self):
        return initial_state(self.kind)

    def pixel_steps(self, viewport, params, budget):
        max_steps = budget
        i_x, i_y = self.projection

        if self.system == HENON:
            x, y = HENON_INITIAL_STATE
            for _ in range(max_steps):
                a, b = params.snapshot()
                x, y = numba_henon_step(x, y, a, b)
                screen_x, screen_y = viewport.to_pixel(x, y)
                yield Pixel_event(screen_x, screen_y, Color.FOREGROUND)
        else:
            state = LORENZ_INITIAL_STATE
            for _ in range(max_steps):
                state = numba_lorenz_step(
                    state[0], state[1], state[2],
                    LORENZ_H, LORENZ_A, LORENZ_B, LORENZ_C
                )
                screen_x, screen_y = viewport.to_pixel(
                    state[i_x], state[i_y]
                )
                yield Pixel_event(screen_x, screen_y, Color.FOREGROUND)
