# -*- coding: utf-8 -*-
import enum
import logging
import typing

import fractalpaint as fp
import fractalpaint.settings


logger = logging.getLogger(__name__)


class Algorithm_kind(enum.Enum):
    """ The models which can be rendered """
    MANDELBROT = "Mandelbrot"
    JULIA = "Julia"
    JULIA_SINE = "JuliaSine"
    HENON = "Henon"
    LORENZ_XY = "lorenz - xy"
    LORENZ_YZ = "lorenz - yz"
    LORENZ_XZ = "lorenz - xz"

    @classmethod
    def from_str(cls, name):
        """ Look-up by member name or by value, case insensitive:
        "LORENZ_XY", "lorenz_xy", "lorenz - xy" or "LorenzXY" are the same
        kind.
        """
        if isinstance(name, cls):
            return name
        key = "".join(c for c in str(name).lower() if c.isalnum())
        for kind in cls:
            if key in (
                kind.name.lower().replace("_", ""),
                "".join(c for c in kind.value.lower() if c.isalnum())
            ):
                return kind
        raise ValueError(f"Unknown algorithm kind: {name}")


class Color(enum.Enum):
    """ The colors used to paint a pixel """
    FOREGROUND = "foreground"
    ESCAPED = "escaped"
    BACKGROUND = "background"

    @property
    def rgb(self):
        return tuple(fp.settings.colors[self.value])


class Pixel_event(typing.NamedTuple):
    """ A request to paint one pixel of the surface """
    x: int
    y: int
    color: Color


class Algorithm:
    # Family names
    ESCAPE_TIME = "escape_time"
    TRAJECTORY = "trajectory"

    family: str = None
    min_budget: int = 0

    def __init__(self, kind: Algorithm_kind, viewport_factory):
        """
Base class for the rendering algorithms.

Derived classes implement `pixel_steps` which is a generator function:
each `next` call performs the computation for exactly one pixel (escape-time
sets) or one time-step (trajectories) and yields the resulting
`Pixel_event`. The generator is the unit of cooperative scheduling: nothing
is computed between 2 `next` calls.

Parameters
----------
kind : `Algorithm_kind`
    The model rendered by this algorithm
viewport_factory : callable
    viewport_factory(width, height) returns the `fractalpaint.Viewport`
    adapted to a surface
"""
        self.kind = kind
        self.viewport_factory = viewport_factory

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.kind.value}>"

    def viewport(self, width, height):
        """ The viewport for a width x height surface """
        if width <= 1 or height <= 1:
            raise ValueError(
                f"Invalid surface dimensions: {width} x {height}"
            )
        return self.viewport_factory(width, height)

    @property
    def budget(self):
        """ Number of iterations performed per pixel, or number of steps """
        raise NotImplementedError()

    def read_budget(self):
        """ The budget, read from the settings and validated. Called once at
        run start. """
        budget = int(self.budget)
        if budget < self.min_budget:
            raise ValueError(
                f"{self.kind.value}: budget shall be >= {self.min_budget}, "
                f"given: {budget}"
            )
        return budget

    def domain_size(self, width, height, budget=None):
        """ Number of `Pixel_event` of a complete run """
        raise NotImplementedError()

    def pixel_steps(self, viewport, params, budget):
        """
        Generator function, yields the successive `Pixel_event`

        Parameters
        ----------
        viewport : `fractalpaint.Viewport`
            The mapping to screen pixels
        params : `fractalpaint.Parameter_store`
            The parameters, read at use (once per pixel or step)
        budget : int
            The validated budget, see `read_budget`
        """
        raise NotImplementedError()

    def description(self, params):
        """ A short description, used in logs and image tags """
        a, b = params.snapshot()
        return f"{self.kind.value} (a={a!r}, b={b!r})"
