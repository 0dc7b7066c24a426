# -*- coding: utf-8 -*-
"""
The algorithm table: one entry per `fractalpaint.Algorithm_kind`.

A single escape-time evaluator and a single trajectory stepper are shared by
all kinds ; only the constants (viewport, recurrence rule, projected
coordinates, budget) differ.
"""
from fractalpaint.core import Algorithm_kind
from fractalpaint.utils import Protected_mapping
import fractalpaint.viewport as fpv

from .escape_time import Escape_time, Escape_rule, evaluate
from .trajectory import Trajectory, step, initial_state


ALGORITHMS = Protected_mapping({
    Algorithm_kind.MANDELBROT: Escape_time(
        Algorithm_kind.MANDELBROT, fpv.mandelbrot_viewport,
        rule=Escape_rule.QUADRATIC, start_from_pixel=False
    ),
    Algorithm_kind.JULIA: Escape_time(
        Algorithm_kind.JULIA, fpv.julia_viewport,
        rule=Escape_rule.QUADRATIC, start_from_pixel=True
    ),
    Algorithm_kind.JULIA_SINE: Escape_time(
        Algorithm_kind.JULIA_SINE, fpv.julia_viewport,
        rule=Escape_rule.SINE_COSINE, start_from_pixel=True
    ),
    Algorithm_kind.HENON: Trajectory(
        Algorithm_kind.HENON, fpv.henon_viewport,
        projection=(0, 1), budget_setting="henon_max_steps"
    ),
    Algorithm_kind.LORENZ_XY: Trajectory(
        Algorithm_kind.LORENZ_XY, fpv.lorenz_viewport,
        projection=(0, 1), budget_setting="lorenz_xy_max_steps"
    ),
    Algorithm_kind.LORENZ_YZ: Trajectory(
        Algorithm_kind.LORENZ_YZ, fpv.lorenz_viewport,
        projection=(1, 2), budget_setting="lorenz_yz_max_steps"
    ),
    Algorithm_kind.LORENZ_XZ: Trajectory(
        Algorithm_kind.LORENZ_XZ, fpv.lorenz_viewport,
        projection=(0, 2), budget_setting="lorenz_xz_max_steps"
    ),
}, key_func=Algorithm_kind.from_str)


def get_algorithm(kind):
    """ A (private copy of the) table entry for this kind """
    return ALGORITHMS[kind]
