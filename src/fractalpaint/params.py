# -*- coding: utf-8 -*-
import logging
import numbers

import fractalpaint as fp
import fractalpaint.settings

logger = logging.getLogger(__name__)


PARAMETER_PRESETS = {
    "julia_rabbit": (-0.122, 0.745),
    "julia_spiral": (-0.625, 0.425),
    "julia_dendrite": (-0.29, -0.695),
    "henon_classic": (1.4, 0.3),
}
""" Suggested parameters for Julia sets (c = a + ib) and Henon maps """


class Parameter_store:
    def __init__(self, a=None, b=None):
        """
Holds the current values of the free parameters a and b.

The store belongs to the host; a render run only reads it. There is no
snapshot at run start: each pixel (or time step) reads the values visible
at this moment, so that a change made between 2 steps of a running
calculation applies from the next step on.

Parameters
----------
a : float | None
    Initial value of parameter a, defaults to
    `fractalpaint.settings.default_parameter_a`
b : float | None
    Initial value of parameter b, defaults to
    `fractalpaint.settings.default_parameter_b`
"""
        if a is None:
            a = fp.settings.default_parameter_a
        if b is None:
            b = fp.settings.default_parameter_b
        self._a = self._check(a, "a")
        self._b = self._check(b, "b")

    def __repr__(self):
        return f"{self.__class__.__name__}(a={self._a!r}, b={self._b!r})"

    @staticmethod
    def _check(value, name):
        # Safeguard in case the GUI inputs were strings
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(
                f"Float expected for parameter {name}, given: {value!r}"
            )
        return float(value)

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    def set_a(self, value):
        self._a = self._check(value, "a")
        logger.debug(f"Parameter a set to {self._a!r}")

    def set_b(self, value):
        self._b = self._check(value, "b")
        logger.debug(f"Parameter b set to {self._b!r}")

    def snapshot(self):
        """ The current (a, b) pair """
        return self._a, self._b

    def load_preset(self, name):
        """ Sets a and b to one of the `PARAMETER_PRESETS` """
        try:
            a, b = PARAMETER_PRESETS[name]
        except KeyError:
            raise KeyError(
                f"Unknown preset {name!r}, expected one of: "
                f"{', '.join(PARAMETER_PRESETS)}"
            ) from None
        self.set_a(a)
        self.set_b(b)
