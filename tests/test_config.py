# -*- coding: utf-8 -*-
""" Gathers codes snippets used in the test suite.
"""
import unittest
from contextlib import contextmanager
from functools import wraps
import os
import sys
import numpy as np
import PIL.Image
import PIL.ImageChops


test_dir = os.path.dirname(__file__)
temporary_data_dir = os.path.join(test_dir, "_temporary_data")


def suite(testcases):
    """
    Parameters
    testcases : an iterable of unittest.TestCases

    Returns
    suite : a unittest.TestSuite combining all the individual tests routines
            from the input 'testcases' list (by default these are the method
            names beginning with test).
    """
    suite = unittest.TestSuite()
    loader = unittest.TestLoader()
    for testcase in testcases:
        suite.addTests(loader.loadTestsFromTestCase(testcase))
    return suite

@contextmanager
def suppress_stdout():
    """ Temporarly suppress print statement during tests. """
    with open(os.devnull, "w") as devnull:
        old_stdout = sys.stdout
        sys.stdout = devnull
        old_stderr = sys.stderr
        sys.stderr = devnull
        try:
            yield
        finally:
            sys.stdout = old_stdout
            sys.stderr = old_stderr

def no_stdout(func):
    """ Decorator, suppress output of the decorated function"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        with suppress_stdout():
            return func(*args, **kwargs)
    return wrapper

def compare_png(ref_file, test_file):
    """ Return a scalar value function of the difference between 2 images :
    arithmetic mean of the rgb deltas
    """
    with PIL.Image.open(ref_file) as ref_image, \
            PIL.Image.open(test_file) as test_image:
        diff_image = PIL.ImageChops.difference(
            ref_image.convert("RGB"), test_image.convert("RGB")
        )
    errors = np.asarray(diff_image) / 255.
    return np.mean(errors)


class Recording_surface:
    def __init__(self, width, height):
        """ A pixel sink which only records the calls it receives """
        self.width = width
        self.height = height
        self.painted = []
        self.cleared = []

    def paint_pixel(self, x, y, color):
        self.painted += [(x, y, color)]

    def clear(self, color):
        self.cleared += [color]
        self.painted = []
