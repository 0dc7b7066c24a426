# -*- coding: utf-8 -*-
"""
========================
01 - Full Mandelbrot set
========================

This basic example renders the full Mandelbrot set on the default
1000 x 600 surface: points of the set are painted black, escaped points
gray.

Reference:
`fractalpaint.models.Escape_time`
"""
import os

import fractalpaint as fp


def plot(plot_dir):
    """ Renders to completion then saves the surface """
    fp.settings.log_directory = os.path.join(plot_dir, "log")
    fp.set_log_handlers(verbosity="debug @ console + log")

    surface = fp.Pixel_surface()
    driver = fp.Render_driver(surface)
    run_state = driver.run("Mandelbrot")

    surface.save_png(
        os.path.join(plot_dir, "mandelbrot"),
        tag_dict={
            "Model": run_state.kind.value,
            "Max iterations": fp.settings.escape_max_iter,
        }
    )


if __name__ == "__main__":
    realpath = os.path.realpath(__file__)
    plot_dir = os.path.splitext(realpath)[0]
    plot(plot_dir)
