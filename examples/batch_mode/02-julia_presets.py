# -*- coding: utf-8 -*-
"""
==========================
02 - Julia sets, 3 presets
==========================

Renders the quadratic Julia set for the parameter presets shipped with
fractalpaint ("rabbit", "spiral", "dendrite"), then the sine Julia set for
the default parameters.

Reference:
`fractalpaint.params.PARAMETER_PRESETS`
"""
import os

import fractalpaint as fp


def plot(plot_dir):
    fp.set_log_handlers(verbosity="warn + info @ console")

    params = fp.Parameter_store()
    surface = fp.Pixel_surface()
    driver = fp.Render_driver(surface, params)

    for preset in ("julia_rabbit", "julia_spiral", "julia_dendrite"):
        params.load_preset(preset)
        driver.clear()
        driver.run("Julia")
        a, b = params.snapshot()
        surface.save_png(
            os.path.join(plot_dir, preset),
            tag_dict={"Model": "Julia", "a": a, "b": b}
        )

    # Default parameters: a = -0.5, b = -0.99998
    params.set_a(fp.settings.default_parameter_a)
    params.set_b(fp.settings.default_parameter_b)
    driver.clear()
    driver.run("JuliaSine")
    surface.save_png(os.path.join(plot_dir, "julia_sine"))


if __name__ == "__main__":
    realpath = os.path.realpath(__file__)
    plot_dir = os.path.splitext(realpath)[0]
    plot(plot_dir)
