# -*- coding: utf-8 -*-
"""
============================
03 - Henon strange attractor
============================

Plots the 40000 first points of the Henon map for the classical
parameters a = 1.4, b = 0.3.

Reference:
`fractalpaint.models.Trajectory`
"""
import os

import fractalpaint as fp


def plot(plot_dir):
    fp.set_log_handlers(verbosity="warn + info @ console")

    params = fp.Parameter_store()
    params.load_preset("henon_classic")
    surface = fp.Pixel_surface()
    driver = fp.Render_driver(surface, params)
    driver.run("Henon")

    surface.save_png(
        os.path.join(plot_dir, "henon"),
        tag_dict={"Model": "Henon", "a": params.a, "b": params.b}
    )
    if surface.clipped > 0:
        print(f"{surface.clipped} points outside of the surface")


if __name__ == "__main__":
    realpath = os.path.realpath(__file__)
    plot_dir = os.path.splitext(realpath)[0]
    plot(plot_dir)
