# -*- coding: utf-8 -*-
"""
====================================
04 - Lorenz attractor, 3 projections
====================================

The same Lorenz orbit projected on the xy, yz and xz planes. Each
projection is rendered on its own surface.

Reference:
`fractalpaint.models.Trajectory`
"""
import os

import fractalpaint as fp


def plot(plot_dir):
    fp.set_log_handlers(verbosity="warn + info @ console")

    for kind in (fp.Algorithm_kind.LORENZ_XY, fp.Algorithm_kind.LORENZ_YZ,
                 fp.Algorithm_kind.LORENZ_XZ):
        surface = fp.Pixel_surface()
        run_state = fp.Render_driver(surface).run(kind)
        surface.save_png(
            os.path.join(plot_dir, kind.name.lower()),
            tag_dict={"Model": kind.value, "Steps": run_state.progress}
        )


if __name__ == "__main__":
    realpath = os.path.realpath(__file__)
    plot_dir = os.path.splitext(realpath)[0]
    plot(plot_dir)
