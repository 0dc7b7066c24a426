# -*- coding: utf-8 -*-
"""
==================================
05 - Progressive rendering, cancel
==================================

Drives a run through `fractalpaint.Host_loop`, the way an interactive
application would: control is given back to the host every 1000 pixel
events. The host saves a snapshot of the partial image at each yield, and
cancels the run after 20 yields. The partial image is kept on the surface.

Reference:
`fractalpaint.host.Host_loop`
"""
import os

import fractalpaint as fp


def plot(plot_dir):
    fp.set_log_handlers(verbosity="warn + info @ console")

    surface = fp.Pixel_surface()
    driver = fp.Render_driver(surface)
    repainted = []

    def process_events():
        if host.yield_count % 5 == 0:
            surface.save_png(
                os.path.join(plot_dir, f"partial_{host.yield_count:03d}")
            )
        if host.yield_count == 20:
            driver.cancel()

    host = fp.Host_loop(
        driver,
        process_events=process_events,
        repaint=repainted.append,
        events_per_yield=1000
    )
    run_state = host.run("Mandelbrot")
    print(f"{run_state.status.value}: {run_state.progress} pixel events, "
          f"last pixel {run_state.cursor}, {len(repainted)} repaints")


if __name__ == "__main__":
    realpath = os.path.realpath(__file__)
    plot_dir = os.path.splitext(realpath)[0]
    plot(plot_dir)
