# -*- coding: utf-8 -*-
import logging

from fractalpaint.driver import Run_status


logger = logging.getLogger(__name__)


class Host_loop:
    def __init__(self, driver, process_events=None, repaint=None,
                 events_per_yield=1):
        """
A minimal host event loop pumping a `fractalpaint.Render_driver`.

After every `events_per_yield` pixel events, the loop first requests a
repaint of the region modified (if the surface tracks it), then gives
control to the host through `process_events`. This is where a GUI would
process its pending events: a call to `driver.cancel()`, `driver.clear()`,
`driver.start(kind)` or a parameter change made there is taken into account
at the next suspension point.

Parameters
----------
driver : `fractalpaint.Render_driver`
    The driver
process_events : callable | None
    process_events() is called at each yield
repaint : callable | None
    repaint(rect) is called at each yield with the dirty rectangle
    (x, y, width, height) of the surface, if not None
events_per_yield : int
    Number of pixel events computed between 2 yields to the host
"""
        if events_per_yield < 1:
            raise ValueError(
                f"events_per_yield shall be >= 1, given: {events_per_yield}"
            )
        self.driver = driver
        self.process_events = process_events
        self.repaint = repaint
        self.events_per_yield = int(events_per_yield)
        self.yield_count = 0

    def run(self, kind=None):
        """
        Starts a run (if kind is not None) then pumps the driver until it
        is idle, completed or cancelled.

        Returns
        -------
        run_state : `fractalpaint.driver.Run_state` | None
            The state of the last run, None if the host cleared the surface
        """
        driver = self.driver
        if kind is not None:
            driver.start(kind)

        pending = 0
        while True:
            ret = driver.next_step()
            if isinstance(ret, Run_status):
                break
            pending += 1
            if pending >= self.events_per_yield:
                pending = 0
                self._yield_to_host()

        if pending > 0:
            self._yield_to_host()
        return driver.run_state

    def _yield_to_host(self):
        self.yield_count += 1
        if self.repaint is not None:
            pop_dirty_rect = getattr(self.driver.surface, "pop_dirty_rect",
                                     None)
            if pop_dirty_rect is not None:
                rect = pop_dirty_rect()
                if rect is not None:
                    self.repaint(rect)
        if self.process_events is not None:
            self.process_events()
