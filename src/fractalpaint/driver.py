# -*- coding: utf-8 -*-
import enum
import logging
import textwrap
import time

import numpy as np

import fractalpaint as fp
import fractalpaint.settings
import fractalpaint.models
from fractalpaint.core import Algorithm, Color
from fractalpaint.params import Parameter_store


logger = logging.getLogger(__name__)


class Run_status(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def terminal(self):
        return self in (Run_status.COMPLETED, Run_status.CANCELLED)


class Run_state:
    def __init__(self, kind, domain_size):
        """ Record of an in-progress or finished render run """
        self.kind = kind
        self.domain_size = domain_size
        self.cancelled = False
        self.progress = 0  # number of Pixel_event emitted
        self.cursor = None  # last (screen_x, screen_y) or last step index
        self.status = Run_status.RUNNING
        self.t_start = time.time()
        self.t_end = None
        self.last_log = 0.  # time of last logged progress in seconds

    def __repr__(self):
        return (
            f"<Run_state {self.kind.value} {self.status.value} "
            f"{self.progress} / {self.domain_size}>"
        )

    @property
    def elapsed(self):
        t_end = time.time() if self.t_end is None else self.t_end
        return t_end - self.t_start


class Render_driver:
    def __init__(self, surface, params=None):
        """
Drives the rendering of a model on a pixel surface, one pixel at a time.

The driver is a cooperative generator: each call to `next_step` is a
suspension point, where the computation for exactly one pixel (escape-time
sets) or one time-step (trajectories) is performed and painted. Between 2
calls, the host is free to process its own events, to modify the parameters,
or to request a cancellation, which will be taken into account at the next
call.

Parameters
----------
surface :
    The pixel sink. Shall provide the `width` and `height` attributes and
    the methods `paint_pixel(x, y, color)` and `clear(color)`, see
    `fractalpaint.surface.Pixel_surface`
params : `fractalpaint.Parameter_store` | None
    The parameters a and b. If None, a store holding the default values
    is created.

Notes
-----
Starting a new run while a run is active cancels the active run (its
final status is `Run_status.CANCELLED`) and restarts from the beginning.
"""
        self.surface = surface
        self.params = Parameter_store() if params is None else params
        self._interrupted = np.array([0], dtype=np.bool_)
        self.algorithm = None
        self.viewport = None
        self.run_state = None
        self._steps = None

    @property
    def status(self):
        if self.run_state is None:
            return Run_status.IDLE
        return self.run_state.status

    @property
    def is_running(self):
        return self._steps is not None

    def raise_interruption(self):
        self._interrupted[0] = True

    def lower_interruption(self):
        self._interrupted[0] = False

    def is_interrupted(self):
        return bool(self._interrupted[0])

    def set_parameter_a(self, value):
        self.params.set_a(value)

    def set_parameter_b(self, value):
        self.params.set_b(value)

    def start(self, kind):
        """
        Begins a new run for this kind of model. Nothing is computed before
        the first call to `next_step`.

        Returns
        -------
        run_state : `Run_state`
        """
        algorithm = fp.models.get_algorithm(kind)
        viewport = algorithm.viewport(self.surface.width, self.surface.height)
        budget = algorithm.read_budget()

        if self.is_running:
            logger.warning(
                f"Restarting: active run {self.run_state.kind.value} is "
                "cancelled"
            )
            self.raise_interruption()
            self._finish(Run_status.CANCELLED)

        self.lower_interruption()
        self.algorithm = algorithm
        self.viewport = viewport
        self.run_state = Run_state(
            algorithm.kind,
            algorithm.domain_size(
                self.surface.width, self.surface.height, budget
            )
        )
        self._steps = algorithm.pixel_steps(viewport, self.params, budget)

        logger.info(textwrap.dedent(f"""\
            Starting run: {algorithm.description(self.params)}
              budget: {budget} ; pixel events: """
            f"{self.run_state.domain_size}"
        ))
        return self.run_state

    def next_step(self):
        """
        Computes and paints the next pixel.

        Returns
        -------
        event : `fractalpaint.Pixel_event` | `Run_status`
            The event painted, or the status of the run if it is finished
            (`Run_status.COMPLETED` or `Run_status.CANCELLED`), or
            `Run_status.IDLE` if no run was started.
        """
        if self._steps is None:
            return self.status

        if self.is_interrupted():
            return self._finish(Run_status.CANCELLED)

        try:
            event = next(self._steps)
        except StopIteration:
            return self._finish(Run_status.COMPLETED)
        except Exception:
            logger.error(
                f"Run {self.run_state.kind.value} failed after "
                f"{self.run_state.progress} pixel events"
            )
            self._finish(Run_status.CANCELLED)
            raise

        self.surface.paint_pixel(event.x, event.y, event.color)

        run_state = self.run_state
        run_state.progress += 1
        if self.algorithm.family == Algorithm.ESCAPE_TIME:
            run_state.cursor = (event.x, event.y)
        else:
            run_state.cursor = run_state.progress
        self._log_progress()
        return event

    def events(self, kind=None):
        """
        Generator function, yields the successive `Pixel_event` of a run
        (started here if kind is not None). Returns the final status.
        """
        if kind is not None:
            self.start(kind)
        while True:
            ret = self.next_step()
            if isinstance(ret, Run_status):
                return ret
            yield ret

    def run(self, kind):
        """ Runs to completion without giving back control """
        self.start(kind)
        for _ in self.events():
            pass
        return self.run_state

    def cancel(self):
        """ Requests a cancellation, effective at the next suspension point
        """
        if not self.is_running:
            logger.debug("Cancel requested but no active run")
            return
        self.raise_interruption()
        logger.debug("Cancel requested")

    def clear(self):
        """ Paints the whole surface with the background color, the driver
        goes back to `Run_status.IDLE`
        """
        if self.is_running:
            self.raise_interruption()
            self._finish(Run_status.CANCELLED)
        self.surface.clear(Color.BACKGROUND)
        self.run_state = None
        self.algorithm = None
        self.viewport = None
        self.lower_interruption()
        logger.debug("Surface cleared")

    def _finish(self, status):
        run_state = self.run_state
        run_state.status = status
        run_state.t_end = time.time()
        self._steps.close()
        self._steps = None

        if status is Run_status.CANCELLED:
            run_state.cancelled = True
            logger.warning(textwrap.dedent(f"""\
                Interruption signal received
                  {run_state.kind.value}: cancelled after """
                f"{run_state.progress} / {run_state.domain_size} pixel events"
            ))
        else:
            logger.info(
                f"Run completed: {run_state.kind.value}, "
                f"{run_state.progress} pixel events in "
                f"{run_state.elapsed:.2f} s"
            )
        return status

    def _log_progress(self):
        run_state = self.run_state
        curr_time = time.time()
        time_diff = curr_time - run_state.last_log
        bool_log = (
            (time_diff > fp.settings.progress_log_interval)
            or (run_state.progress == run_state.domain_size)
        )
        if bool_log:
            run_state.last_log = curr_time
            logger.debug(
                f"Progress {run_state.kind.value}: "
                f"{run_state.progress} / {run_state.domain_size}"
            )
