# -*- coding: utf-8 -*-
import os
import datetime
import logging
import sys
import textwrap
import enum

import fractalpaint as fp


verbosity_enum = enum.Enum(
    "verbosity_enum",
    (
        "warn @ console",
        "warn + info @ console",
        "debug @ console + log",
        "debug2 @ console + log",
    ),
    module=__name__
)

# verbosity: (logger level, console stream, console level, file level)
_handler_levels = {
    0: (logging.WARNING, "stderr", logging.WARNING, None),
    1: (logging.INFO, "stdout", logging.INFO, None),
    2: (logging.DEBUG, "stdout", logging.INFO, logging.DEBUG),
    3: (logging.DEBUG, "stdout", logging.INFO, logging.NOTSET),
}


def _verbosity_index(verbosity):
    if isinstance(verbosity, str):
        try:
            return verbosity_enum[verbosity].value - 1
        except KeyError:
            raise ValueError(f"Unknown verbosity: {verbosity}") from None
    if isinstance(verbosity, int) and verbosity in _handler_levels:
        return verbosity
    raise ValueError(f"Unknown verbosity: {verbosity}")


def set_log_handlers(verbosity):
    """
    Sets the handlers of the "fractalpaint" logger, replacing the previous
    ones.

    Parameters
    ----------
    verbosity: str | int
        One of the `verbosity_enum` names, or its index:

        - 0, "warn @ console": warnings to stderr
        - 1, "warn + info @ console": info and warnings to stdout
        - 2, "debug @ console + log": same as 1, and debug messages to a
          new log file
        - 3, "debug2 @ console + log": same as 2, all messages to the
          log file

    Returns
    -------
    logger : logging.Logger

    Notes
    -----
    The log file is created under `fractalpaint.settings.log_directory`,
    which shall be set before:

    ::

        fp.settings.log_directory = directory
        fp.set_log_handlers(verbosity="debug @ console + log")
    """
    index = _verbosity_index(verbosity)
    logger_level, stream, console_level, file_level = _handler_levels[index]

    logger = logging.getLogger("fractalpaint")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logger_level)

    ch = logging.StreamHandler(getattr(sys, stream))
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s\n  %(message)s"
    ))
    logger.addHandler(ch)

    log_file = None
    if file_level is not None and fp.settings.log_directory is not None:
        file_prefix = datetime.datetime.now().strftime("%Y-%m-%d_%Hh%M_%S")
        log_file = os.path.join(
            fp.settings.log_directory, f"{file_prefix}_fractalpaint.log"
        )
        fp.utils.mkdir_p(fp.settings.log_directory)
        fh = logging.FileHandler(log_file)
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(
            "%(asctime)s - %(levelname)s - %(filename)s: %(funcName)s\n  "
            "%(message)s"
        ))
        logger.addHandler(fh)

    logger.info(textwrap.dedent(f"""\
        =======================================
          Starting logger for fractalpaint {fp.__version__}
          ======================================="""
    ))
    logger.info(f"Logger verbosity: {verbosity}")
    if file_level is not None:
        if log_file is None:
            logger.warning(
                "Unable to start file logger: "
                "fp.settings.log_directory not specified"
            )
        else:
            logger.info(f"Started file logger: {log_file}")
    return logger
