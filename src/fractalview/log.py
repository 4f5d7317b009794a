# -*- coding: utf-8 -*-
import os
import datetime
import logging
import sys
import textwrap
import typing
import enum

import fractalview as fv
import fractalview.settings
import fractalview.utils

# Default log levels
# CRITICAL 50
# ERROR 40
# WARNING 30
# INFO 20
# DEBUG 10
# NOTSET 0

verbosity_list = (
    "warn @ console",
    "warn + info @ console",
    "debug @ console + log",
    "debug2 @ console + log",
)

verbosity_enum = enum.Enum(
    "verbosity_enum",
    verbosity_list,
    module=__name__
)


def _verbosity_level(verbosity):
    """ Returns the integer level (0 to 3) for a verbosity str or int """
    if isinstance(verbosity, str):
        try:
            return verbosity_list.index(verbosity)
        except ValueError:
            raise ValueError(
                f"Unknown verbosity: {verbosity}, expected one of "
                f"{verbosity_list}"
            ) from None
    if isinstance(verbosity, int) and 0 <= verbosity < len(verbosity_list):
        return verbosity
    raise ValueError(f"Unknown verbosity: {verbosity}")


def set_log_handlers(verbosity: typing.Literal[verbosity_enum]=None):
    """
    Sets the verbosity level for application logs.

    Parameters
    ----------
    verbosity: str | int | None
      Possible values for verbosity string parameter are :

        - "warn @ console" only warnings are printed to the console
        - "warn + info @ console" warnings and info are printed to the console
        - "debug @ console + log" warnings, info and debug level printed to
          the console ; starts a new log file and outputs to it- same level
        - "debug2 @ console + log" same as above with lowest priority
          messages printed to log file.

      The matching int 0 to 3 is also accepted. If None,
      `fractalview.settings.verbosity` is used.

    Notes
    -----
    The directory for the log files shall have been defined before
    through the `fractalview.settings.log_directory` parameter:

    ::

        fv.settings.log_directory = directory
        fv.set_log_handlers(verbosity="debug @ console + log")
    """
    if verbosity is None:
        verbosity = fv.settings.verbosity
    _verbosity = _verbosity_level(verbosity)

    logger = logging.getLogger("fractalview")

    # Remove previous handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    verbosity_mapping = {
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
        3: logging.DEBUG,
    }
    logger.setLevel(verbosity_mapping[_verbosity])

    # Console handler
    if _verbosity <= 0:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(logging.WARNING)
    else:
        ch = logging.StreamHandler(sys.stdout)
        ch.setLevel(logging.INFO)
    ch_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s\n  %(message)s'
    )
    ch.setFormatter(ch_formatter)
    logger.addHandler(ch)

    # File handler
    file_config = None
    file_logger_warning = False
    if _verbosity >= 2:
        if fv.settings.log_directory is None:
            file_logger_warning = True
        else:
            now = datetime.datetime.now()
            file_prefix = now.strftime("%Y-%m-%d_%Hh%M_%S")
            file_config = os.path.join(
                fv.settings.log_directory,
                f'{file_prefix}_fractalview.log'
            )
            fv.utils.mkdir_p(os.path.dirname(file_config))

            fh = logging.FileHandler(file_config)
            fh.setLevel(logging.DEBUG)
            if _verbosity == 3:
                fh.setLevel(logging.NOTSET)
            fh_formatter = logging.Formatter(
                "%(asctime)s - %(levelname)s - %(filename)s: %(funcName)s\n  "
                "%(message)s"
            )
            fh.setFormatter(fh_formatter)
            logger.addHandler(fh)

    logger.info(textwrap.dedent(f"""\
        =======================================
          Starting logger for fractalview {fv.__version__}
          ======================================="""
    ))
    logger.info(f"Logger verbosity: {verbosity_list[_verbosity]}")

    if file_logger_warning:
        logger.warning(
            "Unable to start file logger: "
            "fv.settings.log_directory not specified"
        )
    elif file_config is not None:
        logger.info(f"Started file logger: {file_config}")

    return logger
