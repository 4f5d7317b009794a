# -*- coding: utf-8 -*-
"""
Boundary with the display host: the window that owns the screen surface and
reports the user inputs, once per tick.
"""
import enum
import logging
import time

import fractalview as fv
import fractalview.settings
from fractalview.render import new_buffer


logger = logging.getLogger(__name__)

Key = enum.Enum(
    "Key",
    (
        "escape",
        "detail_up",
        "detail_down",
        "regenerate",
        "zoom_in",
        "zoom_out",
        "left",
        "right",
        "up",
        "down",
    ),
    module=__name__
)

Mouse_button = enum.Enum(
    "Mouse_button",
    ("left", "middle", "right"),
    module=__name__
)


class Display_error(RuntimeError):
    """ The display host could not be created or could not present a frame.
    There is no fallback: this error is fatal. """


class Display_host:
    """
    Interface of a display host.

    A display host owns a fixed-size window, reports the discrete inputs of
    the current tick and presents the pixel buffer handed back to it.
    Concrete hosts shall implement all the methods below.
    """

    def is_open(self) -> bool:
        """ False once the window has been closed """
        raise NotImplementedError()

    def is_key_down(self, key) -> bool:
        """ True while `key` is held down """
        raise NotImplementedError()

    def is_key_pressed(self, key, no_repeat: bool=True) -> bool:
        """ True if `key` was pressed since the last tick. If `no_repeat` is
        False, a key held down also counts as pressed """
        raise NotImplementedError()

    def get_mouse_pos(self):
        """ (x, y) pointer position in pixels, None if outside the window """
        raise NotImplementedError()

    def get_mouse_down(self, button) -> bool:
        """ True while the mouse `button` is held down """
        raise NotImplementedError()

    def update_with_buffer(self, buffer, width: int, height: int):
        """ Presents the pixel buffer ; raises `Display_error` on failure """
        raise NotImplementedError()


def run_loop(host, controller, fps=None):
    """
    Runs the tick loop until the host window is closed or the escape key is
    held down.

    Each tick, the controller processes the inputs (and regenerates the
    buffer if needed), then the buffer is handed back to the host for
    presentation, then the loop sleeps 1 / fps seconds.

    Parameters
    ----------
    host : `Display_host`
        The display host
    controller : `fractalview.View_controller`
        The view-state controller
    fps : int | None
        The tick rate. If None, `fractalview.settings.fps` is used.

    Returns
    -------
    ticks : int
        The number of ticks run
    """
    if fps is None:
        fps = fv.settings.fps
    if fps <= 0:
        raise ValueError(f"Invalid tick rate: {fps}")
    tick_duration = 1. / fps

    width, height = controller.width, controller.height
    buffer = new_buffer(width, height)
    logger.info(f"Starting main loop: {width} x {height} @ {fps} fps")

    ticks = 0
    while host.is_open() and not host.is_key_down(Key.escape):
        controller.process_tick(host, buffer)
        host.update_with_buffer(buffer, width, height)
        ticks += 1
        time.sleep(tick_duration)

    logger.info(f"Main loop exited after {ticks} ticks")
    return ticks
