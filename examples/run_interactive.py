# -*- coding: utf-8 -*-
"""
============================
Mandelbrot explorer
============================

This is a simple template to start exploring the Mandelbrot set.

Keys:
    - ``+`` / ``-`` doubles / halves the maximal iteration count
    - ``Enter`` regenerates the image
    - ``PageUp`` / ``PageDown`` zooms in / out
    - left click or arrow keys move the center
    - ``Escape`` quits

Good exploration !
"""
import os

import fractalview as fv
import fractalview.settings as settings
import fractalview.gui as fvgui


def explore(log_dir):
    settings.scale = 3
    settings.default_detail = 256
    settings.escape_radius_sq = 32.
    settings.log_directory = log_dir
    fv.set_log_handlers(verbosity="debug @ console + log")
    fvgui.show()


if __name__ == "__main__":
    realpath = os.path.realpath(__file__)
    log_dir = os.path.splitext(realpath)[0]
    explore(log_dir)
