# -*- coding: utf-8 -*-
import logging
import time

import numpy as np
import numba

import fractalview as fv
import fractalview.settings
from fractalview.mapping import pixel_to_complex
from fractalview.colorizer import mandelbrot_color


logger = logging.getLogger(__name__)


def new_buffer(width, height):
    """ Returns a black pixel buffer of `width * height` packed colors """
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid frame size: {width} x {height}")
    return np.zeros(width * height, dtype=np.uint32)


def regenerate(buffer, width, height, view):
    """
    Recomputes in-place every pixel of `buffer` from the view state.

    Parameters
    ----------
    buffer : 1d numpy.uint32 array
        The pixel buffer, row-major, of size width * height
    width, height : int
        Size of the frame in pixels
    view : `fractalview.View_state`
        Center, zoom and detail of the view

    The escape radius, color scale and in-set color are read from
    `fractalview.settings`.
    """
    if buffer.size != width * height:
        raise ValueError(
            f"Buffer of size {buffer.size} does not match a "
            f"{width} x {height} frame"
        )
    center_x, center_y = view.center
    t0 = time.perf_counter()
    numba_regenerate(
        buffer, width, height,
        float(center_x), float(center_y), float(view.zoom), int(view.detail),
        float(fv.settings.escape_radius_sq),
        int(fv.settings.color_scale),
        int(fv.settings.inset_color)
    )
    logger.debug(
        f"Regenerated {width} x {height} frame for {view} in "
        f"{time.perf_counter() - t0:.3f} s"
    )


#==============================================================================
# Numba JIT functions
#==============================================================================

@numba.njit
def numba_regenerate(
    buffer, width, height, center_x, center_y, zoom, detail,
    threshold, scale, inset_color
):
    # Full scan of the buffer - one color per pixel index
    npts = buffer.size
    for p in range(npts):
        re, im = pixel_to_complex(p, width, height, center_x, center_y, zoom)
        buffer[p] = mandelbrot_color(
            re, im, detail, threshold, scale, inset_color
        )
