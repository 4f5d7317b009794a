# -*- coding: utf-8 -*-
"""
Mapping from the pixel buffer to the complex plane.

The unzoomed view spans [-2, 2] on both axes, the zoom divides this span
and the center shifts it.
"""
import numba


@numba.njit
def screen_to_plane(x, y, width, height):
    """
    Maps a screen point to the unzoomed view [-2, 2] x [-2, 2]

    Parameters
    ----------
    x, y : float
        Screen coordinates in pixels, origin at the top-left corner
    width, height : int
        Size of the frame in pixels

    Returns
    -------
    (xf, yf) : float tuple
    """
    xf = x / width * 4. - 2.
    yf = y / height * 4. - 2.
    return xf, yf


@numba.njit
def pixel_to_complex(p, width, height, center_x, center_y, zoom):
    """
    Returns the complex-plane coordinates of a pixel

    Parameters
    ----------
    p : int
        Linear (row-major) pixel index, in [0, width * height)
    width, height : int
        Size of the frame in pixels
    center_x, center_y : float
        Center of the view in the complex plane
    zoom : float
        Zoom level

    Returns
    -------
    (re, im) : float tuple
    """
    x = p % width
    y = p // width
    xf, yf = screen_to_plane(x, y, width, height)
    return center_x + xf / zoom, center_y + yf / zoom
