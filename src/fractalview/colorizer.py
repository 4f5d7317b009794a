# -*- coding: utf-8 -*-
"""
Escape-time iteration and coloring for the power-2 Mandelbrot set.
"""
import numba


@numba.njit
def rgb_to_int(r, g, b):
    """ Packs a RGB triplet as 0xRRGGBB, each channel clamped to 0..255 """
    r = min(max(r, 0), 255)
    g = min(max(g, 0), 255)
    b = min(max(b, 0), 255)
    return 65536 * r + 256 * g + b


@numba.njit
def escape_iteration(re, im, detail, threshold):
    """
    Iterates c <- c**2 + z0 from c = 0.

    Returns the iteration number (starting at 1) at which the squared
    modulus of c exceeds `threshold`, or 0 if this does not happen within
    `detail` iterations.
    """
    z0 = complex(re, im)
    c = 0j
    n_iter = 0
    while n_iter < detail:
        n_iter += 1
        c = c * c + z0
        if c.real ** 2 + c.imag ** 2 > threshold:
            return n_iter
    return 0


@numba.njit
def escape_color(iteration, scale, inset_color):
    """
    Color from the escape iteration: in-set color if `iteration` is 0,
    otherwise rgb(iteration * scale, iteration, scale // iteration)
    """
    if iteration <= 0:
        return inset_color
    return rgb_to_int(iteration * scale, iteration, scale // iteration)


@numba.njit
def mandelbrot_color(re, im, detail, threshold, scale, inset_color):
    """ Packed RGB color of the complex point re + i.im """
    return escape_color(
        escape_iteration(re, im, detail, threshold), scale, inset_color
    )
