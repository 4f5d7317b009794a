# -*- coding: utf-8 -*-
import logging

import fractalview as fv
import fractalview.settings
from fractalview.mapping import screen_to_plane
from fractalview.render import regenerate
from fractalview.host import Key, Mouse_button


logger = logging.getLogger(__name__)

# Arrow keys -> direction of the center move, screen y axis pointing down
MOVE_KEYS = {
    Key.left: (-1., 0.),
    Key.right: (1., 0.),
    Key.up: (0., -1.),
    Key.down: (0., 1.),
}


class View_state:
    def __init__(self, center=(0., 0.), zoom=None, detail=None):
        """
        The user-adjustable parameters of the view.

        Parameters
        ==========
        center : (float, float)
            Center of the view in the complex plane
        zoom : float | None
            Zoom level ; 2.0 shows [-2, 2] on both axes. Shall not be lower
            than `fractalview.settings.default_zoom`. If None, this default
            is used.
        detail : int | None
            Maximal iteration count, a positive integer. If None,
            `fractalview.settings.default_detail` is used.
        """
        if zoom is None:
            zoom = fv.settings.default_zoom
        if detail is None:
            detail = fv.settings.default_detail
        if zoom < fv.settings.default_zoom:
            raise ValueError(
                f"zoom shall be >= {fv.settings.default_zoom}, given: {zoom}"
            )
        if detail < 1:
            raise ValueError(f"detail shall be >= 1, given: {detail}")
        self.center = (float(center[0]), float(center[1]))
        self.zoom = float(zoom)
        self.detail = int(detail)

    def __repr__(self):
        return (
            f"View_state(center={self.center}, zoom={self.zoom}, "
            f"detail={self.detail})"
        )


class View_controller:
    def __init__(self, width, height, view=None):
        """
        Updates the view state from the input events and regenerates the
        pixel buffer when the state changed.

        Parameters
        ==========
        width, height : int
            Size of the frame in pixels
        view : `View_state` | None
            Initial state, defaults to a new `View_state()`

        Notes
        =====
        Each state-changing method returns True if a regeneration is needed.
        The only guarded no-ops (decrease detail below 1, zoom out below the
        default zoom) return False.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid frame size: {width} x {height}")
        self.width = width
        self.height = height
        self.view = View_state() if view is None else view

    def increase_detail(self):
        self.view.detail *= 2
        logger.info(f"Detail increased to {self.view.detail}")
        return True

    def decrease_detail(self):
        if self.view.detail < 2:
            logger.debug("Detail already at its minimum, ignored")
            return False
        self.view.detail //= 2
        logger.info(f"Detail decreased to {self.view.detail}")
        return True

    def zoom_in(self):
        self.view.zoom *= fv.settings.zoom_factor
        logger.info(f"Zoomed in to {self.view.zoom}")
        return True

    def zoom_out(self):
        zoom_min = fv.settings.default_zoom
        if self.view.zoom <= zoom_min:
            logger.debug("Zoom already at its minimum, ignored")
            return False
        self.view.zoom = max(self.view.zoom / fv.settings.zoom_factor,
                             zoom_min)
        logger.info(f"Zoomed out to {self.view.zoom}")
        return True

    def pan_to(self, x, y):
        """
        Moves the center towards the clicked screen point (x, y), by a
        fraction 1 / zoom of the distance.
        """
        mouse_x, mouse_y = screen_to_plane(x, y, self.width, self.height)
        center_x, center_y = self.view.center
        k = 1. / self.view.zoom
        self.view.center = (
            center_x + (mouse_x - center_x) * k,
            center_y + (mouse_y - center_y) * k
        )
        logger.info(f"Center moved to {self.view.center}")
        return True

    def move(self, dx, dy):
        """ Shifts the center by (dx, dy) times move_factor of the visible
        span """
        step = fv.settings.move_factor * 4. / self.view.zoom
        center_x, center_y = self.view.center
        self.view.center = (center_x + dx * step, center_y + dy * step)
        logger.info(f"Center moved to {self.view.center}")
        return True

    def poll_events(self, host):
        """
        Reads the inputs of the current tick from `host` and updates the
        view state.

        Returns True if the buffer shall be regenerated.
        """
        regen = False

        # Detail changes and explicit regeneration are mutually exclusive
        if host.is_key_pressed(Key.detail_up):
            regen = self.increase_detail()
        elif (host.is_key_pressed(Key.detail_down)
              and self.view.detail >= 2):
            regen = self.decrease_detail()
        elif host.is_key_pressed(Key.regenerate):
            logger.debug("Regeneration requested")
            regen = True

        mouse_pos = host.get_mouse_pos()
        if mouse_pos is not None and host.get_mouse_down(Mouse_button.left):
            regen |= self.pan_to(*mouse_pos)

        for key, (dx, dy) in MOVE_KEYS.items():
            if host.is_key_pressed(key):
                regen |= self.move(dx, dy)

        if host.is_key_pressed(Key.zoom_in):
            regen |= self.zoom_in()
        if host.is_key_pressed(Key.zoom_out):
            regen |= self.zoom_out()

        return regen

    def regenerate(self, buffer):
        """ Full regeneration pass of `buffer` from the current view """
        regenerate(buffer, self.width, self.height, self.view)

    def process_tick(self, host, buffer):
        """
        Processes the inputs of one tick ; regenerates `buffer` at most once.

        Returns True if the buffer was rewritten.
        """
        if not self.poll_events(host):
            return False
        self.regenerate(buffer)
        return True
