# -*- coding: utf-8 -*-
__license__ = "MIT"
__version__ = "0.1.0"

from . import settings
from . import utils
from .mapping import pixel_to_complex, screen_to_plane
from .colorizer import (
    rgb_to_int, escape_iteration, escape_color, mandelbrot_color
)
from .render import new_buffer, regenerate
from .host import Key, Mouse_button, Display_error, Display_host, run_loop
from .controller import View_state, View_controller
from .log import set_log_handlers
