# -*- coding: utf-8 -*-
from .qt_host import Qt_display_host, Frame_widget, show
