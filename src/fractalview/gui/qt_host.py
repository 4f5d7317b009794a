# -*- coding: utf-8 -*-
import sys
import traceback
import logging

import numpy as np

from PyQt6 import QtCore
from PyQt6.QtCore import Qt
from PyQt6 import QtGui
from PyQt6.QtWidgets import (
    QApplication,
    QWidget,
    QMessageBox,
)

import fractalview as fv
import fractalview.settings
from fractalview.host import Key, Mouse_button, Display_error, Display_host


logger = logging.getLogger(__name__)

WINDOW_TITLE = (
    "Mandelbrot Generator - "
    "+ for more Detail, - for Less, Enter to Generate, "
    "PageUp / PageDown to Zoom, Click or Arrows to Move"
)

# Qt key codes (int) associated with each `Key`
QT_KEYS = {
    Key.escape: (Qt.Key.Key_Escape.value,),
    Key.detail_up: (Qt.Key.Key_Plus.value,),
    Key.detail_down: (Qt.Key.Key_Minus.value,),
    Key.regenerate: (Qt.Key.Key_Return.value, Qt.Key.Key_Enter.value),
    Key.zoom_in: (Qt.Key.Key_PageUp.value,),
    Key.zoom_out: (Qt.Key.Key_PageDown.value,),
    Key.left: (Qt.Key.Key_Left.value,),
    Key.right: (Qt.Key.Key_Right.value,),
    Key.up: (Qt.Key.Key_Up.value,),
    Key.down: (Qt.Key.Key_Down.value,),
}

QT_BUTTONS = {
    Qt.MouseButton.LeftButton: Mouse_button.left,
    Qt.MouseButton.MiddleButton: Mouse_button.middle,
    Qt.MouseButton.RightButton: Mouse_button.right,
}


def getapp():
    app = QtCore.QCoreApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def buffer_to_qimage(buffer, width, height):
    """ Returns a (deep-copied) QImage from a packed 0xRRGGBB buffer """
    argb = (buffer.astype(np.uint32) | np.uint32(0xFF000000)).tobytes()
    qim = QtGui.QImage(
        argb, width, height, 4 * width,
        QtGui.QImage.Format.Format_RGB32
    )
    # The QImage does not own argb memory
    return qim.copy()


class Frame_widget(QWidget):
    def __init__(self, width, height):
        """
        A fixed-size window which displays the current frame and records the
        keyboard and mouse inputs between two ticks.
        """
        super().__init__(parent=None)
        self.setFixedSize(width, height)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setCursor(QtGui.QCursor(Qt.CursorShape.CrossCursor))

        self.closed = False
        self.keys_down = set()
        self.keys_pressed = set()
        self.buttons_down = set()
        self.mouse_pos = None

        self._qim = QtGui.QImage(
            width, height, QtGui.QImage.Format.Format_RGB32
        )
        self._qim.fill(Qt.GlobalColor.black)

    def set_image(self, qim):
        self._qim = qim
        self.update()

    def end_tick(self):
        self.keys_pressed.clear()

    def paintEvent(self, event):
        painter = QtGui.QPainter(self)
        painter.drawImage(self.rect(), self._qim)
        painter.end()

    def keyPressEvent(self, event):
        if event.isAutoRepeat():
            return
        self.keys_down.add(event.key())
        self.keys_pressed.add(event.key())

    def keyReleaseEvent(self, event):
        if event.isAutoRepeat():
            return
        self.keys_down.discard(event.key())

    def mousePressEvent(self, event):
        self._set_mouse_pos(event)
        button = QT_BUTTONS.get(event.button())
        if button is not None:
            self.buttons_down.add(button)

    def mouseReleaseEvent(self, event):
        self._set_mouse_pos(event)
        self.buttons_down.discard(QT_BUTTONS.get(event.button()))

    def mouseMoveEvent(self, event):
        self._set_mouse_pos(event)

    def leaveEvent(self, event):
        self.mouse_pos = None

    def focusOutEvent(self, event):
        # Releases are not reported to an unfocused window
        self.keys_down.clear()
        self.buttons_down.clear()

    def closeEvent(self, event):
        self.closed = True
        event.accept()

    def _set_mouse_pos(self, event):
        pos = event.position()
        x, y = pos.x(), pos.y()
        if 0 <= x < self.width() and 0 <= y < self.height():
            self.mouse_pos = (x, y)
        else:
            self.mouse_pos = None


class Qt_display_host(Display_host):
    def __init__(self, width, height, title=WINDOW_TITLE):
        """
        Display host based on a PyQt6 window.

        Parameters
        ----------
        width, height : int
            Size of the frame in pixels
        title : str
            Window title

        Raises
        ------
        `fractalview.Display_error` if no screen is available.
        """
        self._app = getapp()
        if QtGui.QGuiApplication.primaryScreen() is None:
            raise Display_error("Unable to open a window: no screen available")
        self.width = width
        self.height = height
        self._widget = Frame_widget(width, height)
        self._widget.setWindowTitle(title)
        self._widget.show()
        self._app.processEvents()
        logger.info(f"Opened {width} x {height} window")

    def is_open(self):
        return not self._widget.closed

    def is_key_down(self, key):
        return any(k in self._widget.keys_down for k in QT_KEYS[key])

    def is_key_pressed(self, key, no_repeat=True):
        if not no_repeat and self.is_key_down(key):
            return True
        return any(k in self._widget.keys_pressed for k in QT_KEYS[key])

    def get_mouse_pos(self):
        return self._widget.mouse_pos

    def get_mouse_down(self, button):
        return button in self._widget.buttons_down

    def update_with_buffer(self, buffer, width, height):
        if (width, height) != (self.width, self.height):
            raise Display_error(
                f"Frame {width} x {height} does not match the "
                f"{self.width} x {self.height} window"
            )
        if buffer.size != width * height:
            raise Display_error(
                f"Buffer of size {buffer.size} does not match the "
                f"{width} x {height} window"
            )
        try:
            self._widget.set_image(buffer_to_qimage(buffer, width, height))
            self._widget.end_tick()
            self._app.processEvents()
        except RuntimeError as exc:
            raise Display_error(f"Unable to present the frame: {exc}") from exc

    def close(self):
        if not self._widget.closed:
            self._widget.close()
        self._app.processEvents()


def excepthook(exc_type, exc_value, exc_traceback):
    """ Handling GUI Exceptions"""
    exc_str = "".join(
        traceback.format_exception(exc_type, exc_value, exc_traceback)
    )
    logger.critical(exc_str)
    QMessageBox.critical(None, 'GUI Error', exc_str)


def show():
    """
    Opens the window and runs the main loop until it is closed or the
    escape key is held down. The frame size is given by
    `fractalview.settings.frame_size()`.
    """
    width, height = fv.settings.frame_size()
    host = Qt_display_host(width, height)
    controller = fv.View_controller(width, height)
    sys.excepthook = excepthook
    try:
        fv.run_loop(host, controller)
    finally:
        sys.excepthook = sys.__excepthook__
        host.close()
