"""Qt application entry point for the screen_ruler overlay."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import math
import sys

from PySide6 import QtCore, QtGui, QtWidgets

from . import __version__ as APP_VERSION
from .geometry import (
    display_angle_degrees,
    format_angle,
    ruler_angle,
    scale_labels,
    tick_marks,
)
from .logger import get_logger, set_debug
from .models import AppConfig, DragTarget, WindowGeometry
from .session import RulerSession
from .utils.qt import (
    array_to_qpoint,
    geometries_to_region,
    geometry_to_qrect,
    qpoint_to_array,
)

log = get_logger("app")

BACKGROUND_LEVEL = 1.0
ACCENT_LEVEL = 0.7


# ------------------------------ Ruler Widget ----------------------------------


class RulerOverlay(QtWidgets.QWidget):
    closed = QtCore.Signal()

    def __init__(self, desktop_rect: QtCore.QRect, cfg: AppConfig) -> None:
        super().__init__(
            None, QtCore.Qt.WindowType.FramelessWindowHint | QtCore.Qt.WindowType.Tool
        )
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.setWindowFlag(
            QtCore.Qt.WindowType.WindowStaysOnTopHint, cfg.ui.always_on_top
        )
        self.setWindowTitle("Ruler")
        self.setMouseTracking(True)

        self._desktop_origin = desktop_rect.topLeft()
        self._session = RulerSession.initial(
            (desktop_rect.width(), desktop_rect.height()), cfg.ruler
        )
        self._opacity: float = max(0.05, min(1.0, cfg.ui.opacity))
        self._font_size: float = max(6.0, cfg.ui.font_size)
        self._redraw_interval_ms: int = max(0, cfg.ruler.redraw_interval_ms)

        self._applied: WindowGeometry = self._session.geometry()
        self._input_region = QtGui.QRegion()
        self._since_update = QtCore.QElapsedTimer()
        self._since_update.start()

        self._apply_geometry(force=True)
        self._refresh_input_region()

    # ----------------------------- Properties ---------------------------------

    @property
    def session(self) -> RulerSession:
        return self._session

    # ----------------------------- Geometry -----------------------------------

    def _apply_geometry(self, force: bool) -> bool:
        """Move/resize the window to fit the ruler, at most once per interval."""
        if not force and self._since_update.elapsed() <= self._redraw_interval_ms:
            return False
        geom = self._session.geometry()
        rect = geometry_to_qrect(geom).translated(self._desktop_origin)
        self.setGeometry(rect)
        self._applied = geom
        self._since_update.restart()
        return True

    def _refresh_input_region(self) -> None:
        self._input_region = geometries_to_region(self._session.control_regions())

    def _screen_cursor(self, e: QtGui.QMouseEvent) -> QtCore.QPointF:
        return e.globalPosition() - QtCore.QPointF(self._desktop_origin)

    def _local(self, p: QtCore.QPointF) -> QtCore.QPointF:
        return p - QtCore.QPointF(self._applied.x, self._applied.y)

    # ----------------------------- Interaction --------------------------------

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            e.ignore()
            return
        if not self._input_region.contains(e.position().toPoint()):
            e.ignore()
            return
        self._session.press(qpoint_to_array(self._screen_cursor(e)))
        if self._session.dragging is not DragTarget.IDLE:
            self.setCursor(QtCore.Qt.CursorShape.ClosedHandCursor)
        e.accept()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent) -> None:
        if self._session.dragging is DragTarget.IDLE:
            if self._input_region.contains(e.position().toPoint()):
                self.setCursor(QtCore.Qt.CursorShape.OpenHandCursor)
            else:
                self.setCursor(QtCore.Qt.CursorShape.ArrowCursor)
            return
        mods = e.modifiers()
        fix_distance = bool(mods & QtCore.Qt.KeyboardModifier.ControlModifier)
        fix_angle = bool(mods & QtCore.Qt.KeyboardModifier.ShiftModifier)
        self._session.move(
            qpoint_to_array(self._screen_cursor(e)), fix_distance, fix_angle
        )
        self._apply_geometry(force=False)
        self.update()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            return
        self._session.release()
        self._apply_geometry(force=True)
        self._refresh_input_region()
        self.setCursor(QtCore.Qt.CursorShape.OpenHandCursor)
        self.update()
        e.accept()

    def keyPressEvent(self, e: QtGui.QKeyEvent) -> None:
        if e.key() in (QtCore.Qt.Key.Key_Q, QtCore.Qt.Key.Key_Escape):
            self.close()

    def closeEvent(self, e: QtGui.QCloseEvent) -> None:
        self.closed.emit()
        super().closeEvent(e)

    # ----------------------------- Painting -----------------------------------

    def _gray(self, level: float) -> QtGui.QColor:
        return QtGui.QColor.fromRgbF(level, level, level, self._opacity)

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.setCompositionMode(QtGui.QPainter.CompositionMode.CompositionMode_Source)
        painter.fillRect(self.rect(), QtGui.QColor(0, 0, 0, 0))
        painter.setCompositionMode(
            QtGui.QPainter.CompositionMode.CompositionMode_SourceOver
        )

        start = self._session.start
        end = self._session.end
        half_w = self._session.params.half_width
        radius = self._session.params.control_radius
        length = self._session.length()
        angle = ruler_angle(start, end)

        bg = self._gray(BACKGROUND_LEVEL)
        accent_pen = QtGui.QPen(self._gray(ACCENT_LEVEL))
        accent_pen.setWidthF(2.0)

        painter.translate(self._local(array_to_qpoint(start)))
        painter.rotate(math.degrees(angle))

        # Body
        body = QtCore.QRectF(0.0, -half_w, length, half_w * 2.0)
        painter.fillRect(body, bg)
        painter.setPen(accent_pen)
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawRect(body)

        # Endpoint discs, outlined on their outer halves
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        painter.setBrush(QtGui.QBrush(bg))
        painter.drawEllipse(QtCore.QPointF(0.0, 0.0), radius, radius)
        painter.drawEllipse(QtCore.QPointF(length, 0.0), radius, radius)
        painter.setPen(accent_pen)
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawArc(
            QtCore.QRectF(-radius, -radius, radius * 2.0, radius * 2.0),
            90 * 16,
            180 * 16,
        )
        painter.drawArc(
            QtCore.QRectF(length - radius, -radius, radius * 2.0, radius * 2.0),
            -90 * 16,
            180 * 16,
        )

        # Ticks along the top edge
        for tick in tick_marks(length):
            x = float(tick.position)
            painter.drawLine(
                QtCore.QPointF(x, -half_w), QtCore.QPointF(x, -(half_w - tick.depth))
            )

        font = painter.font()
        font.setPointSizeF(self._font_size)
        painter.setFont(font)
        metrics = QtGui.QFontMetricsF(font)

        # Angle indicator
        painter.save()
        painter.translate(30.0, half_w - 30.0)
        painter.drawLine(QtCore.QPointF(0.0, 0.0), QtCore.QPointF(30.0, 0.0))
        painter.drawLine(
            QtCore.QPointF(0.0, 0.0),
            QtCore.QPointF(math.cos(angle) * 30.0, -math.sin(angle) * 30.0),
        )
        sweep = math.degrees(-angle) % 360.0
        painter.drawArc(
            QtCore.QRectF(-16.0, -16.0, 32.0, 32.0), 0, -int(round(sweep * 16))
        )
        angle_text = format_angle(display_angle_degrees(angle))
        text_height = metrics.tightBoundingRect(angle_text).height()
        painter.setPen(self._gray(ACCENT_LEVEL))
        painter.drawText(QtCore.QPointF(35.0, text_height), angle_text)
        painter.restore()

        # Pixel labels, fading out toward the end endpoint
        for label in scale_labels(length):
            level = ACCENT_LEVEL * label.visibility + BACKGROUND_LEVEL * (
                1.0 - label.visibility
            )
            painter.setPen(self._gray(level))
            width = metrics.horizontalAdvance(label.text)
            painter.drawText(
                QtCore.QPointF(label.position - width / 2.0, -7.0), label.text
            )

        painter.end()


# ---------------------------- Main Controller ---------------------------------


class MainController(QtCore.QObject):
    def __init__(self, app: QtWidgets.QApplication) -> None:
        super().__init__(None)
        self.app = app
        self.cfg = self._load_config()

        desktop_rect = self._virtual_desktop_rect()
        log.debug(
            "virtual desktop %dx%d at (%d, %d)",
            desktop_rect.width(),
            desktop_rect.height(),
            desktop_rect.left(),
            desktop_rect.top(),
        )

        self.overlay = RulerOverlay(desktop_rect, self.cfg)
        self.overlay.closed.connect(self.app.quit)
        self.overlay.show()

    # ---------------------------- Config I/O ----------------------------------

    def _config_path(self) -> Path:
        home = Path.home()
        return home / ".screen_ruler_config.json"

    def _load_config(self) -> AppConfig:
        p = self._config_path()
        if p.exists():
            try:
                return AppConfig.from_json(p.read_text(encoding="utf-8"))
            except (OSError, ValueError, TypeError, AttributeError) as exc:
                log.warning("Ignoring unreadable config %s: %s", p, exc)
        return AppConfig()

    def _save_config(self) -> None:
        p = self._config_path()
        try:
            p.write_text(self.cfg.to_json(), encoding="utf-8")
        except OSError as exc:
            log.warning("Could not save config %s: %s", p, exc)

    # ----------------------------- System utils --------------------------------

    def _virtual_desktop_rect(self) -> QtCore.QRect:
        rect = QtCore.QRect(0, 0, 0, 0)
        for s in QtGui.QGuiApplication.screens():
            rect = rect.united(s.geometry())
        return rect


# ---------------------------------- Main --------------------------------------


def main(argv: Optional[list[str]] = None) -> None:
    argv = list(sys.argv if argv is None else argv)
    set_debug("--debug" in argv[1:])

    app = QtWidgets.QApplication(argv)
    app.setApplicationName("screen_ruler")
    app.setApplicationVersion(APP_VERSION)

    ctrl = MainController(app)
    ret = app.exec()

    ctrl._save_config()

    sys.exit(ret)


if __name__ == "__main__":
    main()
