"""Slider controlling one normalised filter parameter."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QFont, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QWidget


class ParameterSlider(QWidget):
    """Horizontal ``[0, 1]`` slider with the parameter name drawn on the track.

    The right-hand label shows the native value produced by *formatter* so
    users see e.g. the blur radius in pixels rather than the raw position.
    Disabled sliders stay visible but greyed out and ignore input.
    """

    valueChanged = Signal(float)
    """Emitted whenever the slider's value changes."""

    def __init__(
        self,
        name: str,
        parent: QWidget | None = None,
        *,
        initial: float = 0.5,
        formatter: Optional[Callable[[float], str]] = None,
    ) -> None:
        super().__init__(parent)
        self._name = name
        self._value = self._clamp(initial)
        self._formatter = formatter or (lambda value: f"{value:.2f}")
        self._dragging = False
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.setMinimumHeight(35)
        self.setMinimumWidth(260)
        self.track_height = 30
        self.radius = 10
        self.h_padding = 14
        self.line_width = 3

        self.c_fill = QColor(132, 132, 132)
        self.c_bg = QColor(54, 54, 54)
        self.c_line = QColor(0, 122, 255)
        self.c_text = QColor(235, 235, 235)
        self.c_disabled = QColor(90, 90, 90)

    # ------------------------------------------------------------------
    # Public API
    def value(self) -> float:
        return self._value

    def setValue(self, value: float, emit: bool = True) -> None:
        """Update the slider to *value* and optionally emit :attr:`valueChanged`."""

        clamped = self._clamp(value)
        if abs(clamped - self._value) <= 1e-6:
            return
        self._value = clamped
        self.update()
        if emit:
            self.valueChanged.emit(self._value)

    # ------------------------------------------------------------------
    # Event handlers
    def mousePressEvent(self, event):  # type: ignore[override]
        if self.isEnabled() and event.button() == Qt.MouseButton.LeftButton:
            self._dragging = True
            self._set_by_pos(event.position().x())

    def mouseMoveEvent(self, event):  # type: ignore[override]
        if self._dragging:
            self._set_by_pos(event.position().x())

    def mouseReleaseEvent(self, event):  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = False

    def wheelEvent(self, event):  # type: ignore[override]
        if not self.isEnabled():
            return
        self.setValue(self._value + event.angleDelta().y() / 120.0 * 0.01)

    def keyPressEvent(self, event):  # type: ignore[override]
        if event.key() in (Qt.Key.Key_Left, Qt.Key.Key_A):
            self.setValue(self._value - 0.01)
        elif event.key() in (Qt.Key.Key_Right, Qt.Key.Key_D):
            self.setValue(self._value + 0.01)
        else:
            super().keyPressEvent(event)

    # ------------------------------------------------------------------
    # Rendering
    def paintEvent(self, _):  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        enabled = self.isEnabled()
        track_rect = QRectF(
            self.h_padding,
            (self.height() - self.track_height) / 2,
            self.width() - 2 * self.h_padding,
            self.track_height,
        )
        x_line = track_rect.left() + self._value * track_rect.width()

        path = QPainterPath()
        path.addRoundedRect(track_rect, self.radius, self.radius)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self.c_bg)
        painter.drawPath(path)

        painter.save()
        painter.setClipPath(path)
        filled = QRectF(track_rect.left(), track_rect.top(), max(0.0, x_line - track_rect.left()), self.track_height)
        painter.fillRect(filled, self.c_fill if enabled else self.c_disabled)
        if enabled:
            pen = QPen(self.c_line)
            pen.setWidth(self.line_width)
            painter.setPen(pen)
            painter.drawLine(QPointF(x_line, track_rect.top()), QPointF(x_line, track_rect.bottom()))
        painter.restore()

        font = QFont(self.font())
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(self.c_text if enabled else self.c_disabled.lighter(150))
        text_rect = track_rect.adjusted(10, 0, -10, 0)
        painter.drawText(text_rect, Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft, self._name)
        painter.drawText(
            text_rect,
            Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignRight,
            self._formatter(self._value),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _clamp(value: float) -> float:
        return max(0.0, min(1.0, float(value)))

    def _set_by_pos(self, x: float) -> None:
        left = self.h_padding
        right = self.width() - self.h_padding
        if right <= left:
            return
        self.setValue((x - left) / (right - left))


__all__ = ["ParameterSlider"]
