"""
Circular angle picker widget: drag the indicator or double-click to type an angle.
"""

import math

from PySide6.QtWidgets import QApplication, QLineEdit, QWidget
from PySide6.QtCore import Property, QPointF, QRectF, QSize, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QFont, QGradient, QLinearGradient, QPainter, QPainterPath, QPen

from anglepicker.config import (
    BACKGROUND_RGB,
    FOREGROUND_STOPS,
    INDICATOR_RGB,
    MAXIMUM_HEIGHT,
    MAXIMUM_WIDTH,
    MINIMUM_HEIGHT,
    MINIMUM_WIDTH,
    PREFERRED_HEIGHT,
    PREFERRED_WIDTH,
    SHADOW_RGBA,
    TEXT_RGB,
)
from anglepicker.core.layout_engine import Insets
from anglepicker.core.model import AnglePickerModel


def default_foreground_paint():
    gradient = QLinearGradient(0, 0, 0, 1)
    gradient.setCoordinateMode(QGradient.CoordinateMode.ObjectBoundingMode)
    for position, rgb in FOREGROUND_STOPS:
        gradient.setColorAt(position, QColor(*rgb))
    return gradient


def to_brush(paint):
    """Accept a QColor, QGradient or QBrush; None draws nothing."""
    if paint is None:
        return QBrush(Qt.BrushStyle.NoBrush)
    return QBrush(paint)


class AngleEdit(QLineEdit):
    """Line edit used for typed angles; Escape abandons the edit"""
    cancelled = Signal()

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Escape:
            self.cancelled.emit()
            return
        super().keyPressEvent(event)


class AnglePicker(QWidget):
    """Custom widget for picking an angle on a rotary disc"""
    angleChanged = Signal(float)
    editingChanged = Signal(bool)

    def __init__(self, parent=None, angle=0.0, logger=None):
        super().__init__(parent)
        self.model = AnglePickerModel(
            angle=angle,
            background_paint=QColor(*BACKGROUND_RGB),
            foreground_paint=default_foreground_paint(),
            indicator_paint=QColor(*INDICATOR_RGB),
            text_paint=QColor(*TEXT_RGB),
            logger=logger,
        )
        self._dragging = False

        self.setMinimumSize(MINIMUM_WIDTH, MINIMUM_HEIGHT)
        self.setMaximumSize(MAXIMUM_WIDTH, MAXIMUM_HEIGHT)
        self.setFocusPolicy(Qt.FocusPolicy.ClickFocus)

        self.editor = AngleEdit(self.model.edit_text, self)
        self.editor.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.editor.setStyleSheet("QLineEdit { padding: 2px; }")
        self.editor.hide()

        self.register_listeners()

    def register_listeners(self):
        self.model.subscribe("angle", self.on_angle_changed)
        self.model.subscribe("state", self.on_state_changed)
        self.model.subscribe("layout", self.on_layout_changed)
        self.model.subscribe("appearance", lambda old, new: self.update())
        self.editor.returnPressed.connect(self.commit_edit)
        self.editor.editingFinished.connect(self.commit_edit)
        self.editor.cancelled.connect(self.model.cancel_edit)

    # Size hints -----------------------------------------------------------

    def sizeHint(self):
        return QSize(PREFERRED_WIDTH, PREFERRED_HEIGHT)

    def minimumSizeHint(self):
        return QSize(MINIMUM_WIDTH, MINIMUM_HEIGHT)

    # Properties -----------------------------------------------------------

    def get_angle(self):
        return self.model.angle

    def set_angle(self, angle):
        self.model.angle = angle

    angle = Property(float, get_angle, set_angle, notify=angleChanged)

    def get_background_paint(self):
        return self.model.background_paint

    def set_background_paint(self, paint):
        self.model.background_paint = paint

    def get_foreground_paint(self):
        return self.model.foreground_paint

    def set_foreground_paint(self, paint):
        self.model.foreground_paint = paint

    def get_indicator_paint(self):
        return self.model.indicator_paint

    def set_indicator_paint(self, paint):
        self.model.indicator_paint = paint

    def get_text_paint(self):
        return self.model.text_paint

    def set_text_paint(self, paint):
        self.model.text_paint = paint

    def is_editing(self):
        return self.model.editing

    # Model callbacks ------------------------------------------------------

    def on_angle_changed(self, old, new):
        if not self.model.editing:
            self.editor.setText(self.model.edit_text)
        self.update()
        self.angleChanged.emit(new)

    def on_state_changed(self, old, new):
        editing = self.model.editing
        self.editor.setText(self.model.edit_text)
        if editing:
            self.editor.show()
            self.editor.setFocus(Qt.FocusReason.MouseFocusReason)
            self.editor.selectAll()
        else:
            self.editor.hide()
        self.update()
        self.editingChanged.emit(editing)

    def on_layout_changed(self, old, layout):
        pane = layout.pane
        box = layout.text_box
        self.editor.setGeometry(QRectF(pane.x + box.x, pane.y + box.y, box.width, box.height).toRect())
        font = QFont(self.editor.font())
        font.setPixelSize(max(1, round(layout.text_box_font_size)))
        self.editor.setFont(font)

    # Layout ---------------------------------------------------------------

    def relayout(self):
        margins = self.contentsMargins()
        insets = Insets(margins.top(), margins.right(), margins.bottom(), margins.left())
        return self.model.relayout(self.width(), self.height(), insets)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.relayout()

    # Editing --------------------------------------------------------------

    def begin_edit(self):
        self.model.begin_edit()

    def commit_edit(self):
        if self.model.editing:
            self.model.commit_edit(self.editor.text())

    def focusOutEvent(self, event):
        # Focus moving into our own editor is not a focus loss of the control
        if QApplication.focusWidget() is not self.editor:
            self.commit_edit()
        super().focusOutEvent(event)

    # Pointer --------------------------------------------------------------

    def _offset_from_center(self, position):
        """Pointer position relative to the disc centre, or None before layout."""
        layout = self.model.layout
        if layout is None:
            return None
        half = layout.size * 0.5
        return (position.x() - layout.pane.x - half, position.y() - layout.pane.y - half)

    def _over_foreground(self, position):
        offset = self._offset_from_center(position)
        if offset is None:
            return False
        return math.hypot(*offset) <= self.model.layout.foreground.radius

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self._over_foreground(event.position()):
            self._dragging = True
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._dragging and event.buttons() & Qt.MouseButton.LeftButton:
            offset = self._offset_from_center(event.position())
            if offset is not None:
                self.model.drag_to(*offset)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = False
        super().mouseReleaseEvent(event)

    def mouseDoubleClickEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self._over_foreground(event.position()):
            self.model.click(2)
        super().mouseDoubleClickEvent(event)

    # Painting -------------------------------------------------------------

    def paintEvent(self, event):
        layout = self.model.layout
        if layout is None:
            return
        appearance = self.model.appearance

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.translate(layout.pane.x, layout.pane.y)
        painter.setPen(Qt.PenStyle.NoPen)

        # Background disc
        background = layout.background
        painter.setBrush(to_brush(appearance.get("background")))
        painter.drawEllipse(QRectF(background.x, background.y, background.radius * 2, background.radius * 2))

        # Foreground disc with inner highlight
        foreground = layout.foreground
        foreground_rect = QRectF(foreground.x, foreground.y, foreground.radius * 2, foreground.radius * 2)
        painter.setBrush(to_brush(appearance.get("foreground")))
        painter.drawEllipse(foreground_rect)
        self.draw_inner_shadow(painter, foreground_rect, layout.shadow)

        # Indicator, rotated around the disc centre
        indicator = layout.indicator
        pivot = layout.rotation_center()
        painter.save()
        painter.translate(pivot.x, pivot.y)
        painter.rotate(self.model.rotation)
        painter.translate(-pivot.x, -pivot.y)
        painter.fillRect(QRectF(indicator.x, indicator.y, indicator.width, indicator.height),
                         to_brush(appearance.get("indicator")))
        painter.restore()

        # Angle text, hidden behind the editor while editing
        if not self.model.editing:
            font = QFont(self.font())
            font.setPixelSize(max(1, round(layout.label_font_size)))
            painter.setFont(font)
            painter.setPen(QPen(to_brush(appearance.get("text")), 1))
            painter.drawText(QRectF(0, 0, layout.size, layout.size), Qt.AlignmentFlag.AlignCenter,
                             self.model.label_text)

        painter.end()

    def draw_inner_shadow(self, painter, rect, shadow):
        clip = QPainterPath()
        clip.addEllipse(rect)

        painter.save()
        painter.setClipPath(clip)
        pen = QPen(QColor(*SHADOW_RGBA))
        pen.setWidthF(shadow.radius)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(rect.translated(QPointF(0, shadow.offset_y)))
        painter.restore()
