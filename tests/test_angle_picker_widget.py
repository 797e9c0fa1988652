"""
Tests for the PySide6 angle picker widget.
"""

import pytest

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QEvent, QMargins, QPointF, QSize, Qt
from PySide6.QtGui import QColor, QFocusEvent, QImage, QKeyEvent, QMouseEvent

from anglepicker.core.model import PickerState
from anglepicker.widgets.angle_picker import AnglePicker


@pytest.fixture
def picker(qapp):
    widget = AnglePicker()
    widget.resize(200, 160)
    widget.relayout()
    yield widget
    widget.deleteLater()


def send_mouse(widget, event_type, x, y, button=Qt.MouseButton.LeftButton, buttons=Qt.MouseButton.LeftButton):
    position = QPointF(x, y)
    event = QMouseEvent(event_type, position, widget.mapToGlobal(position), button, buttons,
                        Qt.KeyboardModifier.NoModifier)
    QApplication.sendEvent(widget, event)


def test_size_hints(picker):
    assert picker.sizeHint() == QSize(63, 63)
    assert picker.minimumSizeHint() == QSize(20, 20)
    assert picker.maximumSize() == QSize(1024, 1024)


def test_relayout_uses_widget_size_and_margins(picker):
    assert picker.model.size == 160
    picker.setContentsMargins(QMargins(10, 10, 10, 10))
    layout = picker.relayout()
    assert layout.size == 140
    assert layout.pane.x == 30


def test_editor_follows_text_box(picker):
    layout = picker.model.layout
    geometry = picker.editor.geometry()
    assert geometry.width() == round(layout.text_box.width)
    assert geometry.x() == round(layout.pane.x + layout.text_box.x)


def test_set_angle_emits_signal(picker):
    received = []
    picker.angleChanged.connect(received.append)
    picker.set_angle(45.0)
    assert picker.get_angle() == 45.0
    assert picker.angle == 45.0
    assert received == [45.0]
    assert picker.model.label_text == "45°"
    assert picker.editor.text() == "45.0°"


def test_double_click_edit_and_commit(picker):
    editing = []
    picker.editingChanged.connect(editing.append)
    picker.set_angle(45.0)

    picker.model.click(2)
    assert picker.is_editing()
    assert not picker.editor.isHidden()

    picker.commit_edit()
    assert picker.model.state is PickerState.DISPLAY
    assert picker.editor.isHidden()
    assert picker.get_angle() == 45.0
    assert editing == [True, False]


def test_typed_angle_is_committed(picker):
    picker.begin_edit()
    picker.editor.setText("120.5")
    picker.commit_edit()
    assert picker.get_angle() == 120.5
    assert picker.editor.text() == "120.5°"


@pytest.mark.parametrize("text", ["12.34", "abcd"])
def test_invalid_typed_angle_is_ignored(picker, text):
    picker.set_angle(10.0)
    picker.begin_edit()
    picker.editor.setText(text)
    picker.commit_edit()
    assert picker.get_angle() == 10.0
    assert not picker.is_editing()


def test_escape_cancels_edit(picker):
    picker.set_angle(10.0)
    picker.begin_edit()
    picker.editor.setText("200")
    picker.editor.cancelled.emit()
    assert picker.get_angle() == 10.0
    assert picker.editor.isHidden()


def test_paint_setters(picker):
    picker.set_indicator_paint(QColor(255, 0, 0))
    assert picker.get_indicator_paint() == QColor(255, 0, 0)
    assert picker.model.appearance["indicator"] == QColor(255, 0, 0)
    picker.set_text_paint(QColor(0, 0, 0))
    assert picker.get_text_paint() == QColor(0, 0, 0)


def test_renders_without_errors(picker):
    picker.set_angle(135.0)
    image = QImage(picker.size(), QImage.Format.Format_ARGB32)
    image.fill(0)
    picker.render(image)
    centre = image.pixelColor(100, 80)
    assert centre.alpha() == 255


class TestPointerEvents:
    # 200x160 widget: the pane is 160 wide at x=20, so the disc centre is (100, 80)

    def test_drag_rotates_indicator(self, picker):
        send_mouse(picker, QEvent.Type.MouseButtonPress, 150, 80)
        send_mouse(picker, QEvent.Type.MouseMove, 100, 140, button=Qt.MouseButton.NoButton)
        assert picker.get_angle() == pytest.approx(90.0)

        send_mouse(picker, QEvent.Type.MouseMove, 40, 80, button=Qt.MouseButton.NoButton)
        assert picker.get_angle() == pytest.approx(180.0)

    def test_press_outside_disc_does_not_drag(self, picker):
        picker.set_angle(10.0)
        send_mouse(picker, QEvent.Type.MouseButtonPress, 21, 1)
        send_mouse(picker, QEvent.Type.MouseMove, 100, 140, button=Qt.MouseButton.NoButton)
        assert picker.get_angle() == 10.0

    def test_move_without_press_does_not_drag(self, picker):
        picker.set_angle(10.0)
        send_mouse(picker, QEvent.Type.MouseMove, 100, 140, button=Qt.MouseButton.NoButton,
                   buttons=Qt.MouseButton.NoButton)
        assert picker.get_angle() == 10.0

    def test_release_ends_drag(self, picker):
        picker.set_angle(10.0)
        send_mouse(picker, QEvent.Type.MouseButtonPress, 150, 80)
        send_mouse(picker, QEvent.Type.MouseButtonRelease, 150, 80, buttons=Qt.MouseButton.NoButton)
        send_mouse(picker, QEvent.Type.MouseMove, 100, 140, button=Qt.MouseButton.NoButton)
        assert picker.get_angle() == 10.0

    def test_drag_at_centre_keeps_angle(self, picker):
        picker.set_angle(10.0)
        send_mouse(picker, QEvent.Type.MouseButtonPress, 150, 80)
        send_mouse(picker, QEvent.Type.MouseMove, 100, 80, button=Qt.MouseButton.NoButton)
        assert picker.get_angle() == 10.0

    def test_double_click_on_disc_enters_edit(self, picker):
        send_mouse(picker, QEvent.Type.MouseButtonDblClick, 100, 80)
        assert picker.is_editing()
        assert not picker.editor.isHidden()

    def test_double_click_outside_disc_is_ignored(self, picker):
        send_mouse(picker, QEvent.Type.MouseButtonDblClick, 21, 1)
        assert not picker.is_editing()


class TestEditTriggers:
    def test_focus_out_commits(self, picker):
        picker.begin_edit()
        picker.editor.setText("33")
        QApplication.sendEvent(picker, QFocusEvent(QEvent.Type.FocusOut, Qt.FocusReason.OtherFocusReason))
        assert picker.get_angle() == 33.0
        assert not picker.is_editing()

    def test_editing_finished_commits(self, picker):
        picker.begin_edit()
        picker.editor.setText("270")
        picker.editor.editingFinished.emit()
        assert picker.get_angle() == 270.0
        assert picker.editor.isHidden()

    def test_return_pressed_commits(self, picker):
        picker.begin_edit()
        picker.editor.setText("15.5")
        picker.editor.returnPressed.emit()
        assert picker.get_angle() == 15.5
        assert not picker.is_editing()

    def test_escape_key_cancels(self, picker):
        picker.set_angle(10.0)
        picker.begin_edit()
        picker.editor.setText("200")
        QApplication.sendEvent(picker.editor, QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Escape,
                                                        Qt.KeyboardModifier.NoModifier))
        assert picker.get_angle() == 10.0
        assert not picker.is_editing()
