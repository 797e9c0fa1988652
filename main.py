"""
Demo window for the angle picker widget.
"""

import sys

from PySide6.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                               QGroupBox, QLabel, QPushButton, QTextEdit)
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QFont, QTextCursor

from anglepicker.utils.logger import Logger
from anglepicker.utils.user_data import UserDataManager
from anglepicker.widgets.angle_picker import AnglePicker
from version import APP_NAME, get_version_string


INDICATOR_COLORS = [
    ("Grey", QColor(159, 159, 159)),
    ("Blue", QColor(33, 150, 243)),
    ("Green", QColor(76, 175, 80)),
    ("Orange", QColor(255, 152, 0)),
]


class AnglePickerDemo(QMainWindow):
    def __init__(self, logger):
        super().__init__()
        self.logger = logger
        self.setWindowTitle(f"{APP_NAME} v{get_version_string()}")
        self.setGeometry(100, 100, 640, 480)
        self.color_index = 0

        central = QWidget()
        self.setCentralWidget(central)
        layout = QHBoxLayout(central)

        # Picker and read-out
        picker_group = QGroupBox("Angle")
        picker_layout = QVBoxLayout(picker_group)

        self.picker = AnglePicker(logger=self.logger)
        self.picker.setMinimumSize(240, 240)
        picker_layout.addWidget(self.picker, 1)

        self.angle_label = QLabel()
        self.angle_label.setAlignment(Qt.AlignCenter)
        self.angle_label.setFont(QFont("Arial", 14, QFont.Bold))
        picker_layout.addWidget(self.angle_label)

        hint = QLabel("Drag the disc to rotate, double-click to type an angle")
        hint.setStyleSheet("QLabel { color: #666; font-size: 10px; }")
        hint.setAlignment(Qt.AlignCenter)
        picker_layout.addWidget(hint)

        button_layout = QHBoxLayout()
        self.reset_button = QPushButton("Reset")
        self.reset_button.clicked.connect(self.reset_angle)
        self.color_button = QPushButton("Indicator: Grey")
        self.color_button.clicked.connect(self.cycle_indicator_color)
        button_layout.addWidget(self.reset_button)
        button_layout.addWidget(self.color_button)
        picker_layout.addLayout(button_layout)

        layout.addWidget(picker_group, 2)

        # Log output
        log_group = QGroupBox("Log")
        log_layout = QVBoxLayout(log_group)
        self.log_output = QTextEdit()
        self.log_output.setReadOnly(True)
        log_layout.addWidget(self.log_output)
        layout.addWidget(log_group, 1)

        self.picker.model.subscribe("angle", self.on_angle_changed)
        self.picker.editingChanged.connect(self.on_editing_changed)
        self.update_angle_label(self.picker.get_angle())

        self.log_message_to_ui(self.logger.log_step("Demo window opened"))

    def update_angle_label(self, angle):
        self.angle_label.setText(f"{angle:.1f}°")

    def on_angle_changed(self, old, new):
        self.update_angle_label(new)

    def on_editing_changed(self, editing):
        if editing:
            self.log_message_to_ui(self.logger.log_edit("Editing started"))
        else:
            self.log_message_to_ui(self.logger.log_edit(f"Editing finished at {self.picker.get_angle():.1f}°"))

    def reset_angle(self):
        old = self.picker.get_angle()
        self.picker.set_angle(0.0)
        self.log_message_to_ui(self.logger.log_angle_change(old, 0.0, "reset"))

    def cycle_indicator_color(self):
        self.color_index = (self.color_index + 1) % len(INDICATOR_COLORS)
        name, color = INDICATOR_COLORS[self.color_index]
        self.picker.set_indicator_paint(color)
        self.color_button.setText(f"Indicator: {name}")
        self.log_message_to_ui(self.logger.log(f"Indicator paint set to {name}"))

    def log_message_to_ui(self, message):
        """Add message to log output (UI only)"""
        self.log_output.append(message)

        # Auto-scroll to bottom
        cursor = self.log_output.textCursor()
        cursor.movePosition(QTextCursor.End)
        self.log_output.setTextCursor(cursor)

    def closeEvent(self, event):
        """Handle application close"""
        self.logger.log_step("Application closing")
        self.logger.write_session_footer(self.picker.get_angle())
        event.accept()


def main():
    app = QApplication(sys.argv)
    user_data = UserDataManager()
    log_file = user_data.get_log_file_path()
    logger = Logger(log_file, details={
        "Version": get_version_string(),
        "Log file": log_file,
    })
    logger.log_step("Application started")

    window = AnglePickerDemo(logger)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
