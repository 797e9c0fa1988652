"""
Shared fixtures; Qt runs on the offscreen platform so no display is needed.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


class RecordingLogger:
    """Collects (category, message) pairs instead of writing a file."""

    def __init__(self):
        self.entries = []

    def log(self, message, category="INFO"):
        self.entries.append((category, message))
        return message

    def log_warning(self, message):
        return self.log(message, "WARNING")

    def log_layout(self, message):
        return self.log(message, "LAYOUT")

    def log_edit(self, message):
        return self.log(message, "EDIT")


@pytest.fixture
def recording_logger():
    return RecordingLogger()
