"""
User data directory management for the angle picker demo.
"""

import os
from pathlib import Path
import sys


class UserDataManager:
    def __init__(self, app_name="AnglePicker", base_dir=None):
        self.app_name = app_name
        self.app_data_dir = Path(base_dir) / app_name if base_dir else self.get_app_data_directory()
        self.setup_directories()

    def get_app_data_directory(self):
        """Get the appropriate application data directory for the current OS"""
        if sys.platform == "win32":
            # Windows: Use APPDATA
            base_dir = os.environ.get('APPDATA', os.path.expanduser('~'))
        elif sys.platform == "darwin":
            # macOS: Use ~/Library/Application Support
            base_dir = os.path.expanduser('~/Library/Application Support')
        else:
            # Linux: Use ~/.local/share
            base_dir = os.path.expanduser('~/.local/share')

        return Path(base_dir) / self.app_name

    def setup_directories(self):
        """Create all necessary subdirectories"""
        self.directories = {
            'root': self.app_data_dir,
            'logs': self.app_data_dir / 'logs',
        }

        for dir_path in self.directories.values():
            dir_path.mkdir(parents=True, exist_ok=True)

    def get_directory(self, name):
        """Get a specific directory path"""
        return self.directories.get(name, self.app_data_dir)

    def get_log_file_path(self):
        """Get the main log file path"""
        return self.directories['logs'] / 'application.log'
