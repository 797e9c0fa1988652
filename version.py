"""
Version information for the Angle Picker package.
"""

__version__ = "1.0.0"
__build_date__ = "2026-10-19"
__build_commit__ = "main"

# Application metadata
APP_NAME = "Angle Picker"
APP_DESCRIPTION = "Circular angle picker widget for PySide6"
APP_AUTHOR = "Angle Picker Team"

def get_version_string():
    """Get version as a string."""
    return __version__
