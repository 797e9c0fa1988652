"""
Session logger for angle picker applications.

Entries go to a plain text file as ``[date time] [CATEGORY] message`` and
every call returns a shorter ``[time] message`` line for an on-screen log.
"""

import os
from datetime import datetime

from anglepicker.config import DEGREE_SIGN


class Logger:
    """Angle picker session log with categories"""

    def __init__(self, log_file_path, session_name="ANGLE PICKER", details=None):
        self.log_file_path = str(log_file_path)
        self.session_name = session_name
        self.ensure_log_directory()
        self.write_session_header(details or {})

    def ensure_log_directory(self):
        log_dir = os.path.dirname(self.log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

    def write_session_header(self, details):
        """Write the session banner followed by one ``key: value`` line per detail"""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        lines = [f"{self.session_name} SESSION START", f"Timestamp: {timestamp}"]
        lines.extend(f"{key}: {value}" for key, value in details.items())
        rule = '=' * 60
        self.write_to_file(f"\n{rule}\n" + "\n".join(lines) + f"\n{rule}\n")

    def write_session_footer(self, final_angle=None):
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        summary = f"\nFinal angle: {final_angle:.1f}{DEGREE_SIGN}" if final_angle is not None else ""
        self.write_to_file(f"\n{'='*60}\nSESSION END: {timestamp}{summary}\n{'='*60}\n")

    def write_to_file(self, message):
        try:
            with open(self.log_file_path, 'a', encoding='utf-8') as f:
                f.write(message)
        except OSError as e:
            print(f"Error writing to log file: {e}")

    def log(self, message, category="INFO"):
        """Log message with timestamp and category"""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]  # Include milliseconds
        self.write_to_file(f"[{timestamp}] [{category}] {message}\n")
        return f"[{timestamp.split()[1]}] {message}"  # Return just time for UI

    def log_error(self, message):
        return self.log(message, "ERROR")

    def log_warning(self, message):
        return self.log(message, "WARNING")

    def log_step(self, message):
        return self.log(message, "STEP")

    def log_angle(self, message):
        return self.log(message, "ANGLE")

    def log_angle_change(self, old, new, source="set"):
        """Log an angle transition, e.g. ``12.0° -> 45.0° (drag)``"""
        return self.log_angle(f"{old:.1f}{DEGREE_SIGN} -> {new:.1f}{DEGREE_SIGN} ({source})")

    def log_layout(self, message):
        return self.log(message, "LAYOUT")

    def log_edit(self, message):
        return self.log(message, "EDIT")
