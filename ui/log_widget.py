"""
Log Widget
Displays log messages with color-coded severity levels
"""

from datetime import datetime

from PyQt6.QtWidgets import QTextEdit

LEVEL_COLORS = {
    "INFO": "#cbd5e1",
    "WARNING": "orange",
    "ERROR": "red",
    "SUCCESS": "#22c55e",
}


class LogWidget(QTextEdit):
    """Read-only log panel under the preview"""

    def __init__(self, parent=None, max_lines: int = 500):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setMaximumHeight(150)
        self.setUndoRedoEnabled(False)
        self.document().setMaximumBlockCount(max_lines)

    def log(self, message: str, level: str = "INFO"):
        """
        Add a log message

        Args:
            message: Message to log
            level: Severity level (INFO, WARNING, ERROR, SUCCESS)
        """
        color = LEVEL_COLORS.get(level, LEVEL_COLORS["INFO"])
        stamp = datetime.now().strftime("%H:%M:%S")
        self.append(f'<span style="color: {color};">{stamp} [{level}] {message}</span>')
        self.verticalScrollBar().setValue(self.verticalScrollBar().maximum())
