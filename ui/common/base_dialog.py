from PyQt5.QtWidgets import QDialog
from PyQt5.QtCore import Qt

from config.settings import ACCENT_COLOR


class BaseDialog(QDialog):
    """Modal dark-themed dialog used for sheet style forms"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setModal(True)

        # Apply dark theme
        self.setStyleSheet(f"""
            QDialog {{
                background-color: #2b2b2b;
                color: #ffffff;
                border-radius: 30px;
            }}
            QLabel {{
                color: #ffffff;
                background-color: transparent;
            }}
            QComboBox {{
                background-color: #404040;
                border: 1px solid #555555;
                padding: 6px;
                border-radius: 4px;
                color: #ffffff;
            }}
            QComboBox:focus {{
                border: 2px solid {ACCENT_COLOR};
            }}
        """)

    def keyPressEvent(self, event):
        """Ignore Enter/Return so typing in the field never closes the sheet"""
        if event.key() in (Qt.Key_Return, Qt.Key_Enter):
            return
        super().keyPressEvent(event)
