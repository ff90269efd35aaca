from PyQt5.QtWidgets import (QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
                             QComboBox)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from config.settings import (SHEET_SIZE, USERNAME_HINT, USERNAME_LABEL,
                             DEFAULT_USERNAME_PRESET)
from restriction.presets import PRESETS, get_preset
from ui.common.base_dialog import BaseDialog
from ui.common.restricted_text_field import RestrictedTextField
from utils.logger import setup_logger


class UsernameSheetDialog(BaseDialog):
    """Account username form with a restricted username field"""

    # Emitted with the username when the availability button is pressed
    availability_requested = pyqtSignal(str)

    def __init__(self, parent=None, preset_key=DEFAULT_USERNAME_PRESET):
        super().__init__(parent)
        self.logger = setup_logger('username_sheet')
        self.preset_key = preset_key

        self.setup_ui()
        self.setup_connections()

    def setup_ui(self):
        """Setup dialog UI"""
        self.setWindowTitle("Account Username")
        self.resize(*SHEET_SIZE)

        layout = QVBoxLayout(self)
        layout.setSpacing(20)
        layout.setContentsMargins(20, 20, 20, 20)

        # Header
        header_layout = QVBoxLayout()
        header_layout.setSpacing(4)

        title = QLabel("Account Username")
        title.setFont(QFont("Arial", 20, QFont.Bold))
        header_layout.addWidget(title)

        subtitle = QLabel("Let's find a perfect username for your account")
        subtitle.setStyleSheet("color: #999999; font-size: 12px;")
        header_layout.addWidget(subtitle)
        layout.addLayout(header_layout)

        # Restriction policy
        policy_layout = QHBoxLayout()
        policy_label = QLabel("Restriction:")
        policy_label.setStyleSheet("color: #cccccc;")
        policy_layout.addWidget(policy_label)

        self.preset_combo = QComboBox()
        for key, preset in PRESETS.items():
            self.preset_combo.addItem(preset.label, key)
        self.preset_combo.setCurrentIndex(self.preset_combo.findData(self.preset_key))
        policy_layout.addWidget(self.preset_combo, 1)
        layout.addLayout(policy_layout)

        # Username field
        self.username_field = RestrictedTextField(
            hint=USERNAME_HINT,
            characters=get_preset(self.preset_key).build(),
            label=USERNAME_LABEL,
        )
        layout.addWidget(self.username_field)

        # Availability button
        self.check_button = QPushButton("Check for availability")
        self.check_button.setCursor(Qt.PointingHandCursor)
        self.check_button.setStyleSheet("""
            QPushButton {
                background-color: #2f6fed;
                border: none;
                padding: 12px;
                border-radius: 10px;
                color: #ffffff;
                font-weight: bold;
            }
            QPushButton:hover {
                background-color: #3b7bff;
            }
            QPushButton:pressed {
                background-color: #2559c4;
            }
        """)
        layout.addWidget(self.check_button)
        layout.addStretch()

    def setup_connections(self):
        self.preset_combo.currentIndexChanged.connect(self.on_preset_changed)
        self.check_button.clicked.connect(self.check_availability)

    def on_preset_changed(self, index):
        """Switch the username field to the chosen restriction"""
        key = self.preset_combo.itemData(index)
        if not key or key == self.preset_key:
            return
        self.preset_key = key
        self.username_field.set_characters(get_preset(key).build())
        self.logger.info(f"Username restriction changed to {key}")

    def username(self):
        return self.username_field.value()

    def check_availability(self):
        """Availability lookup is not wired to a backend; log the request"""
        username = self.username()
        self.logger.info(f"Checking availability for username: {username}")
        self.availability_requested.emit(username)
