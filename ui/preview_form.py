from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QGroupBox, QScrollArea
from PyQt5.QtGui import QFont

from config.constants import (NAME_MESSAGE_TEMPLATE, AGE_MESSAGE_TEMPLATE,
                              CUSTOM_MESSAGE_TEMPLATE)
from config.settings import ACCENT_COLOR
from restriction import presets
from ui.common.restricted_text_field import RestrictedTextField
from utils.formatters import format_current_input


class PreviewFormWidget(QWidget):
    """Sample form showing three restriction policies side by side"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.fields = {}
        self.current_labels = {}
        self.setup_ui()

    def setup_ui(self):
        """Setup form UI"""
        outer_layout = QVBoxLayout(self)
        outer_layout.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        outer_layout.addWidget(scroll)

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(10)

        title = QLabel("RestrictedTextField Examples")
        title.setFont(QFont("Arial", 16, QFont.Bold))
        title.setStyleSheet(f"color: {ACCENT_COLOR}; margin-bottom: 10px;")
        layout.addWidget(title)

        sections = [
            ('name', "Name (punctuation and symbols restricted)", "Enter your name",
             presets.name_field(), NAME_MESSAGE_TEMPLATE),
            ('age', "Age (non-digits restricted)", "Enter your age",
             presets.ascii_digits_only(), AGE_MESSAGE_TEMPLATE),
            ('custom', "Custom ('a', 'b', 'c' restricted)", "Type freely ('a', 'b', 'c' not allowed)",
             presets.custom("abc"), CUSTOM_MESSAGE_TEMPLATE),
        ]
        for key, title_text, hint, characters, template in sections:
            layout.addWidget(self.create_section(key, title_text, hint, characters, template))

        layout.addStretch()
        scroll.setWidget(content)

    def create_section(self, key, title, hint, characters, template):
        """Create one group box holding a restricted field and its live value"""
        group = QGroupBox(title)
        group.setStyleSheet(f"""
            QGroupBox {{
                color: #ffffff;
                border: 1px solid #555555;
                border-radius: 6px;
                padding-top: 15px;
                margin: 10px 0;
                font-weight: bold;
            }}
            QGroupBox::title {{
                color: {ACCENT_COLOR};
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 5px 0 5px;
            }}
        """)
        group_layout = QVBoxLayout(group)

        field = RestrictedTextField(hint=hint, characters=characters,
                                    label=title, message_template=template)
        group_layout.addWidget(field)

        current_label = QLabel(format_current_input(""))
        current_label.setStyleSheet("color: #cccccc; font-weight: normal;")
        group_layout.addWidget(current_label)

        field.value_changed.connect(lambda value, label=current_label: label.setText(format_current_input(value)))

        self.fields[key] = field
        self.current_labels[key] = current_label
        return group
