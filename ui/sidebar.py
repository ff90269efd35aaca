from PyQt5.QtWidgets import (QWidget, QVBoxLayout, QPushButton, QLabel,
                             QFrame, QButtonGroup)
from PyQt5.QtCore import (Qt, pyqtSignal, QPropertyAnimation, QEasingCurve,
                          QParallelAnimationGroup)
from PyQt5.QtGui import QFont

from config.settings import ACCENT_COLOR

SIDEBAR_WIDTH = 60
EXPANDED_SIDEBAR_WIDTH = 180


class SidebarButton(QPushButton):
    def __init__(self, text, icon_text="", page_name=""):
        super().__init__()
        self.page_name = page_name
        self.icon_text = icon_text
        self.button_text = text
        self.is_expanded = False

        self.setFixedHeight(50)
        self.setCheckable(True)
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: transparent;
                border: none;
                text-align: left;
                padding: 10px;
                color: #cccccc;
                font-size: 14px;
            }}
            QPushButton:hover {{
                background-color: #404040;
            }}
            QPushButton:checked {{
                background-color: {ACCENT_COLOR};
                color: #ffffff;
            }}
        """)
        self.update_content()

    def update_content(self):
        """Show the label only while expanded"""
        if self.is_expanded:
            self.setText(f"{self.icon_text} {self.button_text}")
        else:
            self.setText(self.icon_text)

    def set_expanded(self, expanded):
        self.is_expanded = expanded
        self.update_content()


class Sidebar(QWidget):
    # Signal emitted when page changes
    page_changed = pyqtSignal(str)

    PAGES = [
        ("✍", "Usage", "usage"),
        ("☰", "Examples", "preview"),
    ]

    def __init__(self):
        super().__init__()
        self.is_expanded = False
        self.setup_ui()

        self.animation = QParallelAnimationGroup(self)
        for prop in (b"minimumWidth", b"maximumWidth"):
            width_animation = QPropertyAnimation(self, prop)
            width_animation.setDuration(200)
            width_animation.setEasingCurve(QEasingCurve.InOutQuad)
            self.animation.addAnimation(width_animation)

    def setup_ui(self):
        """Setup sidebar UI"""
        self.setFixedWidth(SIDEBAR_WIDTH)
        self.setStyleSheet("""
            QWidget {
                background-color: #1f1f1f;
                border-right: 1px solid #555555;
            }
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.logo_label = QLabel("RTF")
        self.logo_label.setAlignment(Qt.AlignCenter)
        self.logo_label.setFixedHeight(80)
        self.logo_label.setFont(QFont("Arial", 16, QFont.Bold))
        self.logo_label.setStyleSheet(f"color: {ACCENT_COLOR};")
        layout.addWidget(self.logo_label)

        self.button_group = QButtonGroup(self)
        self.nav_buttons = []
        for icon, text, page_name in self.PAGES:
            button = SidebarButton(text, icon, page_name)
            button.clicked.connect(lambda checked, name=page_name: self.page_changed.emit(name))
            self.button_group.addButton(button)
            layout.addWidget(button)
            self.nav_buttons.append(button)
        self.nav_buttons[0].setChecked(True)

        layout.addStretch()

        footer = QFrame()
        footer.setFixedHeight(60)
        footer_layout = QVBoxLayout(footer)
        footer_layout.setContentsMargins(10, 10, 10, 10)
        self.toggle_button = QPushButton("»")
        self.toggle_button.setFixedHeight(40)
        self.toggle_button.clicked.connect(self.toggle_expansion)
        footer_layout.addWidget(self.toggle_button)
        layout.addWidget(footer)

    def toggle_expansion(self):
        """Expand or collapse the sidebar"""
        self.is_expanded = not self.is_expanded
        for button in self.nav_buttons:
            button.set_expanded(self.is_expanded)
        self.toggle_button.setText("«" if self.is_expanded else "»")

        start, end = SIDEBAR_WIDTH, EXPANDED_SIDEBAR_WIDTH
        if not self.is_expanded:
            start, end = end, start
        for i in range(self.animation.animationCount()):
            self.animation.animationAt(i).setStartValue(start)
            self.animation.animationAt(i).setEndValue(end)
        self.animation.start()
