from PyQt5.QtWidgets import (QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
                             QStackedWidget, QLabel, QFrame)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from .sidebar import Sidebar
from .preview_form import PreviewFormWidget
from .username_sheet import UsernameSheetDialog

from config.constants import USAGE_SNIPPET
from config.settings import APP_NAME
from utils.logger import setup_logger


class UsageCard(QFrame):
    """Monospaced usage snippet; clicking it opens the username sheet"""

    clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet("""
            QFrame {
                background-color: rgba(128, 128, 128, 0.2);
                border: none;
                border-radius: 20px;
            }
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(15, 15, 15, 15)

        snippet = QLabel(USAGE_SNIPPET)
        snippet.setFont(QFont("Courier New", 11))
        snippet.setTextInteractionFlags(Qt.NoTextInteraction)
        snippet.setStyleSheet("background: transparent;")
        layout.addWidget(snippet)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit()
        super().mousePressEvent(event)


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.logger = setup_logger('main_window')
        self.sheet = None

        self.setup_ui()
        self.setup_connections()

    def setup_ui(self):
        """Setup the main user interface"""
        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(480, 520)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QHBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.sidebar = Sidebar()
        main_layout.addWidget(self.sidebar)

        self.stacked_widget = QStackedWidget()
        main_layout.addWidget(self.stacked_widget)

        # Pages other than usage are built the first time they are shown
        self.page_factories = {
            'preview': PreviewFormWidget,
        }
        self.pages = {'usage': self.create_usage_page()}
        self.stacked_widget.addWidget(self.pages['usage'])

    def create_usage_page(self):
        """Title, caption and the clickable usage card"""
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(15, 15, 15, 15)
        layout.setSpacing(10)

        title = QLabel(APP_NAME)
        title.setFont(QFont("Arial", 24, QFont.Bold))
        layout.addWidget(title)

        caption = QLabel("Usage")
        caption.setStyleSheet("color: #999999; font-size: 11px;")
        layout.addWidget(caption)

        self.usage_card = UsageCard()
        layout.addWidget(self.usage_card)

        layout.addStretch()
        return page

    def setup_connections(self):
        self.sidebar.page_changed.connect(self.show_page)
        self.usage_card.clicked.connect(self.open_username_sheet)

    def show_page(self, page_name):
        page = self.pages.get(page_name)
        if page is None and page_name in self.page_factories:
            page = self.page_factories[page_name]()
            self.pages[page_name] = page
            self.stacked_widget.addWidget(page)
        if page is None:
            self.logger.warning(f"Unknown page: {page_name}")
            return
        self.stacked_widget.setCurrentWidget(page)

    def open_username_sheet(self):
        """Show the username sheet, reusing it between openings"""
        if self.sheet is None:
            self.sheet = UsernameSheetDialog(self)
        self.sheet.show()
        self.sheet.raise_()
        self.sheet.activateWindow()
