#!/usr/bin/env python3
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from PyQt5.QtWidgets import QApplication, QMessageBox, QLabel, QMainWindow
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont

from config.settings import APP_NAME, APP_VERSION, ORGANIZATION_NAME, WINDOW_SIZE
from utils.logger import setup_logger


class RestrictedFieldApp(QApplication):
    def __init__(self, argv):
        super().__init__(argv)

        # Setup application properties
        self.setApplicationName(APP_NAME)
        self.setApplicationVersion(APP_VERSION)
        self.setOrganizationName(ORGANIZATION_NAME)

        # Setup logger
        self.logger = setup_logger()
        self.logger.info(f"Starting {APP_NAME} v{APP_VERSION}")

        # Set application style
        self.setStyle('Fusion')
        self.apply_dark_theme()

        # Try to create main window - with error handling
        try:
            from ui.main_window import MainWindow
            self.main_window = MainWindow()
            self.logger.info("Main window created successfully")
        except Exception as e:
            self.logger.error(f"Error creating main window: {e}")
            self.main_window = self.create_fallback_window(e)

    def create_fallback_window(self, error):
        """Create a fallback window if main window fails"""
        window = QMainWindow()
        window.setWindowTitle(f"{APP_NAME} - Safe Mode")

        error_label = QLabel(f"Main interface failed to load\n{error}")
        error_label.setAlignment(Qt.AlignCenter)
        error_label.setFont(QFont("Arial", 14, QFont.Bold))
        error_label.setStyleSheet("color: #ff6b35; margin: 50px;")
        window.setCentralWidget(error_label)

        return window

    def apply_dark_theme(self):
        """Apply dark theme to the application"""
        self.setStyleSheet("""
        QMainWindow {
            background-color: #2b2b2b;
            color: #ffffff;
        }
        QWidget {
            background-color: #2b2b2b;
            color: #ffffff;
        }
        QPushButton {
            background-color: #404040;
            border: 1px solid #555555;
            padding: 8px 16px;
            border-radius: 4px;
        }
        QPushButton:hover {
            background-color: #4a4a4a;
        }
        QPushButton:pressed {
            background-color: #353535;
        }
        QScrollBar:vertical {
            background-color: #404040;
            width: 12px;
        }
        QScrollBar::handle:vertical {
            background-color: #606060;
            border-radius: 6px;
        }
        """)

    def run(self):
        """Run the application"""
        try:
            self.main_window.resize(*WINDOW_SIZE)
            self.main_window.show()
            self.logger.info("Application started successfully")
            return self.exec_()

        except Exception as e:
            self.logger.error(f"Error running application: {e}")
            QMessageBox.critical(None, "Application Error",
                                 f"An error occurred while running the application:\n{e}")
            return 1


def main():
    """Main entry point"""
    try:
        app = RestrictedFieldApp(sys.argv)
        return app.run()
    except Exception as e:
        print(f"Failed to start application: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
