from pathlib import Path

# Application settings
APP_NAME = "Restricted TextField"
APP_VERSION = "1.0.0"
ORGANIZATION_NAME = "Restricted TextField Example"

# Paths
BASE_DIR = Path(__file__).parent.parent
LOG_DIR = BASE_DIR / "logs"

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_TO_FILE = False
LOG_FILE = LOG_DIR / "restricted_textfield.log"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3

# Window sizes
WINDOW_SIZE = (520, 640)
SHEET_SIZE = (480, 300)

# Username sheet
USERNAME_HINT = "i_neko"
USERNAME_LABEL = "Username"
DEFAULT_USERNAME_PRESET = "whitespace_symbols"

# Theme settings
ACCENT_COLOR = "#ff6b35"
ERROR_COLOR = "#e5484d"
