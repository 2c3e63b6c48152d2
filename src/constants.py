"""
Global constants for File Browser.
Contains path configuration, API routes, display settings, and timing constants.
"""

import os

# **************************************************************** #
#                       Build Info                                     #
# **************************************************************** #
APP_NAME = "File Browser"

# **************************************************************** #
#                       Environment Detection                        #
# **************************************************************** #
DEV_MODE = os.getenv("DEV_MODE", "false").lower() == "true"

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))

# **************************************************************** #
#                       Path Configuration                           #
# **************************************************************** #
if DEV_MODE:
    TEMP_LOG_DIR = os.path.join(SCRIPT_DIR, "..", "workdir")
    CONFIG_FILE = os.path.join(SCRIPT_DIR, "..", "workdir", "config.json")
else:
    TEMP_LOG_DIR = SCRIPT_DIR
    CONFIG_FILE = os.path.join(SCRIPT_DIR, "config.json")

os.makedirs(TEMP_LOG_DIR, exist_ok=True)
LOG_FILE = os.path.join(TEMP_LOG_DIR, "error.log")

# **************************************************************** #
#                       Backend API                                  #
# **************************************************************** #
DEFAULT_SERVER_URL = "http://localhost:3000"
SERVER_URL_ENV = "FILE_BROWSER_URL"
REQUEST_TIMEOUT = 30  # seconds

API_PREFIX = "/api/v1"
API_LS = API_PREFIX + "/ls"
API_DOWNLOAD = API_PREFIX + "/download"
API_UPLOAD = API_PREFIX + "/upload"
API_MOVE = API_PREFIX + "/mv"
API_COPY = API_PREFIX + "/cp"
API_MKDIR = API_PREFIX + "/mkdir"
API_RM = API_PREFIX + "/rm"
API_RMDIR = API_PREFIX + "/rmdir"

ROOT_PATH = "."
PATH_SEPARATOR = "/"

# **************************************************************** #
#                       Display Settings                             #
# **************************************************************** #
FPS = 30
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 640

# Maximum length accepted by the name field of a card
MAX_NAME_LENGTH = 255

# Characters of a text file shown in the preview pane
TEXT_PREVIEW_LIMIT = 20000

# **************************************************************** #
#                       UI Dimensions                                #
# **************************************************************** #
HEADER_HEIGHT = 60
STATUS_BAR_HEIGHT = 28
OPTIONS_MENU_OFFSET = 15  # Menu opens slightly up-left of the pointer

# **************************************************************** #
#                       Touch/Mouse Settings                         #
# **************************************************************** #
SCROLL_THRESHOLD = 5  # Pixels to move before it's considered scrolling
TAP_TIME_THRESHOLD = 250  # Max ms for a tap vs scroll
SCROLL_SENSITIVITY = 0.08  # Touch scroll sensitivity (lower = more sensitive)
DOUBLE_CLICK_THRESHOLD = 500  # Max ms between clicks for double-click
LONG_PRESS_THRESHOLD = 250  # Hold time in ms that opens the options menu
