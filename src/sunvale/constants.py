import os
from pathlib import Path

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Sun Vale Color Puzzle"

# Color arithmetic bounds. Values wrap back to 1 once they pass the maximum.
MIN_COLOR_VALUE = 1
MAX_COLOR_VALUE = 8

# Puzzle defaults
DEFAULT_SLOT_COUNT = 4
MIN_SLOT_COUNT = 1
DEFAULT_SLOT_COLOR = "Black"
DEFAULT_INVENTORY_COUNT = 10
# Inventory is shown but not editable in the current build.
INVENTORY_EDITABLE = False

# Page geometry (pixels, origin bottom-left as in Arcade)
TAB_BAR_HEIGHT = 48
TAB_WIDTH = 260
PAGE_MARGIN = 24
SECTION_GAP = 18
SECTION_TITLE_HEIGHT = 30
SWATCH_SIZE = 44
TARGET_SWATCH_SIZE = 64
SLOT_CARD_WIDTH = 88
SLOT_CARD_HEIGHT = 96
SLOT_CARD_GAP = 12
INVENTORY_ITEM_WIDTH = 64
INVENTORY_ITEM_HEIGHT = 78
INVENTORY_ITEM_GAP = 10
BUTTON_WIDTH = 140
BUTTON_HEIGHT = 38
BUTTON_GAP = 12
THEME_BUTTON_WIDTH = 120
# Results panel sits to the right of the controls and takes this share of the width.
SOLUTION_PANEL_WIDTH_PCT = 0.30
SOLUTION_PANEL_MIN_WIDTH = 220
SOLUTION_LINE_HEIGHT = 26

# Persisted UI preference location. SUNVALE_DATA_DIR relocates the data folder.
DATA_DIR = Path(os.environ.get("SUNVALE_DATA_DIR") or Path(__file__).resolve().parents[2] / "data")
THEME_PREFERENCE_FILE = "theme_preference.json"
