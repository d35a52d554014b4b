# ============================================================================
# RULES
# ============================================================================
GRID_SIZE = 8
TARGET_SCORE = 100
MAX_MOVES = 7
TIME_LIMIT = 120  # seconds

SELECTION_CAPACITY = 5
MIN_MATCH = 3
BOOSTER_MATCH = 4   # exact match size that advances the booster
BOMB_MATCH = 5      # match size at or above which a bomb is placed
BOOSTER_STEP = 20
BOOSTER_MAX = 100

# Delay before matched cards are replaced or unmatched cards flip back.
SETTLE_DELAY = 1.0
# How long a notification stays on screen.
NOTIFICATION_LIFETIME = 2.5


# ============================================================================
# SYMBOLS
# ============================================================================
SYMBOL_GLYPHS = {
    'circle': '⚪',
    'triangle': '🔺',
    'cross': '❌',
    'star': '⭐',
    'square': '⬜',
}
BOMB_SYMBOL = 'bomb'
BOMB_GLYPH = '💣'

HINT_MESSAGE = "Try matching three symbols at the top right!"


# ============================================================================
# LAYOUT
# ============================================================================
TILE_SIZE = 64
BOTTOM_MARGIN = 20
TILE_PADDING = 3

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.75
BOARD_MAX_HEIGHT_PCT = 0.72

# HUD strip above the board: stats row, booster bar, button row.
HUD_LINE_HEIGHT = 28
BOOSTER_BAR_HEIGHT = 14
BUTTON_HEIGHT = 34
BUTTON_GAP = 10
