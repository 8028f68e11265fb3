import logging

from .game_logic import Mode

# -----------------------------------------------------------------------------
# GAME
# -----------------------------------------------------------------------------

AI_MOVE_DELAY_MS = 500                 # pause before the computer answers
DEFAULT_MODE = Mode.HUMAN_VS_COMPUTER

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BG_COLOR = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_HIGHLIGHT_COLOR = "#90EE90"

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = logging.INFO
