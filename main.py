import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.config import LOG_FORMAT, LOG_LEVEL
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# DARK THEME
# -----------------------------------------------------------------------------

PANEL = QColor(53, 53, 53)
DIMMED = QColor(127, 127, 127)
ACCENT = QColor(42, 130, 218)

# active roles -> color
PALETTE_ROLES = {
    QPalette.Window: PANEL,
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: PANEL,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Highlight: ACCENT,
    QPalette.HighlightedText: Qt.white,
}

# greyed out when disabled
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def apply_dark_palette(app: QApplication):
    """
    Dark Fusion palette for the game window.
    """
    palette = QPalette()
    for role, color in PALETTE_ROLES.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, DIMMED)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main():
    logging.basicConfig(format=LOG_FORMAT, level=LOG_LEVEL)
    app = QApplication(sys.argv)
    app.setStyle('Fusion')
    apply_dark_palette(app)

    window = TicTacToeWindow()
    window.resize(420, 520)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
