from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import BOARD_BG_COLOR, GRID_COLOR, O_COLOR, WIN_HIGHLIGHT_COLOR, X_COLOR
from ..game_logic import Cell

GRID_SIZE = 3

class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits board index 0-8 on click

    def __init__(self, state, parent=None):
        super().__init__(parent)
        self.state = state  # GameState, read only here
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centered in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def paintEvent(self, event):
        """
        draw grid, highlight winning line, then X/O marks
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), QColor(BOARD_BG_COLOR))
            cell_size = side / GRID_SIZE
            # winning cells get a background fill
            for index in self.state.winning_line or ():
                r, c = divmod(index, GRID_SIZE)
                painter.fillRect(
                    QRectF(offset_x + c*cell_size, offset_y + r*cell_size, cell_size, cell_size),
                    QColor(WIN_HIGHLIGHT_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, GRID_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for index, cell in enumerate(self.state.board):
                if cell is Cell.EMPTY: continue
                r, c = divmod(index, GRID_SIZE)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if cell is Cell.X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board index and emit
        """
        if not self._accept_clicks or self.state.game_over:
            return
        ox, oy, side = self._geometry()
        x, y = event.position().x(), event.position().y()
        # only inside grid
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return
        cell = side / GRID_SIZE
        if cell <= 0: return
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, GRID_SIZE-1)); col = max(0, min(col, GRID_SIZE-1))
        self.cell_clicked.emit(row*GRID_SIZE + col)  # notify main window
