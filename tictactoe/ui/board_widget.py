from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import AppConfig
from ..game_logic import GameState, Cell, BOARD_SIZE, key_to_index


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click
    key_pressed = Signal(str)   # emits typed text while focused

    def __init__(self, parent=None):
        super().__init__(parent)
        self.state = GameState.initial()  # last state pushed by the window
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(AppConfig.BOARD_MIN_SIZE, AppConfig.BOARD_MIN_SIZE))
        self.setFocusPolicy(Qt.StrongFocus)
        self.setAccessibleName("Tic Tac Toe board")

    def set_state(self, state):
        # redraw only on a new value
        if state is self.state:
            return
        self.state = state
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board centred in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            cell_size = side / BOARD_SIZE
            painter.fillRect(self.rect(), QColor(AppConfig.BOARD_BG))
            # winning cells first so marks sit on top
            for i in self.state.winning_line or ():
                r, c = divmod(i, BOARD_SIZE)
                painter.fillRect(
                    QRectF(offset_x + c*cell_size, offset_y + r*cell_size, cell_size, cell_size),
                    QColor(AppConfig.WIN_CELL_BG)
                )
            # grid lines
            painter.setPen(QPen(QColor(AppConfig.GRID_LINE), AppConfig.GRID_LINE_WIDTH))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for i, cell in enumerate(self.state.grid):
                if cell is Cell.EMPTY: continue
                r, c = divmod(i, BOARD_SIZE)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * AppConfig.MARK_SCALE
                if cell is Cell.X:
                    painter.setPen(QPen(QColor(AppConfig.X_COLOR), AppConfig.MARK_WIDTH))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(AppConfig.O_COLOR), AppConfig.MARK_WIDTH))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the board
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIZE
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return row*BOARD_SIZE + col

    def is_cell_enabled(self, index):
        # occupied cells and finished games take no clicks
        return not self.state.is_over and self.state.grid[index] is Cell.EMPTY

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        if index is None or not self.is_cell_enabled(index):
            return
        self.cell_clicked.emit(index)  # notify main window

    def keyPressEvent(self, event):
        """
        forward typed digits, let qt handle the rest
        """
        text = event.text()
        if key_to_index(text) is not None:
            self.key_pressed.emit(text)
            event.accept()
            return
        super().keyPressEvent(event)
