from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import (
    BOARD_BACKGROUND, GRID_LINE_COLOR, MIN_BOARD_SIDE,
    O_COLOR, WIN_CELL_COLOR, WIN_STRIKE_COLOR, X_COLOR,
)
from ..game_logic import BOARD_SIDE, Mark


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits board index 0-8 on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine            # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(MIN_BOARD_SIDE, MIN_BOARD_SIDE))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _grid_geometry(self):
        # centered square: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_rect(self, index):
        ox, oy, side = self._grid_geometry()
        cell = side / BOARD_SIDE
        row, col = divmod(index, BOARD_SIDE)
        return QRectF(ox + col*cell, oy + row*cell, cell, cell)

    def cell_at(self, x, y):
        """
        map widget coords to board index, None outside the grid
        """
        ox, oy, side = self._grid_geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIDE
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp float rounding at the far edge
        row = max(0, min(row, BOARD_SIDE-1)); col = max(0, min(col, BOARD_SIDE-1))
        return row*BOARD_SIDE + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._grid_geometry()
            cell_size = side / BOARD_SIDE
            # background
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND))
            line = self.engine.winning_line
            if line:
                for idx in line:
                    painter.fillRect(self.cell_rect(idx), QColor(WIN_CELL_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(GRID_LINE_COLOR), 2))
            for i in range(1, BOARD_SIDE):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # draw marks
            rad = cell_size/2 * 0.7
            for idx, sym in enumerate(self.engine.board):
                if sym is None: continue
                center = self.cell_rect(idx).center()
                cx, cy = center.x(), center.y()
                if sym is Mark.X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # strike through the winning line
            if line:
                pen = QPen(QColor(WIN_STRIKE_COLOR), 6, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin)
                painter.setPen(pen)
                painter.drawLine(self.cell_rect(line[0]).center(),
                                 self.cell_rect(line[-1]).center())
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if event.button() != Qt.LeftButton:
            return
        if not self._accept_clicks or not self.engine.is_active:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
