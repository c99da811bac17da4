from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt, Slot

from ..config import ALERT_STYLE, style_for


class AlertBanner(QFrame):
    """
    dismissible notification strip shown on win/draw
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("alertBanner")
        self.kind = None
        layout = QHBoxLayout(self)
        self.message_label = QLabel("")
        f = QFont(); f.setBold(True); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setWordWrap(True)
        self.close_button = QPushButton("×")
        self.close_button.setFlat(True)
        self.close_button.setToolTip("Close")
        self.close_button.clicked.connect(self.clear)
        layout.addWidget(self.message_label, 1)
        layout.addWidget(self.close_button)
        self.setVisible(False)

    def show_message(self, text, kind="info"):
        # kind: 'success' | 'warning' | 'info'
        self.kind = kind
        self.setStyleSheet(style_for(ALERT_STYLE, kind))
        self.message_label.setText(text)
        self.setVisible(True)

    def message(self):
        return self.message_label.text()

    @Slot()
    def clear(self):
        # hide the alert (if shown)
        self.kind = None
        self.message_label.setText("")
        self.setVisible(False)
