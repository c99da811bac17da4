import logging

from ..config import (
    BADGE_STYLE, DRAW_ALERT_TEXT, DRAW_BADGE_TEXT, RESTART_KEY,
    TURN_TEXT, WIN_ALERT_TEXT, WIN_BADGE_TEXT, WINDOW_TITLE, style_for,
)
from ..game_logic import Continue, Draw, GameEngine, Rejected, Win
from ..ui.alert_banner import AlertBanner
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: renders the engine and forwards input to it
    """
    def __init__(self, engine=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.engine = engine if engine is not None else GameEngine()
        self.board_widget = BoardWidget(self.engine, parent=self)
        self.badge_kind = None

        self._setup_ui()
        self.restart_game()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_top_controls()        # turn badge
        self.main_layout.addWidget(self.controls_top_widget)
        self.alert_banner = AlertBanner(self)
        self.main_layout.addWidget(self.alert_banner)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # restart button
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_game_action = QAction("New Game", self)
        self.new_game_action.triggered.connect(self.restart_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(self.new_game_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_top_controls(self):
        # whose-turn badge
        self.controls_top_widget = QWidget()
        hl = QHBoxLayout(self.controls_top_widget)
        self.controls_top_widget.setStyleSheet("background: transparent;")
        self.turn_badge = QLabel("")
        f = QFont(); f.setPointSize(12); self.turn_badge.setFont(f)
        self.turn_badge.setAlignment(Qt.AlignCenter)
        hl.addStretch(1); hl.addWidget(self.turn_badge); hl.addStretch(1)

    def _create_bottom_controls(self):
        # hint label + restart button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.hint_label = QLabel(f"Press {RESTART_KEY} to restart")
        self.hint_label.setStyleSheet("color: #aaa;")
        self.hint_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.restart_button = QPushButton("Restart")
        self.restart_button.clicked.connect(self.restart_game)
        hl.addWidget(self.hint_label); hl.addWidget(self.restart_button)

    def _set_badge(self, text, kind):
        # badge text + bootstrap-like color
        self.badge_kind = kind
        self.turn_badge.setStyleSheet(style_for(BADGE_STYLE, kind))
        self.turn_badge.setText(text)

    def _update_turn_badge(self):
        player = self.engine.active_player.value
        self._set_badge(TURN_TEXT.format(player=player), "primary")

    def _lock_board(self):
        # no more input until restart
        self.board_widget.set_accept_clicks(False)

    @Slot(int)
    def _on_cell_clicked(self, index):
        outcome = self.engine.attempt_move(index)
        if isinstance(outcome, Rejected):
            # cell taken or game over: leave ui as is
            logger.debug("ignored click on %s (%s)", index, outcome.reason.value)
            return
        self.board_widget.update()
        if isinstance(outcome, Win):
            self._end_with_win(outcome)
        elif isinstance(outcome, Draw):
            self._end_with_draw()
        elif isinstance(outcome, Continue):
            self._update_turn_badge()

    def _end_with_win(self, outcome):
        player = outcome.player.value
        self._lock_board()
        self.alert_banner.show_message(WIN_ALERT_TEXT.format(player=player), "success")
        self._set_badge(WIN_BADGE_TEXT.format(player=player), "success")
        logger.info("game over: %s wins", player)

    def _end_with_draw(self):
        self._lock_board()
        self.alert_banner.show_message(DRAW_ALERT_TEXT, "warning")
        self._set_badge(DRAW_BADGE_TEXT, "warning")
        logger.info("game over: draw")

    @Slot()
    def restart_game(self):
        # fresh engine state, unlock board, clear alert
        self.engine.reset()
        self.board_widget.set_accept_clicks(True)
        self.board_widget.update()
        self.alert_banner.clear()
        self._update_turn_badge()
        logger.info("new game started")

    def keyPressEvent(self, event):
        # R restarts, any case
        if event.text().upper() == RESTART_KEY:
            self.restart_game()
            event.accept()
            return
        super().keyPressEvent(event)
