"""Headless tests for the Qt presentation layer."""

import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from hotseat.config import DRAW_ALERT_TEXT, TURN_TEXT
from hotseat.game_logic import GameEngine, GameStatus, Mark
from hotseat.ui.alert_banner import AlertBanner
from hotseat.ui.board_widget import BoardWidget
from hotseat.ui.main_window import TicTacToeWindow


@pytest.fixture
def window(qapp):
    win = TicTacToeWindow()
    win.resize(400, 500)
    yield win
    win.close()
    win.deleteLater()


def click(window, *indices):
    for index in indices:
        window.board_widget.cell_clicked.emit(index)


def test_window_starts_with_x_turn(window):
    assert window.turn_badge.text() == TURN_TEXT.format(player="X")
    assert window.badge_kind == "primary"
    assert window.alert_banner.isHidden()
    assert window.board_widget.accepts_clicks()


def test_click_places_mark_and_flips_badge(window):
    click(window, 4)
    assert window.engine.cell(4) is Mark.X
    assert window.turn_badge.text() == TURN_TEXT.format(player="O")


def test_click_on_taken_cell_changes_nothing(window):
    click(window, 4)
    text = window.turn_badge.text()
    click(window, 4)
    assert window.engine.active_player is Mark.O
    assert window.turn_badge.text() == text


def test_win_locks_board_and_shows_alert(window):
    click(window, 0, 3, 1, 4, 2)
    assert window.engine.status is GameStatus.WON
    assert not window.board_widget.accepts_clicks()
    assert not window.alert_banner.isHidden()
    assert window.alert_banner.kind == "success"
    assert window.alert_banner.message().startswith("X wins!")
    assert window.turn_badge.text() == "X wins"
    assert window.badge_kind == "success"


def test_draw_shows_warning(window):
    click(window, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert window.engine.status is GameStatus.DRAW
    assert window.alert_banner.kind == "warning"
    assert window.alert_banner.message() == DRAW_ALERT_TEXT
    assert window.turn_badge.text() == "Draw"
    assert not window.board_widget.accepts_clicks()


def test_restart_button_resets_everything(window):
    click(window, 0, 3, 1, 4, 2)
    window.restart_button.click()
    assert window.engine.board == (None,) * 9
    assert window.engine.status is GameStatus.IN_PROGRESS
    assert window.board_widget.accepts_clicks()
    assert window.alert_banner.isHidden()
    assert window.turn_badge.text() == TURN_TEXT.format(player="X")


def test_new_game_menu_action_restarts(window):
    click(window, 0, 1)
    window.new_game_action.trigger()
    assert window.engine.board == (None,) * 9


def test_r_key_restarts(window):
    click(window, 0, 3, 1, 4, 2)
    QTest.keyClick(window, Qt.Key_R)
    assert window.engine.is_active
    assert window.alert_banner.isHidden()


def test_shift_r_restarts(window):
    click(window, 0, 3, 1, 4, 2)
    QTest.keyClick(window, Qt.Key_R, Qt.ShiftModifier)
    assert window.engine.is_active


def test_other_keys_ignored(window):
    click(window, 0)
    QTest.keyClick(window, Qt.Key_Q)
    assert window.engine.cell(0) is Mark.X


def test_alert_close_button_hides(qapp):
    banner = AlertBanner()
    banner.show_message("hello", "info")
    assert not banner.isHidden()
    banner.close_button.click()
    assert banner.isHidden()
    assert banner.kind is None


def test_board_cell_mapping(qapp):
    board = BoardWidget(GameEngine())
    board.resize(300, 300)
    assert board.cell_at(10, 10) == 0
    assert board.cell_at(150, 150) == 4
    assert board.cell_at(290, 10) == 2
    assert board.cell_at(10, 290) == 6
    assert board.cell_at(299.9, 299.9) == 8
    assert board.cell_at(300, 150) is None
    assert board.cell_at(-1, 150) is None


def test_board_mapping_centers_non_square(qapp):
    board = BoardWidget(GameEngine())
    board.resize(500, 300)
    # 300px square starts at x=100
    assert board.cell_at(50, 150) is None
    assert board.cell_at(101, 1) == 0
    assert board.cell_at(399, 299) == 8


def test_board_paints_without_error(qapp):
    engine = GameEngine()
    for index in (0, 3, 1, 4, 2):
        engine.attempt_move(index)
    board = BoardWidget(engine)
    board.resize(200, 200)
    image = board.grab()
    assert not image.isNull()


@pytest.fixture
def shown_window(window):
    window.show()
    QTest.qWaitForWindowExposed(window)
    return window


def mouse_click(board, index, button=Qt.LeftButton):
    pos = board.cell_rect(index).center().toPoint()
    QTest.mouseClick(board, button, Qt.NoModifier, pos)


def test_left_click_places_mark(shown_window):
    board = shown_window.board_widget
    mouse_click(board, 4)
    assert shown_window.engine.cell(4) is Mark.X
    mouse_click(board, 0)
    assert shown_window.engine.cell(0) is Mark.O
    assert shown_window.turn_badge.text() == TURN_TEXT.format(player="X")


def test_right_click_does_nothing(shown_window):
    mouse_click(shown_window.board_widget, 4, Qt.RightButton)
    assert shown_window.engine.board == (None,) * 9
    assert shown_window.engine.active_player is Mark.X


def test_click_ignored_when_input_locked(shown_window):
    board = shown_window.board_widget
    mouse_click(board, 4)
    board.set_accept_clicks(False)
    before = shown_window.engine.board
    mouse_click(board, 0)
    assert shown_window.engine.board == before
    assert shown_window.engine.active_player is Mark.O


def test_click_ignored_after_win(shown_window):
    board = shown_window.board_widget
    for index in (0, 3, 1, 4, 2):
        mouse_click(board, index)
    assert shown_window.engine.status is GameStatus.WON
    before = shown_window.engine.board
    # re-enable input so only the finished game blocks the click
    board.set_accept_clicks(True)
    mouse_click(board, 8)
    assert shown_window.engine.board == before
    assert shown_window.alert_banner.message().startswith("X wins!")


def test_click_accepted_after_restart(shown_window):
    board = shown_window.board_widget
    for index in (0, 3, 1, 4, 2):
        mouse_click(board, index)
    shown_window.restart_button.click()
    mouse_click(board, 8)
    assert shown_window.engine.cell(8) is Mark.X
