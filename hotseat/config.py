# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
MIN_BOARD_SIDE = 150            # px, board never smaller than this
RESTART_KEY = "R"               # case-insensitive restart shortcut

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_LINE_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_CELL_COLOR = "#3f5f3f"
WIN_STRIKE_COLOR = "lime"

# -----------------------------------------------------------------------------
# BADGE + ALERT STYLES
# -----------------------------------------------------------------------------

# kind -> (text color, background color)
STYLE_COLORS = {
    "primary": ("#fff", "#0d6efd"),
    "success": ("#fff", "#198754"),
    "warning": ("#000", "#ffc107"),
    "info": ("#000", "#0dcaf0"),
}

BADGE_STYLE = "color: {fg}; background-color: {bg}; border-radius: 6px; " \
              "padding: 2px 8px; font-weight: bold;"
ALERT_STYLE = "QFrame#alertBanner {{ color: {fg}; background-color: {bg}; " \
              "border-radius: 6px; }}"

# -----------------------------------------------------------------------------
# MESSAGES
# -----------------------------------------------------------------------------

TURN_TEXT = "{player}’s Turn"
WIN_BADGE_TEXT = "{player} wins"
WIN_ALERT_TEXT = "{player} wins! \U0001F389"
DRAW_BADGE_TEXT = "Draw"
DRAW_ALERT_TEXT = "It's a draw. Cat’s game!"


def style_for(template, kind):
    """
    fill a badge/alert stylesheet template for a style kind
    """
    fg, bg = STYLE_COLORS.get(kind, STYLE_COLORS["primary"])
    return template.format(fg=fg, bg=bg)
