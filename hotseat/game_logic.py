import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

BOARD_SIDE = 3                          # fixed 3x3 grid
CELL_COUNT = BOARD_SIDE * BOARD_SIDE

# rows, cols, diagonals; order decides which line is reported
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(str, Enum):
    """
    the two player symbols, X always moves first
    """
    X = "X"
    O = "O"

    @property
    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class RejectReason(Enum):
    GAME_OVER = "game_over"
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"


Cell = Optional[Mark]
Line = Tuple[int, int, int]


@dataclass(frozen=True)
class Rejected:
    index: object
    reason: RejectReason


@dataclass(frozen=True)
class Continue:
    index: int
    mark: Mark
    next_player: Mark


@dataclass(frozen=True)
class Win:
    index: int
    player: Mark
    line: Line


@dataclass(frozen=True)
class Draw:
    index: int
    mark: Mark


MoveOutcome = Union[Rejected, Continue, Win, Draw]


def find_winning_line(cells: Sequence[Cell]) -> Optional[Tuple[Mark, Line]]:
    """
    first line in WIN_LINES order holding three equal marks, or None
    """
    for a, b, c in WIN_LINES:
        mark = cells[a]
        if mark is not None and mark == cells[b] == cells[c]:
            return mark, (a, b, c)
    return None


def is_full(cells: Sequence[Cell]) -> bool:
    return all(cell is not None for cell in cells)


class GameEngine:
    """
    tic-tac-toe rules and state for one hot-seat game

    Illegal moves (game already over, index outside 0-8, occupied cell) are
    reported as a Rejected outcome and leave the state untouched; they never
    raise. Callers must not drive one engine from several threads at once.
    """

    def __init__(self):
        self.reset()

    @property
    def board(self) -> Tuple[Cell, ...]:
        return tuple(self._board)

    @property
    def active_player(self) -> Mark:
        return self._active_player

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def winner(self) -> Optional[Mark]:
        return self._winner

    @property
    def winning_line(self) -> Optional[Line]:
        return self._winning_line

    @property
    def is_active(self) -> bool:
        return self._status is GameStatus.IN_PROGRESS

    def cell(self, index: int) -> Cell:
        return self._board[index]

    def empty_cells(self):
        return [i for i, cell in enumerate(self._board) if cell is None]

    def reset(self) -> None:
        """
        clear board, X to move, game back in progress
        """
        self._board = [None] * CELL_COUNT
        self._active_player = Mark.X
        self._status = GameStatus.IN_PROGRESS
        self._winner = None
        self._winning_line = None
        logger.debug("game reset")

    def _rejection_reason(self, index) -> Optional[RejectReason]:
        if not self.is_active:
            return RejectReason.GAME_OVER
        # bool is an int subclass but never a board position
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < CELL_COUNT:
            return RejectReason.OUT_OF_RANGE
        if self._board[index] is not None:
            return RejectReason.OCCUPIED
        return None

    def attempt_move(self, index) -> MoveOutcome:
        """
        place the active player's mark at index and report the result

        returns Rejected, Continue, Win or Draw; win is checked before draw
        so a last-cell move completing a line is a Win
        """
        reason = self._rejection_reason(index)
        if reason is not None:
            logger.debug("move %r rejected: %s", index, reason.value)
            return Rejected(index, reason)

        mark = self._active_player
        self._board[index] = mark
        logger.debug("%s placed at %d", mark.value, index)

        found = find_winning_line(self._board)
        if found is not None:
            self._status = GameStatus.WON
            self._winner, self._winning_line = found
            logger.info("%s wins on line %s", mark.value, self._winning_line)
            return Win(index, mark, self._winning_line)

        if is_full(self._board):
            self._status = GameStatus.DRAW
            logger.info("game drawn")
            return Draw(index, mark)

        self._active_player = mark.other
        return Continue(index, mark, self._active_player)
