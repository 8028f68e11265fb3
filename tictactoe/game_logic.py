import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

BOARD_CELLS = 9

# rows, cols, diags -- checked in this order
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Cell(Enum):
    EMPTY = ''
    X = 'X'
    O = 'O'


class Player(Enum):
    X = 'X'
    O = 'O'

    def opposite(self):
        return Player.O if self is Player.X else Player.X

    @property
    def cell(self):
        # mark this player leaves on the board
        return Cell(self.value)


class Mode(Enum):
    HUMAN_VS_HUMAN = 'hvh'
    HUMAN_VS_COMPUTER = 'hvc'


# fixed seats when playing the computer
HUMAN_PLAYER = Player.X
COMPUTER_PLAYER = Player.O


@dataclass(frozen=True)
class InProgress:
    pass


@dataclass(frozen=True)
class Won:
    player: Player
    line: tuple


@dataclass(frozen=True)
class Draw:
    pass


class GameError(Exception):
    """
    base for rule violations
    """


class IllegalMove(GameError):
    """
    bad index, taken cell, or game already decided
    """


class InvalidState(GameError):
    """
    board can't be searched (finished, full, or malformed)
    """


def empty_board():
    return (Cell.EMPTY,) * BOARD_CELLS


def check_board(board):
    """
    reject anything that isn't 9 cells
    """
    if len(board) != BOARD_CELLS or not all(isinstance(c, Cell) for c in board):
        raise InvalidState(f"board must be {BOARD_CELLS} cells, got {board!r}")


def evaluate(board):
    """
    scan lines in fixed order, first full line wins
    returns: Won(player, line), Draw(), or InProgress()
    """
    check_board(board)
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not Cell.EMPTY and board[a] is board[b] is board[c]:
            return Won(Player(board[a].value), line)
    if Cell.EMPTY not in board:
        return Draw()
    return InProgress()


def empty_cells(board):
    return [i for i, cell in enumerate(board) if cell is Cell.EMPTY]


class GameState:
    """
    tic-tac-toe board, turn and result
    """
    def __init__(self, mode=Mode.HUMAN_VS_COMPUTER):
        self._mode = mode
        self.reset()

    @classmethod
    def new(cls, mode=Mode.HUMAN_VS_COMPUTER):
        return cls(mode)

    def reset(self, mode=None):
        """
        clear board, X to move, optionally switch mode
        """
        if mode is not None:
            self._mode = mode
        self._board = list(empty_board())
        self._current_player = Player.X
        self._status = InProgress()

    @property
    def board(self):
        # snapshot, callers never see the live list
        return tuple(self._board)

    @property
    def current_player(self):
        return self._current_player

    @property
    def status(self):
        return self._status

    @property
    def mode(self):
        return self._mode

    @property
    def game_over(self):
        return not isinstance(self._status, InProgress)

    @property
    def winner(self):
        return self._status.player if isinstance(self._status, Won) else None

    @property
    def winning_line(self):
        return self._status.line if isinstance(self._status, Won) else None

    @property
    def move_count(self):
        return sum(1 for cell in self._board if cell is not Cell.EMPTY)

    @property
    def is_computer_turn(self):
        return (self._mode is Mode.HUMAN_VS_COMPUTER
                and not self.game_over
                and self._current_player is COMPUTER_PLAYER)

    def empty_cells(self):
        return empty_cells(self._board)

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if isinstance(index, int) and 0 <= index < BOARD_CELLS:
            return self._board[index] is Cell.EMPTY
        return False

    def apply_move(self, index):
        """
        place current player's mark at index, update result, pass the turn
        raises IllegalMove without touching the board
        """
        # validate everything before writing anything
        if self.game_over:
            raise IllegalMove(f"game is over ({self._status})")
        if not isinstance(index, int) or isinstance(index, bool):
            raise IllegalMove(f"index must be an int, got {index!r}")
        if not 0 <= index < BOARD_CELLS:
            raise IllegalMove(f"index {index} out of range 0-{BOARD_CELLS - 1}")
        if self._board[index] is not Cell.EMPTY:
            raise IllegalMove(f"cell {index} already taken by {self._board[index].value}")

        player = self._current_player
        self._board[index] = player.cell
        self._status = evaluate(self._board)
        logger.debug("%s -> %d (%s)", player.value, index, self._status)
        if not self.game_over:
            self._current_player = player.opposite()
        return self._status
