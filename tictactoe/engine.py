"""
minimax search for the computer player

boards travel as tuples of Cell, nothing here mutates its input;
the search is memoised on its arguments
"""

import logging
from functools import lru_cache

from .game_logic import (
    COMPUTER_PLAYER, HUMAN_PLAYER, Draw, InProgress, InvalidState, Won,
    check_board, empty_cells, evaluate,
)

logger = logging.getLogger(__name__)

WIN_SCORE = 10


def _place(board, index, player):
    return board[:index] + (player.cell,) + board[index + 1:]


@lru_cache(maxsize=None)
def _minimax(board, depth, maximizing, computer, human):
    status = evaluate(board)
    if isinstance(status, Won):
        return WIN_SCORE - depth if status.player is computer else depth - WIN_SCORE
    if isinstance(status, Draw):
        return 0

    mover = computer if maximizing else human
    scores = (_minimax(_place(board, i, mover), depth + 1, not maximizing, computer, human)
              for i in empty_cells(board))
    return max(scores) if maximizing else min(scores)


def minimax(board, depth, maximizing, computer, human):
    """
    score board from the computer's side
    win = 10 - depth, loss = depth - 10, draw = 0
    raises InvalidState for a malformed board
    """
    board = tuple(board)
    check_board(board)
    return _minimax(board, depth, maximizing, computer, human)


def move_scores(board, computer_player=COMPUTER_PLAYER, human_player=HUMAN_PLAYER):
    """
    score each empty cell for the computer, index order
    returns: list of (index, score)
    raises InvalidState if there is nothing to search
    """
    board = tuple(board)
    check_board(board)
    if computer_player is human_player:
        raise InvalidState(f"computer and human are both {computer_player.value}")
    status = evaluate(board)
    if not isinstance(status, InProgress):
        raise InvalidState(f"no move to make, game is {status}")

    # the reply to each tentative move is the opponent's, so start minimising
    return [(i, _minimax(_place(board, i, computer_player), 0, False, computer_player, human_player))
            for i in empty_cells(board)]


def _pick(scores):
    # max keeps the first of equals, so ties go to the lowest index
    return max(scores, key=lambda pair: pair[1])


def best_move(board, computer_player=COMPUTER_PLAYER, human_player=HUMAN_PLAYER):
    """
    optimal cell index for computer_player, lowest index on ties
    """
    index, _ = _pick(move_scores(board, computer_player, human_player))
    return index


class Engine:
    """
    perfect-play opponent for a fixed seat assignment
    """
    def __init__(self, computer_player=COMPUTER_PLAYER, human_player=HUMAN_PLAYER):
        if computer_player is human_player:
            raise InvalidState(f"computer and human are both {computer_player.value}")
        self.computer_player = computer_player
        self.human_player = human_player

    def best_move(self, board):
        scores = move_scores(board, self.computer_player, self.human_player)
        index, score = _pick(scores)
        logger.info("%s picks cell %d (score %d, %d candidates)",
                    self.computer_player.value, index, score, len(scores))
        return index
