import logging

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .config import AI_MOVE_DELAY_MS, DEFAULT_MODE
from .engine import Engine
from .game_logic import (
    COMPUTER_PLAYER, HUMAN_PLAYER, Draw, GameState, IllegalMove, Mode, Won,
)

logger = logging.getLogger(__name__)


class GameController(QObject):
    """
    drives one game: routes clicks, schedules the computer's reply

    a pending computer move belongs to the generation it was scheduled in;
    reset/toggle bump the generation so a stale move is dropped, never
    applied to the new board
    """
    board_changed = Signal()
    turn_changed = Signal(str)
    status_changed = Signal(str)
    mode_changed = Signal(str)

    def __init__(self, mode=DEFAULT_MODE, ai_delay_ms=AI_MOVE_DELAY_MS, parent=None):
        super().__init__(parent)
        self.state = GameState(mode)
        self.engine = Engine(COMPUTER_PLAYER, HUMAN_PLAYER)
        self.ai_delay_ms = ai_delay_ms
        self.generation = 0                # bumped on every reset
        self._pending_generation = None    # generation the timer was armed for
        self._ai_timer = QTimer(self)
        self._ai_timer.setSingleShot(True)
        self._ai_timer.timeout.connect(self._on_ai_timeout)

    # --- text for the labels ---

    def turn_text(self):
        if self.state.mode is Mode.HUMAN_VS_COMPUTER:
            return "Your Turn" if self.state.current_player is HUMAN_PLAYER else "AI Turn"
        return f"Player {self.state.current_player.value}"

    def status_text(self):
        status = self.state.status
        if isinstance(status, Won):
            if self.state.mode is Mode.HUMAN_VS_COMPUTER:
                return "You Win!" if status.player is HUMAN_PLAYER else "AI Wins!"
            return f"Player {status.player.value} Wins!"
        if isinstance(status, Draw):
            return "It's a Draw!"
        return ""

    def mode_text(self):
        return "vs AI" if self.state.mode is Mode.HUMAN_VS_COMPUTER else "2 Players"

    @property
    def computer_move_pending(self):
        return self._ai_timer.isActive()

    # --- moves ---

    @Slot(int)
    def play_human_move(self, index):
        """
        apply a click; returns False if it was ignored
        """
        if self.state.game_over:
            return False
        if self.state.is_computer_turn:
            logger.debug("ignoring click on %s, computer to move", index)
            return False
        try:
            self.state.apply_move(index)
        except IllegalMove as e:
            logger.debug("rejected human move: %s", e)
            return False
        self._after_move()
        return True

    def play_computer_move(self, generation):
        """
        ask the engine and apply its move, unless this request went stale
        """
        if generation != self.generation:
            logger.info("dropping computer move from generation %d (now %d)",
                        generation, self.generation)
            return False
        if not self.state.is_computer_turn:
            return False
        index = self.engine.best_move(self.state.board)
        self.state.apply_move(index)
        self._after_move()
        return True

    def _after_move(self):
        # push state out, then line up the computer if it's up
        self.board_changed.emit()
        if self.state.game_over:
            logger.info("game over: %s", self.status_text())
            self.status_changed.emit(self.status_text())
            return
        self.turn_changed.emit(self.turn_text())
        if self.state.is_computer_turn:
            self._schedule_computer_move()

    def _schedule_computer_move(self):
        self._pending_generation = self.generation
        self._ai_timer.start(self.ai_delay_ms)

    @Slot()
    def _on_ai_timeout(self):
        generation, self._pending_generation = self._pending_generation, None
        if generation is not None:
            self.play_computer_move(generation)

    # --- reset / mode ---

    def cancel_computer_move(self):
        if self._ai_timer.isActive():
            logger.info("cancelled pending computer move")
        self._ai_timer.stop()
        self._pending_generation = None

    @Slot()
    def reset_game(self, mode=None):
        """
        fresh board, X to move; drops any pending computer move
        """
        self.cancel_computer_move()
        self.generation += 1
        self.state.reset(mode)
        logger.info("new game (%s)", self.mode_text())
        self.board_changed.emit()
        self.mode_changed.emit(self.mode_text())
        self.turn_changed.emit(self.turn_text())
        self.status_changed.emit("")

    @Slot()
    def toggle_mode(self):
        if self.state.mode is Mode.HUMAN_VS_COMPUTER:
            self.reset_game(Mode.HUMAN_VS_HUMAN)
        else:
            self.reset_game(Mode.HUMAN_VS_COMPUTER)
