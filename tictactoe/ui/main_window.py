import logging

from ..controller import GameController
from ..game_logic import COMPUTER_PLAYER, Mode
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
    main window: board, labels, mode/reset buttons
    """
    def __init__(self, controller=None):
        """
        init controller, ui widgets, signals
        """
        super().__init__()
        self.controller = controller or GameController(parent=self)
        self.board_widget = BoardWidget(self.controller.state, parent=self)

        self._setup_ui()
        self._connect_controller()
        self._on_mode_changed(self.controller.mode_text())
        self._on_turn_changed(self.controller.turn_text())
        self._update_message("")

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.turn_label = QLabel("")
        f = QFont(); f.setPointSize(14); f.setBold(True); self.turn_label.setFont(f)
        self.turn_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.turn_label)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(lambda: self.controller.reset_game())
        mode_action = QAction("Toggle Mode", self)
        mode_action.triggered.connect(lambda: self.controller.toggle_mode())
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, mode_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + mode/reset buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.mode_button = QPushButton(""); self.mode_button.clicked.connect(lambda: self.controller.toggle_mode())
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(lambda: self.controller.reset_game())
        for w in (self.message_label, None, self.mode_button, self.reset_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)
        self.bottom_layout = hl

    def _connect_controller(self):
        # controller signals -> widgets
        self.controller.board_changed.connect(self.board_widget.update)
        self.controller.turn_changed.connect(self._on_turn_changed)
        self.controller.status_changed.connect(self._on_status_changed)
        self.controller.mode_changed.connect(self._on_mode_changed)

    @Slot(str)
    def _update_message(self, text, is_success=False, is_error=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot(str)
    def _on_turn_changed(self, text):
        self.turn_label.setText(text)
        # no clicks while the computer thinks
        self.board_widget.set_accept_clicks(not self.controller.state.is_computer_turn)

    @Slot(str)
    def _on_status_changed(self, text):
        # empty text means a fresh game
        if not text:
            self._update_message("")
            return
        state = self.controller.state
        lost = state.mode is Mode.HUMAN_VS_COMPUTER and state.winner is COMPUTER_PLAYER
        self._update_message(text, is_success=not lost, is_error=lost)
        self.turn_label.setText("")
        self.board_widget.set_accept_clicks(False)

    @Slot(str)
    def _on_mode_changed(self, text):
        self.mode_button.setText(text)

    @Slot(int)
    def _on_cell_clicked(self, index):
        if not self.controller.play_human_move(index):
            logger.debug("click on %s ignored", index)

    def closeEvent(self, event):
        # drop any pending computer move on close
        self.controller.cancel_computer_move()
        event.accept()
