import logging

from ..config import AppConfig
from ..game_logic import (
    GameState, PlaceMark, PressKey, NewGame, ClearBoard,
    Player, Win, reduce, status_text
)
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

log = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.state = GameState.initial()  # only piece of game state on screen
        self.board_widget = BoardWidget(parent=self)
        self._setup_ui()
        self._render()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(AppConfig.WINDOW_TITLE)
        self.resize(AppConfig.WINDOW_WIDTH, AppConfig.WINDOW_HEIGHT)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # title + player pills
        self.main_layout.addWidget(self.header_widget)

        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setAccessibleName("Game status")
        self.main_layout.addWidget(self.status_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        self.board_widget.key_pressed.connect(self._on_key_pressed)

        self._create_bottom_controls()     # new game / clear board
        self.main_layout.addWidget(self.controls_bottom_widget)

        self.help_label = QLabel("Tip: click a square, or press keys 1-9 when the board is focused.")
        self.help_label.setWordWrap(True)
        self.help_label.setStyleSheet("color: #999;")
        self.main_layout.addWidget(self.help_label)
        self.board_widget.setFocus()

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.new_game)
        clear_action = QAction("Clear Board", self)
        clear_action.triggered.connect(self.clear_board)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, clear_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        '''title and the two player indicators'''
        self.header_widget = QWidget()
        hl = QHBoxLayout(self.header_widget)
        title = QLabel(AppConfig.WINDOW_TITLE)
        f = QFont(); f.setPointSize(16); f.setBold(True); title.setFont(f)
        self.player_pills = {
            Player.X: QLabel("Player X"),
            Player.O: QLabel("Player O"),
        }
        hl.addWidget(title); hl.addStretch(1)
        for pill in self.player_pills.values(): hl.addWidget(pill)

    def _create_bottom_controls(self):
        # control buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.new_game_button = QPushButton("New game"); self.new_game_button.clicked.connect(self.new_game)
        self.clear_button = QPushButton("Clear board"); self.clear_button.clicked.connect(self.clear_board)
        for b in (self.new_game_button, self.clear_button):
            b.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
            hl.addWidget(b)

    def dispatch(self, action):
        """
        run one action through the rules and redraw if anything changed
        """
        new_state = reduce(self.state, action)
        if new_state is self.state:
            log.debug("ignored %r", action)
            return False
        self.state = new_state
        log.info("%r -> %s", action, status_text(new_state))
        self._render()
        return True

    def _render(self):
        # push current state into every widget
        state = self.state
        self.board_widget.set_state(state)
        self.status_label.setText(status_text(state))
        if isinstance(state.outcome, Win):
            self.status_label.setStyleSheet(f"color: {AppConfig.WIN_COLOR}; font-weight: bold;")
        else:
            self.status_label.setStyleSheet(f"color: {AppConfig.STATUS_COLOR};")
        for player, pill in self.player_pills.items():
            active = not state.is_over and player is state.current_player
            pill.setStyleSheet(AppConfig.ACTIVE_PILL if active else AppConfig.IDLE_PILL)

    @Slot(int)
    def _on_cell_clicked(self, index):
        self.dispatch(PlaceMark(index))

    @Slot(str)
    def _on_key_pressed(self, key):
        self.dispatch(PressKey(key))

    @Slot()
    def new_game(self):
        # empty board, X to move
        self.dispatch(NewGame())
        self.board_widget.setFocus()

    @Slot()
    def clear_board(self):
        # empty board, same player to move
        self.dispatch(ClearBoard())
        self.board_widget.setFocus()
