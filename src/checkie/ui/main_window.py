"""MainWindow — top-level window assembling the board and menus."""

from __future__ import annotations

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from checkie.core.enums import Color, GameResult
from checkie.game.controller import TurnController
from checkie.game.state import GameState, MoveRecord
from checkie.ui.board.board_view import BoardView
from checkie.ui.settings import AppSettings
from checkie.ui.styles.theme import THEME_NAMES, BoardTheme

_RESULT_TEXT: dict[GameResult, str] = {
    GameResult.WHITE_WINS: "White wins",
    GameResult.BLACK_WINS: "Black wins",
}


class MainWindow(QMainWindow):
    """Main application window for Checkie."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: TurnController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Checkie")
        self.setMinimumSize(480, 520)
        self.resize(680, 720)

        self._settings = settings or AppSettings()
        self._controller = controller or TurnController(self._settings.rule_options())

        self._setup_ui()
        self._setup_menu()
        self._connect_game_events()
        self._apply_settings()

        # Start with a default game
        self._controller.new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(self._controller)
        self.setCentralWidget(self._board_view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        menu_game.addAction(self._act_new_game)

        menu_game.addSeparator()
        act_quit = QAction("&Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        menu_game.addAction(act_quit)

        # Board menu
        menu_board = menu_bar.addMenu("&Board")
        assert menu_board is not None

        self._act_show_moves = QAction("Show &Legal Moves", self)
        self._act_show_moves.setCheckable(True)
        self._act_show_moves.setChecked(self._settings.show_legal_moves)
        self._act_show_moves.toggled.connect(self._on_show_moves_toggled)
        menu_board.addAction(self._act_show_moves)

        menu_theme = menu_board.addMenu("&Theme")
        assert menu_theme is not None
        self._theme_group = QActionGroup(self)
        self._theme_group.setExclusive(True)
        for name in THEME_NAMES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setChecked(name == self._settings.board_theme)
            act.triggered.connect(lambda _checked, n=name: self._on_theme_chosen(n))
            self._theme_group.addAction(act)
            menu_theme.addAction(act)

        # Rules menu
        menu_rules = menu_bar.addMenu("&Rules")
        assert menu_rules is not None

        self._act_mandatory = QAction("&Mandatory Capture", self)
        self._act_mandatory.setCheckable(True)
        self._act_mandatory.setChecked(self._settings.mandatory_capture)
        self._act_mandatory.toggled.connect(self._on_mandatory_toggled)
        menu_rules.addAction(self._act_mandatory)

        self._act_multi_jump = QAction("M&ulti-Jump", self)
        self._act_multi_jump.setCheckable(True)
        self._act_multi_jump.setChecked(self._settings.multi_jump)
        self._act_multi_jump.toggled.connect(self._on_multi_jump_toggled)
        menu_rules.addAction(self._act_multi_jump)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_new_game.append(self._on_game_started)
        events.on_game_over.append(self._on_game_over)

    # ── Settings ─────────────────────────────────────────────────────────

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_legal_moves(s.show_legal_moves)
        self._controller.options = s.rule_options()
        if not self._controller.state.is_game_over:
            self._update_status(self._controller.current_turn())

    def _on_show_moves_toggled(self, checked: bool) -> None:
        self._settings.show_legal_moves = checked
        self._apply_settings()

    def _on_theme_chosen(self, name: str) -> None:
        self._settings.board_theme = name
        self._apply_settings()

    def _on_mandatory_toggled(self, checked: bool) -> None:
        self._settings.mandatory_capture = checked
        self._apply_settings()

    def _on_multi_jump_toggled(self, checked: bool) -> None:
        self._settings.multi_jump = checked
        self._apply_settings()

    # ── Game events ──────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._controller.new_game()

    def _on_game_started(self, state: GameState) -> None:
        self._update_status(state.side_to_move)

    def _on_move(self, _record: MoveRecord, state: GameState) -> None:
        self._update_status(state.side_to_move)

    def _on_game_over(self, result: GameResult) -> None:
        self._status_label.setText(_RESULT_TEXT.get(result, result.name))

    def _update_status(self, side: Color) -> None:
        self._status_label.setText(f"{side.name.capitalize()} to move")

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> TurnController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()
