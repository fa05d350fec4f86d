"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QVBoxLayout, QWidget

from chesslet.core.rules import MoveRecord
from chesslet.game.state import GameState
from chesslet.ui.board.board_view import BoardView
from chesslet.ui.panels.captured_panel import CapturedPanel
from chesslet.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for chesslet."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("chesslet")
        self._settings = settings if settings is not None else AppSettings()
        self._state = GameState()

        self._board_view = BoardView(self._state)
        self._captured_panel = CapturedPanel()
        self._turn_label = QLabel()
        self._turn_label.setObjectName("turnLabel")

        side = QWidget()
        side_layout = QVBoxLayout(side)
        side_layout.addWidget(self._turn_label)
        side_layout.addWidget(self._captured_panel)

        central = QWidget()
        layout = QHBoxLayout(central)
        layout.addWidget(self._board_view, stretch=1)
        layout.addWidget(side)
        self.setCentralWidget(central)

        self._build_menu()
        self._board_view.move_made.connect(self._on_move_made)
        self._apply_settings()
        self._refresh_side_panel()

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def captured_panel(self) -> CapturedPanel:
        return self._captured_panel

    @property
    def turn_text(self) -> str:
        return self._turn_label.text()

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Reset to the starting position."""
        _LOGGER.info("New game")
        self._state.setup()
        self._board_view.board_scene.refresh()
        self._refresh_side_panel()

    def _build_menu(self) -> None:
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        game_menu = menu_bar.addMenu("&Game")
        if game_menu is None:
            return

        new_action = QAction("&New Game", self)
        new_action.triggered.connect(self.new_game)
        game_menu.addAction(new_action)

        quit_action = QAction("&Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(quit_action)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(s.theme())
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)

    def _on_move_made(self, record: MoveRecord) -> None:
        self._refresh_side_panel()

    def _refresh_side_panel(self) -> None:
        side = self._state.side_to_move.name.title()
        count = len(self._state.legal_moves())
        self._turn_label.setText(f"{side} to move ({count} legal moves)")
        self._captured_panel.set_captured(self._state.captured)
