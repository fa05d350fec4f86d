"""Tests for BoardScene click routing and highlights."""

from __future__ import annotations

from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtWidgets import QGraphicsSceneMouseEvent

from chesslet.core.enums import Color, PieceType
from chesslet.core.rules import MoveRecord
from chesslet.game.state import GameState
from chesslet.ui.board.board_scene import BoardScene


def test_pos_to_square_respects_orientation() -> None:
    scene = BoardScene()
    scene.set_flipped(False)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == (0, 0)

    scene.set_flipped(True)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == (7, 7)


def test_pos_outside_board_is_none() -> None:
    scene = BoardScene()
    assert scene._pos_to_square(QPointF(-5.0, 10.0)) is None
    assert scene._pos_to_square(QPointF(10.0, 8 * BoardScene.TILE + 1.0)) is None


def test_pieces_drawn_for_starting_position() -> None:
    scene = BoardScene()
    assert len(scene._piece_items) == 32
    assert scene._piece_items[(7, 4)].piece.piece_type == PieceType.KING
    assert scene._piece_items[(7, 4)].text() == "♔"


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_selecting_piece_shows_hints() -> None:
    scene = BoardScene()
    scene.click_square((6, 4))

    assert scene.state.selected == (6, 4)
    assert len(scene._highlight_items) == 1
    assert len(scene._legal_dot_items) == 2


def test_set_show_legal_moves_false_hides_hints() -> None:
    scene = BoardScene()
    scene.click_square((7, 1))
    assert len(scene._legal_dot_items) == 2

    scene.set_show_legal_moves(False)
    assert scene._legal_dot_items == []
    assert len(scene._highlight_items) == 1


def test_completed_move_emits_and_redraws() -> None:
    scene = BoardScene()
    records: list[MoveRecord] = []
    scene.move_made.connect(records.append)

    scene.click_square((6, 4))
    scene.click_square((4, 4))

    assert len(records) == 1
    assert records[0].move.to_sq == (4, 4)
    assert (6, 4) not in scene._piece_items
    assert scene._piece_items[(4, 4)].piece.color == Color.WHITE
    assert scene._highlight_items == []
    assert scene._legal_dot_items == []


def test_click_off_hint_clears_selection_without_move() -> None:
    scene = BoardScene()
    records: list[MoveRecord] = []
    scene.move_made.connect(records.append)

    scene.click_square((6, 4))
    scene.click_square((2, 2))

    assert records == []
    assert scene.state.selected is None
    assert scene._highlight_items == []


def test_refresh_mirrors_outside_state_changes() -> None:
    state = GameState()
    scene = BoardScene(state)
    state.select((6, 0))
    scene.refresh()
    assert len(scene._highlight_items) == 1

    state.setup()
    scene.set_state(state)
    assert scene._highlight_items == []


def _press(scene: BoardScene, x: float, y: float) -> None:
    event = QGraphicsSceneMouseEvent(QEvent.Type.GraphicsSceneMousePress)
    event.setScenePos(QPointF(x, y))
    event.setButton(Qt.MouseButton.LeftButton)
    scene.mousePressEvent(event)


def test_mouse_press_selects_and_moves() -> None:
    scene = BoardScene()
    t = BoardScene.TILE
    records: list[MoveRecord] = []
    scene.move_made.connect(records.append)

    _press(scene, 4 * t + t / 2, 6 * t + t / 2)
    assert scene.state.selected == (6, 4)

    _press(scene, 4 * t + t / 2, 4 * t + t / 2)
    assert len(records) == 1
    assert scene.state.position.board[(4, 4)] is not None


def test_mouse_press_off_board_clears_selection() -> None:
    scene = BoardScene()
    scene.click_square((6, 4))
    _press(scene, -10.0, -10.0)
    assert scene.state.selected is None
    assert scene._highlight_items == []
