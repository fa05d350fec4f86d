"""Tests for GameState."""

from chesslet.core.enums import Color, PieceType
from chesslet.core.move import Move
from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.types import ALL_SQUARES
from chesslet.game.state import GameState

E = "........"


class TestGameStateSetup:
    def test_defaults(self) -> None:
        gs = GameState()
        assert gs.position == Position.initial()
        assert gs.side_to_move == Color.WHITE
        assert gs.selected is None
        assert gs.hints == frozenset()
        assert len(gs.captured) == 0

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.apply_move(Move((6, 4), (4, 4)))
        gs.select((1, 3))
        gs.setup()
        assert gs.position == Position.initial()
        assert gs.side_to_move == Color.WHITE
        assert gs.selected is None

    def test_setup_custom_position(self, diagram) -> None:
        pos = diagram(E, E, E, E, "....k...", E, E, E, turn=Color.BLACK)
        gs = GameState()
        gs.setup(pos)
        assert gs.position is pos
        assert gs.side_to_move == Color.BLACK


class TestSelection:
    def test_select_own_piece_caches_hints(self) -> None:
        gs = GameState()
        assert gs.select((6, 4))
        assert gs.selected == (6, 4)
        assert gs.hints == frozenset({(5, 4), (4, 4)})

    def test_cannot_select_opponent_piece(self) -> None:
        gs = GameState()
        assert not gs.select((1, 4))
        assert gs.selected is None

    def test_cannot_select_empty_square(self) -> None:
        gs = GameState()
        assert not gs.select((4, 4))
        assert gs.selected is None

    def test_selectable(self) -> None:
        gs = GameState()
        assert gs.is_selectable((7, 1))
        assert not gs.is_selectable((0, 1))
        assert not gs.is_selectable((3, 3))

    def test_piece_with_no_moves_is_still_selected(self) -> None:
        gs = GameState()
        assert gs.select((7, 0))
        assert gs.hints == frozenset()

    def test_select_agrees_with_selectable(self) -> None:
        gs = GameState()
        gs.apply_move(Move((6, 4), (4, 4)))
        for sq in ALL_SQUARES:
            expected = gs.is_selectable(sq)
            assert gs.select(sq) == expected
            gs.clear_selection()


class TestClickProtocol:
    def test_select_then_confirm(self) -> None:
        gs = GameState()
        assert gs.click((6, 4)) is None
        record = gs.click((4, 4))

        assert record is not None
        assert record.move == Move((6, 4), (4, 4))
        assert gs.position.board[(4, 4)] == Piece(Color.WHITE, PieceType.PAWN)
        assert gs.side_to_move == Color.BLACK
        assert gs.selected is None
        assert gs.hints == frozenset()

    def test_click_outside_hints_deselects(self) -> None:
        gs = GameState()
        gs.click((6, 4))
        assert gs.click((3, 4)) is None
        assert gs.selected is None
        assert gs.position == Position.initial()

    def test_click_other_own_piece_only_deselects(self) -> None:
        gs = GameState()
        gs.click((6, 4))
        assert gs.click((6, 3)) is None
        assert gs.selected is None

    def test_click_opponent_piece_without_selection_is_noop(self) -> None:
        gs = GameState()
        assert gs.click((1, 4)) is None
        assert gs.selected is None

    def test_turns_alternate_through_clicks(self) -> None:
        gs = GameState()
        gs.click((6, 4))
        gs.click((4, 4))
        assert gs.click((6, 3)) is None  # white piece, black to move
        assert gs.selected is None
        gs.click((1, 4))
        assert gs.click((3, 4)) is not None
        assert gs.side_to_move == Color.WHITE

    def test_capture_through_clicks(self) -> None:
        gs = GameState()
        for sq in [(6, 4), (4, 4), (1, 3), (3, 3), (4, 4)]:
            gs.click(sq)
        record = gs.click((3, 3))

        assert record is not None
        assert record.captured == Piece(Color.BLACK, PieceType.PAWN)
        assert gs.captured.black == [PieceType.PAWN]
        assert gs.captured.white == []


class TestLegalMoves:
    def test_opening_count(self) -> None:
        assert len(GameState().legal_moves()) == 20

    def test_only_side_to_move(self) -> None:
        gs = GameState()
        gs.apply_move(Move((6, 4), (4, 4)))
        assert all(
            gs.position.board[m.from_sq].color == Color.BLACK for m in gs.legal_moves()
        )
