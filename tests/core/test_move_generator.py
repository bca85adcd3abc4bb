"""Tests for per-piece move patterns."""

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.move_generator import possible_moves
from chessrules.core.types import (
    A1, ALL_SQUARES, B3, C2, D2, D4, D5, D6, E1, E2, E3, E4, E5, E7, F2, F4,
    F5, G1, H1, H8,
)

MakeBoard = Callable[..., Board]


def _total_moves(board: Board, color: Color) -> int:
    return sum(len(possible_moves(board, sq)) for sq in board.all_pieces(color))


class TestStartingPosition:
    def test_white_has_twenty_moves(self, initial_board: Board) -> None:
        assert _total_moves(initial_board, Color.WHITE) == 20

    def test_black_has_twenty_moves(self, initial_board: Board) -> None:
        assert _total_moves(initial_board, Color.BLACK) == 20

    def test_knight_g1(self, initial_board: Board) -> None:
        assert sorted(possible_moves(initial_board, G1)) == [(5, 5), (5, 7)]

    def test_rook_boxed_in(self, initial_board: Board) -> None:
        assert possible_moves(initial_board, A1) == []

    def test_empty_square(self, initial_board: Board) -> None:
        assert possible_moves(initial_board, E4) == []

    def test_off_board_square(self, initial_board: Board) -> None:
        assert possible_moves(initial_board, (8, 0)) == []


class TestMoveSetInvariants:
    @pytest.fixture
    def busy_board(self, make_board: MakeBoard) -> Board:
        return make_board(
            {
                E1: "K", D4: "Q", C2: "N", F4: "B", A1: "R", E4: "P",
                H8: "k", D6: "q", E5: "p", B3: "n", D5: "r", (0, 2): "b",
            }
        )

    def test_never_same_color_or_off_board(self, busy_board: Board) -> None:
        for sq in ALL_SQUARES:
            piece = busy_board[sq]
            if piece is None:
                continue
            for to_sq in possible_moves(busy_board, sq):
                assert busy_board.in_bounds(to_sq)
                assert not busy_board.is_color(to_sq, piece.color)

    def test_no_duplicates(self, busy_board: Board) -> None:
        for sq in ALL_SQUARES:
            moves = possible_moves(busy_board, sq)
            assert len(moves) == len(set(moves))


class TestSlidingPieces:
    def test_rook_rays_stop_at_first_piece(self, make_board: MakeBoard) -> None:
        board = make_board({D4: "R", D6: "p", F4: "P"})
        moves = set(possible_moves(board, D4))
        assert moves == {
            (3, 3), (2, 3),          # up to and including the enemy pawn
            (4, 4),                  # right, stopped before own pawn
            (4, 2), (4, 1), (4, 0),  # left
            (5, 3), (6, 3), (7, 3),  # down
        }
        assert (1, 3) not in moves
        assert F4 not in moves

    def test_bishop_open_board(self, make_board: MakeBoard) -> None:
        board = make_board({D4: "B"})
        assert len(possible_moves(board, D4)) == 13

    def test_queen_is_rook_plus_bishop(self, make_board: MakeBoard) -> None:
        board = make_board({D4: "Q"})
        assert len(possible_moves(board, D4)) == 27

    def test_bishop_capture_ends_ray(self, make_board: MakeBoard) -> None:
        board = make_board({D4: "b", F2: "P", G1: "R"})
        moves = possible_moves(board, D4)
        assert F2 in moves
        assert G1 not in moves


class TestSteppingPieces:
    def test_knight_in_corner(self, make_board: MakeBoard) -> None:
        board = make_board({A1: "N"})
        assert sorted(possible_moves(board, A1)) == [(5, 1), (6, 2)]

    def test_knight_jumps_over_pieces(self, initial_board: Board) -> None:
        assert (5, 0) in possible_moves(initial_board, (7, 1))

    def test_king_centre(self, make_board: MakeBoard) -> None:
        board = make_board({D4: "K"})
        assert len(possible_moves(board, D4)) == 8

    def test_king_captures_but_not_own(self, make_board: MakeBoard) -> None:
        board = make_board({E1: "K", E2: "P", D2: "n"})
        moves = possible_moves(board, E1)
        assert D2 in moves
        assert E2 not in moves

    def test_king_pattern_has_no_castling(self, make_board: MakeBoard) -> None:
        board = make_board({E1: "K", H1: "R"}, castling=CastlingRights.ALL)
        assert G1 not in possible_moves(board, E1)


class TestPawn:
    def test_white_single_and_double(self, initial_board: Board) -> None:
        assert sorted(possible_moves(initial_board, E2)) == [E4, E3]

    def test_black_moves_toward_row_seven(self, initial_board: Board) -> None:
        assert sorted(possible_moves(initial_board, E7)) == [(2, 4), (3, 4)]

    def test_double_push_only_from_start(self, make_board: MakeBoard) -> None:
        board = make_board({E3: "P"})
        assert possible_moves(board, E3) == [E4]

    def test_blocked_destination(self, make_board: MakeBoard) -> None:
        board = make_board({E2: "P", E4: "p"})
        assert possible_moves(board, E2) == [E3]

    def test_blocked_intermediate(self, make_board: MakeBoard) -> None:
        board = make_board({E2: "P", E3: "n"})
        assert possible_moves(board, E2) == []

    def test_diagonal_captures(self, make_board: MakeBoard) -> None:
        board = make_board({E4: "P", D5: "p", F5: "P"})
        assert sorted(possible_moves(board, E4)) == [D5, E5]

    def test_en_passant_target(self, make_board: MakeBoard) -> None:
        board = make_board({E4: "P", D4: "p"}, en_passant=E3)
        assert E3 in possible_moves(board, D4)

    def test_en_passant_needs_enemy_beside(self, initial_board: Board) -> None:
        initial_board.apply_move(E2, E4)
        assert E3 not in possible_moves(initial_board, D2)

    def test_en_passant_only_on_target(self, make_board: MakeBoard) -> None:
        board = make_board({E4: "P", D4: "p"})
        assert E3 not in possible_moves(board, D4)
