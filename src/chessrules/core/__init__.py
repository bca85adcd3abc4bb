"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, parse_square

    board = Board.initial()
    outcome = board.apply_move(parse_square("e2"), parse_square("e4"))
    assert outcome.ok and board.en_passant == parse_square("e3")
"""

from chessrules.core.board import BACK_RANK, STARTING_ROWS, Board
from chessrules.core.enums import CastlingRights, Color, MoveFlag, MoveKind, PieceType
from chessrules.core.move import MoveOutcome
from chessrules.core.move_generator import possible_moves
from chessrules.core.piece import PIECE_VALUES, Piece
from chessrules.core.types import (
    ALL_SQUARES,
    Square,
    col_of,
    in_bounds,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveFlag",
    "MoveKind",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "col_of",
    "in_bounds",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "BACK_RANK",
    "Board",
    "MoveOutcome",
    "PIECE_VALUES",
    "Piece",
    "STARTING_ROWS",
    "possible_moves",
]
