"""Board - piece placement, en-passant target and castling rights."""

from __future__ import annotations

import logging

from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.move import MoveOutcome
from chessrules.core.move_generator import possible_moves as piece_moves
from chessrules.core.piece import Piece
from chessrules.core.types import (
    ALL_SQUARES,
    BOARD_SIZE,
    Square,
    in_bounds,
    square_name,
)

_LOGGER = logging.getLogger(__name__)

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# color -> (back rank row, pawn row)
STARTING_ROWS: dict[Color, tuple[int, int]] = {
    Color.WHITE: (7, 6),
    Color.BLACK: (0, 1),
}

_KING_HOME_COL = 4
_KINGSIDE_ROOK_COL = 7
_QUEENSIDE_ROOK_COL = 0
_PROMOTION_ROWS = (0, BOARD_SIZE - 1)


class Board:
    """Mutable 8x8 grid of pieces plus en-passant and castling state.

    Every query is bounds-checked: an off-board square holds no piece and
    is not empty. :meth:`apply_move` is the single validated mutation.
    """

    __slots__ = ("_grid", "en_passant", "castling")

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        # Square skipped by the last double pawn push, if that was the last move.
        self.en_passant: Square | None = None
        self.castling = CastlingRights.NONE

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.piece_at(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not self.in_bounds(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        row, col = sq
        self._grid[row][col] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        row, col = sq
        if not in_bounds(row, col):
            return None
        return self._grid[row][col]

    # -- Query helpers ------------------------------------------------------

    @staticmethod
    def in_bounds(sq: Square) -> bool:
        return in_bounds(sq[0], sq[1])

    def is_empty(self, sq: Square) -> bool:
        return self.in_bounds(sq) and self._grid[sq[0]][sq[1]] is None

    def is_color(self, sq: Square, color: Color) -> bool:
        piece = self.piece_at(sq)
        return piece is not None and piece.color == color

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, row-major."""
        return [sq for sq in ALL_SQUARES if self.is_color(sq, color)]

    def has_castling_right(self, color: Color, kingside: bool = True) -> bool:
        flag = (
            CastlingRights.kingside(color)
            if kingside
            else CastlingRights.queenside(color)
        )
        return bool(self.castling & flag)

    def possible_moves(self, sq: Square) -> list[Square]:
        """Pattern moves of the piece on *sq* plus any castling targets."""
        return piece_moves(self, sq) + self.castling_targets(sq)

    def castling_targets(self, sq: Square) -> list[Square]:
        """King destinations two files away that castling makes available.

        Requires the king on its home square, the matching right, a
        same-color rook on the corner and empty squares in between. King
        safety is not considered.
        """
        king = self.piece_at(sq)
        if king is None or king.piece_type != PieceType.KING:
            return []
        color = king.color
        home_row = STARTING_ROWS[color][0]
        if sq != (home_row, _KING_HOME_COL):
            return []

        targets: list[Square] = []
        rook = Piece(color, PieceType.ROOK)
        if (
            self.castling & CastlingRights.kingside(color)
            and self.piece_at((home_row, _KINGSIDE_ROOK_COL)) == rook
            and all(self.is_empty((home_row, c)) for c in (5, 6))
        ):
            targets.append((home_row, 6))
        if (
            self.castling & CastlingRights.queenside(color)
            and self.piece_at((home_row, _QUEENSIDE_ROOK_COL)) == rook
            and all(self.is_empty((home_row, c)) for c in (1, 2, 3))
        ):
            targets.append((home_row, 2))
        return targets

    # -- Move application ---------------------------------------------------

    def apply_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Validate and play *from_sq* → *to_sq*.

        Whose turn it is is the caller's concern. Returns an illegal outcome
        without touching the board when the origin is empty or the
        destination is not reachable.
        """
        piece = self.piece_at(from_sq)
        if piece is None:
            _LOGGER.debug("Rejected move from empty square %r", from_sq)
            return MoveOutcome.illegal(from_sq, to_sq)
        if to_sq not in self.possible_moves(from_sq):
            _LOGGER.debug(
                "Rejected %s from %s to %r", piece, square_name(from_sq), to_sq
            )
            return MoveOutcome.illegal(from_sq, to_sq)

        from_row, from_col = from_sq
        to_row, to_col = to_sq
        color = piece.color
        flag = MoveFlag.NORMAL
        captured = self.piece_at(to_sq)

        if (
            piece.piece_type == PieceType.PAWN
            and to_sq == self.en_passant
            and to_col != from_col
        ):
            # The captured pawn is beside the origin, not on the destination.
            captured = self._grid[from_row][to_col]
            self._grid[from_row][to_col] = None
            flag = MoveFlag.EN_PASSANT

        if piece.piece_type == PieceType.KING and abs(to_col - from_col) == 2:
            if to_col > from_col:
                rook_from, rook_to = _KINGSIDE_ROOK_COL, 5
                flag = MoveFlag.CASTLE_KINGSIDE
            else:
                rook_from, rook_to = _QUEENSIDE_ROOK_COL, 3
                flag = MoveFlag.CASTLE_QUEENSIDE
            self._grid[from_row][rook_to] = self._grid[from_row][rook_from]
            self._grid[from_row][rook_from] = None
            self.castling &= ~CastlingRights.both(color)

        self.en_passant = None
        if piece.piece_type == PieceType.PAWN and abs(to_row - from_row) == 2:
            self.en_passant = ((from_row + to_row) // 2, from_col)
            flag = MoveFlag.DOUBLE_PAWN

        self._grid[to_row][to_col] = piece
        self._grid[from_row][from_col] = None

        # Either edge row promotes, whatever the pawn's color.
        if piece.piece_type == PieceType.PAWN and to_row in _PROMOTION_ROWS:
            self._grid[to_row][to_col] = Piece(color, PieceType.QUEEN)
            flag = MoveFlag.PROMOTION

        if piece.piece_type == PieceType.KING:
            self.castling &= ~CastlingRights.both(color)
        # Vacating a corner file revokes that side, whatever piece moved.
        if from_col == _QUEENSIDE_ROOK_COL:
            self.castling &= ~CastlingRights.queenside(color)
        if from_col == _KINGSIDE_ROOK_COL:
            self.castling &= ~CastlingRights.kingside(color)

        if flag != MoveFlag.NORMAL and flag != MoveFlag.DOUBLE_PAWN:
            _LOGGER.debug(
                "%s %s-%s (%s)",
                piece,
                square_name(from_sq),
                square_name(to_sq),
                flag.name.lower(),
            )

        if captured is None:
            return MoveOutcome.quiet(from_sq, to_sq, flag)
        return MoveOutcome.capture(from_sq, to_sq, captured, flag)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        b.en_passant = self.en_passant
        b.castling = self.castling
        return b

    def clear(self) -> None:
        """Empty every square and drop all en-passant and castling state."""
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self.en_passant = None
        self.castling = CastlingRights.NONE

    def reset(self) -> None:
        """Restore the standard starting position."""
        self.clear()
        for color, (back_row, pawn_row) in STARTING_ROWS.items():
            for col, pt in enumerate(BACK_RANK):
                self._grid[back_row][col] = Piece(color, pt)
                self._grid[pawn_row][col] = Piece(color, PieceType.PAWN)
        self.castling = CastlingRights.ALL

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._grid == other._grid
            and self.en_passant == other.en_passant
            and self.castling == other.castling
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
