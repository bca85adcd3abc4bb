"""Pseudo-legal move patterns for every piece type.

A single dispatch on :class:`PieceType` replaces per-piece subclasses:
adding a piece kind means adding one generator and one table entry.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import ALL_SQUARES, Square, in_bounds

if TYPE_CHECKING:
    from chessrules.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Row delta of a pawn step and the row a pawn double-pushes from.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for row, col in ALL_SQUARES:
        targets[(row, col)] = tuple(
            (row + dr, col + dc) for dr, dc in offsets if in_bounds(row + dr, col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for row, col in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r = row + dr
            c = col + dc
            ray: list[Square] = []
            while in_bounds(r, c):
                ray.append((r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[(row, col)] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Public API ---------------------------------------------------------------


def possible_moves(board: Board, sq: Square) -> list[Square]:
    """Destination squares of the piece on *sq* (pseudo-legal, no castling).

    Returns an empty list for an empty or off-board square.
    """
    piece = board.piece_at(sq)
    if piece is None:
        return []
    return _GENERATORS[piece.piece_type](board, sq, piece.color)


# -- Piece-specific generators (private) -------------------------------------


def _gen_steps(
    board: Board, targets: tuple[Square, ...], color: Color
) -> list[Square]:
    return [to_sq for to_sq in targets if not board.is_color(to_sq, color)]


def _gen_sliding(
    board: Board, rays: tuple[tuple[Square, ...], ...], color: Color
) -> list[Square]:
    moves: list[Square] = []
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.append(to_sq)
                continue
            if target.color != color:
                moves.append(to_sq)
            break
    return moves


def _gen_king(board: Board, sq: Square, color: Color) -> list[Square]:
    return _gen_steps(board, _KING_TARGETS[sq], color)


def _gen_knight(board: Board, sq: Square, color: Color) -> list[Square]:
    return _gen_steps(board, _KNIGHT_TARGETS[sq], color)


def _gen_bishop(board: Board, sq: Square, color: Color) -> list[Square]:
    return _gen_sliding(board, _BISHOP_RAYS[sq], color)


def _gen_rook(board: Board, sq: Square, color: Color) -> list[Square]:
    return _gen_sliding(board, _ROOK_RAYS[sq], color)


def _gen_queen(board: Board, sq: Square, color: Color) -> list[Square]:
    return _gen_sliding(board, _QUEEN_RAYS[sq], color)


def _gen_pawn(board: Board, sq: Square, color: Color) -> list[Square]:
    moves: list[Square] = []
    row, col = sq
    step = PAWN_DIRECTION[color]

    one_step = (row + step, col)
    if board.in_bounds(one_step) and board.is_empty(one_step):
        moves.append(one_step)
        if row == PAWN_START_ROW[color]:
            two_step = (row + 2 * step, col)
            if board.is_empty(two_step):
                moves.append(two_step)

    for dc in (1, -1):
        cap_sq = (row + step, col + dc)
        if not board.in_bounds(cap_sq):
            continue
        if board.is_color(cap_sq, color.opposite):
            moves.append(cap_sq)
        elif _can_en_passant(board, cap_sq, (row, col + dc), color):
            moves.append(cap_sq)
    return moves


def _can_en_passant(
    board: Board, target: Square, victim: Square, color: Color
) -> bool:
    # The double-pushed pawn sits beside the capturer, on the target's file.
    return (
        board.en_passant == target
        and not board.is_color(target, color)
        and board.is_color(victim, color.opposite)
    )


_GENERATORS: dict[PieceType, Callable[[Board, Square, Color], list[Square]]] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.ROOK: _gen_rook,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
}
