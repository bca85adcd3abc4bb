"""Square type alias and coordinate helpers.

Board layout (row-major, row 0 is Black's back rank)::

    (0, 0)=a8 (0, 1)=b8 ... (0, 7)=h8
    ...
    (7, 0)=a1 (7, 1)=b1 ... (7, 7)=h1
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

BOARD_SIZE = 8


def make_square(row: int, col: int) -> Square:
    """Create square from row (0–7) and column (0–7)."""
    return (row, col)


def row_of(sq: Square) -> int:
    """Row index 0–7 (0 = rank 8)."""
    return sq[0]


def col_of(sq: Square) -> int:
    """Column index 0–7 (a–h)."""
    return sq[1]


def in_bounds(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 8×8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_valid_square(sq: object) -> bool:
    """Check whether *sq* is a well-formed, in-bounds square pair."""
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    row, col = sq
    return isinstance(row, int) and isinstance(col, int) and in_bounds(row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2', (0, 7) → 'h8'."""
    return chr(ord("a") + col_of(sq)) + str(BOARD_SIZE - row_of(sq))


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple(
    (row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)

# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[56:64]
