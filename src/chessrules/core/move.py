"""Move outcome value object returned by :meth:`Board.apply_move`."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveFlag, MoveKind
from chessrules.core.piece import Piece
from chessrules.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Immutable result of a move request: quiet, capture or illegal.

    An illegal outcome leaves the board untouched; ``captured`` is only set
    for :attr:`MoveKind.CAPTURE`.
    """

    kind: MoveKind
    from_sq: Square
    to_sq: Square
    captured: Piece | None = None
    flag: MoveFlag = MoveFlag.NORMAL

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def quiet(
        cls, from_sq: Square, to_sq: Square, flag: MoveFlag = MoveFlag.NORMAL
    ) -> MoveOutcome:
        return cls(MoveKind.QUIET, from_sq, to_sq, None, flag)

    @classmethod
    def capture(
        cls,
        from_sq: Square,
        to_sq: Square,
        captured: Piece,
        flag: MoveFlag = MoveFlag.NORMAL,
    ) -> MoveOutcome:
        return cls(MoveKind.CAPTURE, from_sq, to_sq, captured, flag)

    @classmethod
    def illegal(cls, from_sq: Square, to_sq: Square) -> MoveOutcome:
        return cls(MoveKind.ILLEGAL, from_sq, to_sq)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def ok(self) -> bool:
        """True for quiet moves and captures."""
        return self.kind != MoveKind.ILLEGAL

    @property
    def is_capture(self) -> bool:
        return self.kind == MoveKind.CAPTURE

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}-{square_name(self.to_sq)}"
        if self.kind == MoveKind.ILLEGAL:
            return f"{base} (illegal)"
        if self.captured is not None:
            return f"{base} x{self.captured}"
        return base
