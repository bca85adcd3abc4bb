"""GameSession — turn gating, selection, captures and score.

Drives a :class:`Board` on behalf of a presentation layer. Emits events via
simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import MoveOutcome
from chessrules.core.piece import PIECE_VALUES, Piece
from chessrules.core.types import Square, square_name

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveOutcome], None]
SelectionCallback = Callable[[Square | None, list[Square]], None]
NewGameCallback = Callable[[], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[MoveCallback] = field(default_factory=list)
    on_selection: list[SelectionCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Two-player game over one board: whose turn, what is selected, who
    captured what.

    Thread-safety: methods are meant to be called from a single thread
    (the main/UI thread); every call completes synchronously.
    """

    __slots__ = (
        "_board",
        "_turn",
        "_selected",
        "_captured",
        "_piece_values",
        "events",
    )

    def __init__(
        self,
        board: Board | None = None,
        piece_values: Mapping[PieceType, int] | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._turn = Color.WHITE
        self._selected: Square | None = None
        self._captured: dict[Color, list[Piece]] = {Color.WHITE: [], Color.BLACK: []}
        self._piece_values: dict[PieceType, int] = dict(PIECE_VALUES)
        if piece_values is not None:
            self._piece_values.update(piece_values)
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def selected(self) -> Square | None:
        return self._selected

    def captured(self, color: Color) -> tuple[Piece, ...]:
        """Pieces captured *by* ``color``, oldest first."""
        return tuple(self._captured[color])

    def score(self, color: Color) -> int:
        """Material points ``color`` has captured."""
        return sum(self._piece_values[p.piece_type] for p in self._captured[color])

    def piece_at(self, sq: Square) -> Piece | None:
        return self._board.piece_at(sq)

    def possible_moves(self, sq: Square) -> list[Square]:
        """Destinations for the side to move; empty for anything else."""
        if not self._board.is_color(sq, self._turn):
            return []
        return self._board.possible_moves(sq)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Reset the board to the starting position and clear all tracking."""
        self._board.reset()
        self._turn = Color.WHITE
        self._selected = None
        for pieces in self._captured.values():
            pieces.clear()
        _LOGGER.info("New game started")
        for cb in self.events.on_new_game:
            cb()

    # ── Interaction ──────────────────────────────────────────────────────

    def select(self, sq: Square) -> list[Square]:
        """Pick up the side-to-move's piece on *sq*.

        Returns the destinations to highlight. Does nothing and returns an
        empty list when a square is already selected or *sq* holds no piece
        of the side to move.
        """
        if self._selected is not None or not self._board.is_color(sq, self._turn):
            return []
        self._selected = sq
        targets = self._board.possible_moves(sq)
        self._emit_selection(targets)
        return targets

    def deselect(self) -> None:
        if self._selected is None:
            return
        self._selected = None
        self._emit_selection([])

    def move_to(self, sq: Square) -> MoveOutcome:
        """Play the selected piece to *sq*; selection is cleared either way."""
        from_sq = self._selected
        if from_sq is None:
            return MoveOutcome.illegal(sq, sq)

        self._selected = None
        outcome = self._board.apply_move(from_sq, sq)
        self._emit_selection([])

        if not outcome.ok:
            _LOGGER.debug("%s rejected for %s", outcome, self._turn)
            for cb in self.events.on_rejected:
                cb(outcome)
            return outcome

        if outcome.captured is not None:
            self._captured[self._turn].append(outcome.captured)
        _LOGGER.debug("%s played %s", self._turn, outcome)
        self._turn = self._turn.opposite
        for cb in self.events.on_move:
            cb(outcome)
        return outcome

    def click(self, sq: Square) -> MoveOutcome | list[Square]:
        """Single-click interaction: move when something is selected,
        otherwise select."""
        if self._selected is not None:
            return self.move_to(sq)
        return self.select(sq)

    # ── Internal ─────────────────────────────────────────────────────────

    def _emit_selection(self, targets: list[Square]) -> None:
        for cb in self.events.on_selection:
            cb(self._selected, targets)

    def __repr__(self) -> str:
        sel = square_name(self._selected) if self._selected is not None else "-"
        return f"GameSession(turn={self._turn}, selected={sel})"
