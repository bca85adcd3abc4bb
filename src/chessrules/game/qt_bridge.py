"""Qt bridge exposing a :class:`GameSession` through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.enums import Color
from chessrules.core.move import MoveOutcome
from chessrules.core.types import Square
from chessrules.game.session import GameSession


class SessionBridge(QObject):
    """Relays session events to a Qt presentation layer.

    Board clicks come in through :meth:`click`; results leave as signals.
    """

    move_applied = pyqtSignal(object)
    move_rejected = pyqtSignal(object)
    selection_changed = pyqtSignal(object, object)
    turn_changed = pyqtSignal(int)
    score_changed = pyqtSignal(int, int)
    game_reset = pyqtSignal()

    def __init__(self, session: GameSession | None = None) -> None:
        super().__init__()
        self._session = session if session is not None else GameSession()
        events = self._session.events
        events.on_move.append(self._on_move)
        events.on_rejected.append(self.move_rejected.emit)
        events.on_selection.append(self._on_selection)
        events.on_new_game.append(self._on_new_game)

    @property
    def session(self) -> GameSession:
        return self._session

    @pyqtSlot(int, int)
    def click(self, row: int, col: int) -> None:
        """Forward a board click at ``(row, col)`` to the session."""
        self._session.click((row, col))

    @pyqtSlot()
    def new_game(self) -> None:
        self._session.new_game()

    # -- Session callbacks --------------------------------------------------

    def _on_move(self, outcome: MoveOutcome) -> None:
        self.move_applied.emit(outcome)
        if outcome.captured is not None:
            self._emit_scores()
        self.turn_changed.emit(int(self._session.turn))

    def _on_selection(self, selected: Square | None, targets: list[Square]) -> None:
        self.selection_changed.emit(selected, list(targets))

    def _on_new_game(self) -> None:
        self.game_reset.emit()
        self._emit_scores()
        self.turn_changed.emit(int(self._session.turn))

    def _emit_scores(self) -> None:
        self.score_changed.emit(
            self._session.score(Color.WHITE),
            self._session.score(Color.BLACK),
        )
