"""Game management layer — session bookkeeping and its event hooks.

Quick start::

    from chessrules.game import GameSession
    from chessrules.core import parse_square

    session = GameSession()
    session.select(parse_square("e2"))
    session.move_to(parse_square("e4"))

The PyQt6 adapter lives in :mod:`chessrules.game.qt_bridge` and is not
imported here, so the session stays usable without Qt.
"""

from chessrules.game.session import GameSession, SessionEvents

__all__ = [
    "GameSession",
    "SessionEvents",
]
