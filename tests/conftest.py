"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights
from chessrules.core.piece import Piece
from chessrules.core.types import Square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _make_board(
    pieces: dict[Square, str],
    castling: CastlingRights = CastlingRights.NONE,
    en_passant: Square | None = None,
) -> Board:
    """Build a board from ``{square: piece letter}``."""
    board = Board()
    for sq, char in pieces.items():
        board[sq] = Piece.from_char(char)
    board.castling = castling
    board.en_passant = en_passant
    return board


@pytest.fixture
def make_board() -> Callable[..., Board]:
    return _make_board


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for bridge tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app
