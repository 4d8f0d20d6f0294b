from __future__ import annotations

from typing import Callable

from .board import EMPTY, Board, Color

# (board, x, y, color) -> whether the placement is allowed.
LegalityCheck = Callable[[Board, int, int, Color], bool]


def default_legality(board: Board, x: int, y: int, color: Color) -> bool:
    """Allows every placement except one onto an occupied intersection.

    This is the only rule enforced. Ko, suicide and scoring are left to a
    replacement check passed to the state machine.
    """
    return board.get(x, y) == EMPTY
