from __future__ import annotations

# Facade module that re-exports goban core functionality.
# The Flask app and the tests import from here; single-responsibility
# modules live under goban_core/*.

from goban_core.board import (
    BLACK,
    EMPTY,
    MAX_BOARD_SIZE,
    WHITE,
    Board,
    CellState,
    Color,
    Coord,
    color_name,
    column_label,
    decode_board,
    opponent,
    star_points,
)
from goban_core.errors import (
    BoardSizeError,
    BoardTooLargeError,
    GameOverError,
    GobanError,
    InvalidMoveError,
    InvalidTokenError,
    InvalidTransitionError,
)
from goban_core.machine import (
    Button,
    Outcome,
    Phase,
    apply_action,
    handle,
    new_game,
    selection_table,
)
from goban_core.moves import (
    Action,
    MoveId,
    action_id,
    decode_move,
    encode_move,
    parse_action,
)
from goban_core.render import Renderer, TextRenderer
from goban_core.rules import LegalityCheck, default_legality
from goban_core.state_token import (
    StateToken,
    artifact_name,
    deserialize,
    serialize,
    token_from_artifact,
)


def main() -> None:
    # CLI driver delegated to goban_core.cli
    from goban_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
