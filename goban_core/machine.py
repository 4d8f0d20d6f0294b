from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Union

from .board import BLACK, EMPTY, Board, Color, color_name, column_label, decode_board, opponent
from .errors import GameOverError, InvalidMoveError, InvalidTokenError, InvalidTransitionError
from .moves import BACK, COLUMN, PASS, RESIGN, ROW, Action, action_id, parse_action
from .rules import LegalityCheck, default_legality
from .state_token import DEFAULT_ARTIFACT_SUFFIX, deserialize, serialize

log = logging.getLogger(__name__)

BUTTONS_PER_ROW = 5

# Button styles, mirroring the chat-button palette the tables were designed for.
STYLE_SUCCESS = "success"
STYLE_DANGER = "danger"
STYLE_PRIMARY = "primary"
STYLE_SECONDARY = "secondary"


class Phase:
    AWAITING_COLUMN = "awaiting_column"
    AWAITING_ROW = "awaiting_row"
    REJECTED = "rejected"
    RESIGNED = "resigned"


_ALLOWED: Dict[str, FrozenSet[str]] = {
    Phase.AWAITING_COLUMN: frozenset({COLUMN, PASS, RESIGN}),
    Phase.AWAITING_ROW: frozenset({ROW, BACK, PASS, RESIGN}),
    # A rejected placement leaves the row table in place.
    Phase.REJECTED: frozenset({ROW, BACK, PASS, RESIGN}),
    Phase.RESIGNED: frozenset(),
}


@dataclass(frozen=True)
class Button:
    custom_id: str
    label: str
    style: str = STYLE_SECONDARY
    disabled: bool = False


def selection_table(board: Board, color: Color, column: int = -1) -> List[List[Button]]:
    """Builds the control row and the coordinate buttons for the next pick.

    With ``column == -1`` the coordinates are columns; otherwise they are the
    rows of that column, and occupied intersections are disabled.
    """
    controls = [
        Button(action_id(PASS, color), "Pass", STYLE_SUCCESS),
        Button(action_id(RESIGN, color), "Resign", STYLE_DANGER),
    ]
    if column >= 0:
        controls.append(Button(action_id(BACK, color), "Go back", STYLE_PRIMARY))
    rows: List[List[Button]] = [controls]

    dim = board.height if column >= 0 else board.width
    for i in range(dim):
        if i % BUTTONS_PER_ROW == 0:
            rows.append([])
        if column >= 0:
            button = Button(
                action_id(ROW, color, column, i),
                column_label(column) + str(i + 1),
                disabled=board.get(column, i) != EMPTY,
            )
        else:
            button = Button(action_id(COLUMN, color, i), column_label(i))
        rows[-1].append(button)
    return rows


@dataclass(frozen=True)
class Outcome:
    """Result of one interaction: what to show and what token to carry next."""
    phase: str
    board: Board
    color: Color  # side choosing next
    column: int = -1  # column whose rows are on offer, -1 otherwise
    winner: Optional[Color] = None

    @property
    def is_terminal(self) -> bool:
        return self.phase == Phase.RESIGNED

    @property
    def token(self) -> str:
        return serialize(self.board)

    def artifact_name(self, suffix: str = DEFAULT_ARTIFACT_SUFFIX) -> str:
        return self.token + suffix

    @property
    def message(self) -> str:
        if self.phase == Phase.RESIGNED:
            return f"Opponent has resigned. {color_name(self.winner or BLACK)} has won."
        if self.phase == Phase.REJECTED:
            return ":x: **Illegal move!**"
        return f"**{color_name(self.color)}** to move."

    @property
    def components(self) -> List[List[Button]]:
        if self.is_terminal:
            return []
        return selection_table(self.board, self.color, self.column)

    def advance(self, action: Union[str, Action], legal: LegalityCheck = default_legality) -> 'Outcome':
        """Applies an action, checking it is one this outcome actually offered."""
        if isinstance(action, str):
            action = parse_action(action)
        if self.is_terminal:
            raise GameOverError(f"{color_name(opponent(self.winner or BLACK))} has already resigned")
        if action.kind not in _ALLOWED[self.phase]:
            raise InvalidTransitionError(f"{action.kind} is not valid while {self.phase}")
        if action.color != self.color:
            raise InvalidTransitionError(f"{color_name(action.color)} is not the side choosing")
        if action.kind == ROW and action.move is not None and action.move.column != self.column:
            raise InvalidTransitionError(f"row offered for column {self.column}, got {action.move.column}")
        return apply_action(self.board, action, legal)


def apply_action(board: Board, action: Action, legal: LegalityCheck = default_legality) -> Outcome:
    """The transition function. ``board`` is never modified."""
    color = action.color
    if action.kind == RESIGN:
        log.debug("%s resigned", color_name(color))
        return Outcome(Phase.RESIGNED, board.copy(), color, winner=opponent(color))
    if action.kind == PASS:
        nxt = opponent(color)
        log.debug("%s passed", color_name(color))
        return Outcome(Phase.AWAITING_COLUMN, board.with_turn(nxt), nxt)
    if action.kind == BACK:
        return Outcome(Phase.AWAITING_COLUMN, board.copy(), color)

    move = action.move
    if move is None:
        raise InvalidMoveError(f"{action.kind} action without a move")
    if not 0 <= move.column < board.width:
        raise InvalidMoveError(f"column {move.column} is off a {board.width}-wide board")
    if action.kind == COLUMN:
        log.debug("%s picked column %s", color_name(color), column_label(move.column))
        return Outcome(Phase.AWAITING_ROW, board.copy(), color, column=move.column)

    x, y = move.column, move.row
    if not 0 <= y < board.height or not legal(board.copy(), x, y, color):
        log.info("rejected %s at (%d, %d)", color_name(color), x, y)
        return Outcome(Phase.REJECTED, board.copy(), color, column=x)
    placed = board.copy()
    placed.set(x, y, color)
    placed.turn = opponent(color)
    log.debug("%s played %s%d", color_name(color), column_label(x), y + 1)
    return Outcome(Phase.AWAITING_COLUMN, placed, placed.turn)


def handle(token: str, custom_id: str, legal: LegalityCheck = default_legality) -> Outcome:
    """Stateless entry point: previous token plus the pressed button id."""
    board = deserialize(token)
    return apply_action(board, parse_action(custom_id), legal)


def new_game(width: int, height: Optional[int] = None, data: Optional[str] = None) -> Outcome:
    """Starts a game on an empty board, or on one decoded from base-64 cells."""
    height = width if height is None else height
    if data:
        try:
            raw = base64.b64decode(data.strip(), validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidTokenError("could not decode data") from e
        board = decode_board(width, height, raw)
    else:
        board = Board.create(width, height)
    return Outcome(Phase.AWAITING_COLUMN, board, board.turn)
