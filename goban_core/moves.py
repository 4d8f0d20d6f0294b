from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .board import BLACK, WHITE, Color
from .errors import InvalidMoveError

# Button id prefixes. "mc" is what the column-selection table used to emit;
# it is still accepted on input.
MOVE_PREFIX = "m"
MOVE_PREFIX_ALIASES = ("m", "mc")
BACK_PREFIX = "mp"

PASS = "pass"
RESIGN = "resign"

# Action kinds
COLUMN = "column"
ROW = "row"
BACK = "back"

_COLOR_TAGS = (BLACK, WHITE)


@dataclass(frozen=True)
class MoveId:
    """A column, an optional row (-1 while pending) and the acting color."""
    column: int
    row: int
    color: Color

    @property
    def row_pending(self) -> bool:
        return self.row < 0


@dataclass(frozen=True)
class Action:
    """A parsed button press."""
    kind: str  # COLUMN, ROW, PASS, RESIGN or BACK
    color: Color
    move: Optional[MoveId] = None


def encode_move(column: int, row: int, color: Color) -> str:
    """Builds the compact identifier for a move, e.g. ``b3`` or ``w3:15``."""
    r = WHITE if color == WHITE else BLACK
    r += str(column)
    if row >= 0:
        r += ":" + str(row)
    return r


def decode_move(text: str) -> MoveId:
    """Inverse of :func:`encode_move`; a missing row segment decodes as -1."""
    color = _parse_color(text[:1])
    col_s, sep, row_s = text[1:].partition(":")
    if not _is_index(col_s) or (sep and not _is_index(row_s)):
        raise InvalidMoveError(f"bad move id {text!r}")
    column = int(col_s)
    row = int(row_s) if sep else -1
    return MoveId(column=column, row=row, color=color)


def _is_index(s: str) -> bool:
    # Canonical decimal only: ASCII digits, no sign, no padding, no leading zero.
    return s.isascii() and s.isdigit() and (s == "0" or s[0] != "0")


def _parse_color(tag: str) -> Color:
    if tag not in _COLOR_TAGS:
        raise InvalidMoveError(f"unknown color tag {tag!r}")
    return tag


def action_id(kind: str, color: Color, column: int = -1, row: int = -1) -> str:
    """Builds the button id for an action."""
    if kind == PASS or kind == RESIGN:
        return f"{MOVE_PREFIX}_{kind}_{color}"
    if kind == BACK:
        return f"{BACK_PREFIX}_{color}"
    if kind == COLUMN:
        return f"{MOVE_PREFIX}_{encode_move(column, -1, color)}"
    if kind == ROW:
        return f"{MOVE_PREFIX}_{encode_move(column, row, color)}"
    raise ValueError(f"unknown action kind: {kind!r}")


def parse_action(custom_id: str) -> Action:
    """Parses a button id into an :class:`Action`."""
    prefix, sep, rest = custom_id.strip().partition("_")
    if not sep or not rest:
        raise InvalidMoveError(f"bad button id {custom_id!r}")
    if prefix == BACK_PREFIX:
        return Action(kind=BACK, color=_parse_color(rest))
    if prefix not in MOVE_PREFIX_ALIASES:
        raise InvalidMoveError(f"unknown button prefix {prefix!r}")
    for kind in (PASS, RESIGN):
        if rest.startswith(kind + "_"):
            return Action(kind=kind, color=_parse_color(rest[len(kind) + 1:]))
    move = decode_move(rest)
    return Action(kind=COLUMN if move.row_pending else ROW, color=move.color, move=move)
