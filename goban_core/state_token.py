from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Tuple

from .board import BLACK, WHITE, Board, decode_board
from .errors import BoardSizeError, InvalidTokenError

# Slots kept for move history / ko tracking; always written as -1, never read.
RESERVED_SENTINEL = -1
DEFAULT_ARTIFACT_SUFFIX = ".png"


@dataclass(frozen=True)
class StateToken:
    """The full game state as carried in an artifact name between interactions.

    Wire form: ``<w>x<h>_<turn>_<r0>x<r1>_<r2>x<r3>_<base64 board bytes>``.
    """
    width: int
    height: int
    turn: int  # 0 = black to move, 1 = white to move
    reserved: Tuple[str, str, str, str]
    board_bytes: bytes

    @classmethod
    def from_board(cls, board: Board) -> 'StateToken':
        s = str(RESERVED_SENTINEL)
        return cls(
            width=board.width,
            height=board.height,
            turn=1 if board.turn == WHITE else 0,
            reserved=(s, s, s, s),
            board_bytes=board.encode(),
        )

    @classmethod
    def parse(cls, text: str) -> 'StateToken':
        parts = text.strip().split("_", 4)
        if len(parts) != 5:
            raise InvalidTokenError(f"expected 5 token fields, got {len(parts)}")
        width, height = _split_pair(parts[0], "size")
        try:
            width_i, height_i = int(width), int(height)
            turn = int(parts[1])
        except ValueError as e:
            raise InvalidTokenError(f"bad token field: {e}") from e
        if turn not in (0, 1):
            raise InvalidTokenError(f"bad turn field: {parts[1]!r}")
        # Reserved fields are carried as-is, whatever their shape.
        r0, _, r1 = parts[2].partition("x")
        r2, _, r3 = parts[3].partition("x")
        return cls(
            width=width_i,
            height=height_i,
            turn=turn,
            reserved=(r0, r1, r2, r3),
            board_bytes=_b64decode(parts[4]),
        )

    def to_board(self) -> Board:
        try:
            board = decode_board(self.width, self.height, self.board_bytes)
        except BoardSizeError as e:
            raise InvalidTokenError(str(e)) from e
        board.turn = WHITE if self.turn == 1 else BLACK
        return board

    def __str__(self) -> str:
        r0, r1, r2, r3 = self.reserved
        data = base64.b64encode(self.board_bytes).decode("ascii")
        return f"{self.width}x{self.height}_{self.turn}_{r0}x{r1}_{r2}x{r3}_{data}"


def _split_pair(field: str, what: str) -> Tuple[str, str]:
    left, sep, right = field.partition("x")
    if not sep:
        raise InvalidTokenError(f"bad {what} field: {field!r}")
    return left, right


def _b64decode(data: str) -> bytes:
    # Accept the URL-safe alphabet too; some transports rewrite '/' in file names.
    normalized = data.replace("-", "+").replace("_", "/")
    try:
        return base64.b64decode(normalized, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidTokenError(f"bad board data: {e}") from e


def serialize(board: Board) -> str:
    """Encodes the board and side to move into an opaque token."""
    return str(StateToken.from_board(board))


def deserialize(token: str) -> Board:
    """Rebuilds the board a token was serialized from."""
    return StateToken.parse(token).to_board()


def artifact_name(board: Board, suffix: str = DEFAULT_ARTIFACT_SUFFIX) -> str:
    return serialize(board) + suffix


def token_from_artifact(name: str) -> str:
    """Strips the file extension from an artifact name, leaving the token."""
    # Base-64 never contains ".", so the last dot always starts the extension.
    name = name.strip()
    if "." in name:
        return name.rpartition(".")[0]
    return name
