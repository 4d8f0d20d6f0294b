from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .errors import BoardSizeError, BoardTooLargeError

CellState = str  # EMPTY, BLACK or WHITE
Color = str  # BLACK or WHITE
Coord = Tuple[int, int]  # (x, y) == (column, row)

EMPTY: CellState = "."
BLACK: Color = "b"
WHITE: Color = "w"

CELL_STATES = (EMPTY, BLACK, WHITE)
MAX_BOARD_SIZE = 19

# 2-bit cell codes; 0b11 is reserved and decodes as empty.
_CELL_TO_BITS: Dict[CellState, int] = {EMPTY: 0x0, BLACK: 0x1, WHITE: 0x2}
_BITS_TO_CELL: Dict[int, CellState] = {0x1: BLACK, 0x2: WHITE}

_STAR_POINTS: Dict[int, Tuple[Coord, ...]] = {
    9: ((2, 2), (6, 2), (4, 4), (2, 6), (6, 6)),
    13: ((6, 6), (3, 3), (3, 9), (9, 3), (9, 9)),
    19: (
        (3, 3), (9, 3), (15, 3),
        (3, 9), (9, 9), (15, 9),
        (3, 15), (9, 15), (15, 15),
    ),
}


def opponent(color: Color) -> Color:
    """Returns the color that moves after ``color``."""
    return WHITE if color == BLACK else BLACK


def color_name(color: Color) -> str:
    return "White" if color == WHITE else "Black"


def column_label(x: int) -> str:
    return chr(ord("A") + x)


def star_points(width: int, height: int) -> Tuple[Coord, ...]:
    """Hoshi coordinates for the standard square sizes, empty otherwise."""
    if width != height:
        return ()
    return _STAR_POINTS.get(width, ())


def _check_size(width: int, height: int) -> None:
    if width > MAX_BOARD_SIZE or height > MAX_BOARD_SIZE:
        raise BoardTooLargeError(f"board too large: {width}x{height} (max {MAX_BOARD_SIZE})")
    if width < 1 or height < 1:
        raise BoardSizeError(f"board too small: {width}x{height}")


@dataclass
class Board:
    """A Go board: a row-major grid of cell states plus the side to move."""
    width: int
    height: int
    cells: List[CellState] = field(default_factory=list)  # row-major, length == width * height
    turn: Color = BLACK

    def __post_init__(self) -> None:
        _check_size(self.width, self.height)
        if not self.cells:
            self.cells = [EMPTY] * (self.width * self.height)
        if len(self.cells) != self.width * self.height:
            raise ValueError(f"expected {self.width * self.height} cells, got {len(self.cells)}")
        for cell in self.cells:
            if cell not in CELL_STATES:
                raise ValueError(f"invalid cell state: {cell!r}")
        if self.turn not in (BLACK, WHITE):
            raise ValueError(f"invalid turn color: {self.turn!r}")

    @classmethod
    def create(cls, width: int, height: int) -> 'Board':
        """Creates an empty board with black to move."""
        return cls(width=width, height=height)

    def size(self) -> Tuple[int, int]:
        """Returns the board size in (x, y) form."""
        return self.width, self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def coords(self) -> Iterable[Coord]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def get(self, x: int, y: int) -> CellState:
        """Gets the cell at (x, y); anything off the board reads as empty."""
        if not self.in_bounds(x, y):
            return EMPTY
        return self.cells[self.index(x, y)]

    def set(self, x: int, y: int, state: CellState) -> None:
        """Overwrites the cell at (x, y). Off-board coordinates are ignored."""
        if state not in CELL_STATES:
            raise ValueError(f"invalid cell state: {state!r}")
        if not self.in_bounds(x, y):
            return
        self.cells[self.index(x, y)] = state

    def copy(self) -> 'Board':
        return Board(self.width, self.height, list(self.cells), self.turn)

    def with_turn(self, color: Color) -> 'Board':
        return Board(self.width, self.height, list(self.cells), color)

    def stones(self) -> Dict[Color, int]:
        return {BLACK: self.cells.count(BLACK), WHITE: self.cells.count(WHITE)}

    def encode(self) -> bytes:
        """Packs every cell into 2 bits, four cells per byte, low bits first."""
        bitlen = self.width * self.height * 2
        out = bytearray((bitlen + 7) // 8)
        for i, cell in enumerate(self.cells):
            out[i // 4] |= _CELL_TO_BITS[cell] << ((i % 4) * 2)
        return bytes(out)

    def pretty(self, show_coords: bool = True, show_stars: bool = True) -> str:
        """Generates a human-readable string representation of the board."""
        stars = set(star_points(self.width, self.height)) if show_stars else set()
        lines: List[str] = []
        header = "    " + " ".join(column_label(x) for x in range(self.width))
        if show_coords:
            lines.append(header)
        for y in range(self.height):
            row: List[str] = []
            for x in range(self.width):
                cell = self.get(x, y)
                if cell == BLACK:
                    row.append("X")
                elif cell == WHITE:
                    row.append("O")
                elif (x, y) in stars:
                    row.append("+")
                else:
                    row.append(".")
            body = " ".join(row)
            if show_coords:
                lines.append(f"{y + 1:>3} {body} {y + 1:<3}".rstrip())
            else:
                lines.append(body)
        if show_coords:
            lines.append(header)
        return "\n".join(lines)


def decode_board(width: int, height: int, data: bytes) -> Board:
    """Rebuilds a board from its packed cells.

    Bytes past the last cell are ignored and missing bytes leave cells empty,
    so truncated or padded payloads never raise. The turn is not part of the
    packed form and defaults to black.
    """
    board = Board.create(width, height)
    total = width * height
    for i, value in enumerate(data):
        for j in range(4):
            idx = i * 4 + j
            if idx >= total:
                return board
            board.cells[idx] = _BITS_TO_CELL.get((value >> (j * 2)) & 0x3, EMPTY)
    return board
