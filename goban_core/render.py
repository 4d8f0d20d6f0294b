from __future__ import annotations

from typing import Protocol

from .board import Board


class Renderer(Protocol):
    """Draws a board. Must be a pure function of the board contents."""

    def render(self, board: Board) -> str:
        ...


class TextRenderer:
    """Renders boards as monospace text: X for black, O for white, + for star points."""

    def __init__(self, show_coords: bool = True, show_stars: bool = True) -> None:
        self.show_coords = show_coords
        self.show_stars = show_stars

    def render(self, board: Board) -> str:
        return board.pretty(show_coords=self.show_coords, show_stars=self.show_stars)
