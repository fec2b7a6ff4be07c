"""Checking that the map grid is enclosed by walls."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cubparse.errors import MapError

_SOLID = frozenset("01NSWE")
_BORDER = frozenset("1 \t")


def is_open_cell(char: str) -> bool:
    """True when ``char`` is not floor, wall or player (outside the grid is ``""``)."""
    return char not in _SOLID


def _cell(rows: Sequence[str], y: int, x: int) -> str:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return ""


def _check_border_row(row: str) -> None:
    if any(char not in _BORDER for char in row):
        raise MapError("Map not Closed!!")


def check_map_closed(rows: Iterable[str]) -> tuple[str, ...]:
    """Validate that the grid is closed and return its rows.

    The first and last rows may hold only walls and blanks. Every other
    cell that is not a wall or blank must have floor, wall or player on
    all four sides.
    """
    grid = tuple(rows)
    if not grid:
        raise MapError("Error Map missing or too small")
    _check_border_row(grid[0])
    for y, row in enumerate(grid[1:-1], start=1):
        for x, char in enumerate(row):
            if char in _BORDER:
                continue
            neighbours = ((y - 1, x), (y + 1, x), (y, x + 1), (y, x - 1))
            if any(is_open_cell(_cell(grid, ny, nx)) for ny, nx in neighbours):
                raise MapError("Map not closed !!")
    _check_border_row(grid[-1])
    return grid