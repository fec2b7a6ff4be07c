"""Character classes of the map grid, header identifiers and player lookup."""

from __future__ import annotations

from collections.abc import Iterable

from cubparse.errors import MapError

IDENTIFIERS = ("NO ", "SO ", "WE ", "EA ", "F ", "C ")
PLAYER_CHARS = frozenset("NSWE")
MAP_CHARS = frozenset(" \t01") | PLAYER_CHARS


def is_foreign(char: str) -> bool:
    """True when ``char`` may not appear in the map grid."""
    return char not in MAP_CHARS


def is_identifier_line(line: str) -> bool:
    """True when ``line`` starts with a texture or colour identifier."""
    return line.startswith(IDENTIFIERS)


def find_player(rows: Iterable[str]) -> tuple[int, int]:
    """Return the ``(row, column)`` of the single player in the grid.

    Raises :class:`MapError` when the grid holds six or fewer map
    characters, or when there is not exactly one player.
    """
    map_chars = 0
    players = 0
    position = (-1, -1)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if not is_foreign(char):
                map_chars += 1
            if char in PLAYER_CHARS:
                players += 1
                position = (y, x)
    if map_chars <= 6:
        raise MapError("Error Map missing or too small")
    if players != 1:
        raise MapError("A single player must be on the map.!")
    return position