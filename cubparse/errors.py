"""Exceptions raised when a scene description is rejected."""

from __future__ import annotations


class MapError(Exception):
    """A scene file or its map failed validation."""


class ColorError(MapError):
    """A floor or ceiling colour line is missing or malformed.

    ``kind`` is ``"F"`` for the floor; any other value means the ceiling.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        surface = "Floor" if kind == "F" else "Ceiling"
        super().__init__(f"{surface} RGB colors !!")