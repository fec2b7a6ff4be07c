"""Parsing and validating a complete scene description file."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field

from cubparse.components import find_player, is_foreign, is_identifier_line
from cubparse.errors import MapError
from cubparse.header import (
    HEADER_LINES,
    check_textures_colors,
    check_xpm_textures,
    parse_rgb,
)
from cubparse.reader import read_map_lines
from cubparse.walls import check_map_closed

SCENE_SUFFIX = ".cub"


@dataclass(frozen=True)
class CubMap:
    """A validated scene: header lines, textures, colours and the map grid."""

    lines: tuple[str, ...]
    textures: dict[str, str] = field(default_factory=dict)
    floor_color: int = 0
    ceiling_color: int = 0
    player: tuple[int, int] = (-1, -1)
    height: int = 0
    width: int = 0

    @property
    def grid(self) -> tuple[str, ...]:
        """The map rows that follow the six header lines."""
        return self.lines[HEADER_LINES:]


def strip_header_indent(lines: Sequence[str]) -> list[str]:
    """Remove leading blanks from the six header lines.

    Lines holding nothing but blanks, and all lines after the header, are
    left as they are.
    """
    result = list(lines)
    for index, line in enumerate(result[:HEADER_LINES]):
        stripped = line.lstrip(" \t")
        if stripped:
            result[index] = stripped
    return result


def check_components(lines: Sequence[str]) -> tuple[str, ...]:
    """Reject any non-identifier line holding a character foreign to the map."""
    for line in lines:
        if not is_identifier_line(line) and any(is_foreign(char) for char in line):
            raise MapError("Error: wrong arguments in map")
    return tuple(lines)


def parse(path: str | os.PathLike[str]) -> CubMap:
    """Read and validate the scene file at ``path``.

    Raises :class:`MapError` (or its subclass ``ColorError``) on the first
    problem found.
    """
    name = os.fsdecode(path)
    if not name.endswith(SCENE_SUFFIX):
        raise MapError("filename must end with .cub")
    lines = strip_header_indent(read_map_lines(name))
    check_components(lines)
    check_textures_colors(lines)
    textures = check_xpm_textures(lines)
    ceiling = parse_rgb(lines, "C")
    floor = parse_rgb(lines, "F")
    grid = lines[HEADER_LINES:]
    player = find_player(grid)
    check_map_closed(grid)
    return CubMap(
        lines=tuple(lines),
        textures=textures,
        floor_color=floor,
        ceiling_color=ceiling,
        player=player,
        height=len(grid),
        width=max((len(row) for row in grid), default=0),
    )