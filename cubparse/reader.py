"""Reading the lines of a scene file, skipping blank lines.

Blank lines before the map grid are ignored. The first blank line after the
grid has begun ends the grid, and nothing after it is read.
"""

from __future__ import annotations

import os

from cubparse.components import is_identifier_line
from cubparse.errors import MapError
from cubparse.linereader import LineReader
from cubparse.strings import split


def is_blank_line(line: str) -> bool:
    """True when ``line`` holds only spaces before its newline."""
    return line.lstrip(" ").startswith("\n")


def is_map_content(line: str) -> bool:
    """True when ``line`` is neither blank nor a header identifier line."""
    if is_blank_line(line):
        return False
    rest = line.lstrip(" ")
    if not rest:
        return False
    return not is_identifier_line(rest)


def read_map_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the non-blank lines of the scene file at ``path``, without newlines.

    Raises :class:`MapError` when the file cannot be opened or holds nothing.
    """
    try:
        handle = open(path, encoding="utf-8", errors="replace", newline="")
    except OSError:
        raise MapError("Error in Filemap") from None
    collected: list[str] = []
    in_map = False
    with handle:
        for line in LineReader(handle):
            if not in_map and is_map_content(line):
                in_map = True
            if is_blank_line(line):
                if in_map:
                    break
                continue
            collected.append(line)
    text = "".join(collected)
    if not text:
        raise MapError("Map Empty!")
    return split(text, "\n")