"""Validation of the six header lines: textures and floor/ceiling colours."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from cubparse.chars import is_digit
from cubparse.components import IDENTIFIERS, is_identifier_line
from cubparse.errors import ColorError, MapError
from cubparse.strings import split

HEADER_LINES = 6
TEXTURE_IDENTIFIERS = ("NO ", "SO ", "WE ", "EA ")
_WHITESPACE = " \t\n\v\f\r"
_CHANNEL_MAX = 255


def parse_channel(text: str) -> int:
    """Parse one colour channel in the range 0..255.

    Leading whitespace is skipped and parsing stops at the first non-digit.
    A sign or a value above 255 raises ``ValueError``.
    """
    rest = text.lstrip(_WHITESPACE)
    if rest[:1] in ("-", "+"):
        raise ValueError(f"colour channel may not be signed: {text!r}")
    result = 0
    for char in rest:
        if not is_digit(char):
            break
        result = result * 10 + int(char)
        if result > _CHANNEL_MAX:
            raise ValueError(f"colour channel above {_CHANNEL_MAX}: {text!r}")
    return result


def _identifier_of(line: str) -> str | None:
    return next((prefix for prefix in IDENTIFIERS if line.startswith(prefix)), None)


def check_textures_colors(lines: Sequence[str]) -> dict[str, str]:
    """Check that the first six lines hold each identifier exactly once.

    Returns a mapping from identifier (``"NO"``, ``"F"``, ...) to its line.
    """
    counts: Counter[str] = Counter()
    found: dict[str, str] = {}
    stray = 0
    for line in lines[:HEADER_LINES]:
        prefix = _identifier_of(line)
        if prefix is None:
            stray += 1
            continue
        counts[prefix] += 1
        found.setdefault(prefix.strip(), line)
    following = lines[HEADER_LINES] if len(lines) > HEADER_LINES else None
    if any(counts[prefix] != 1 for prefix in IDENTIFIERS) or (
        following is not None and is_identifier_line(following)
    ):
        raise MapError("Missing or duplicated texture or RGB colors")
    if stray:
        raise MapError("Map before/mid info map !!")
    return found


def check_xpm_path(line: str) -> str:
    """Check that a texture line names a ``.xpm`` file and return the path."""
    stem_end = len(line) - 4
    if stem_end >= 1 and line[stem_end - 1] == " ":
        raise MapError("Filename must end with .xpm")
    if stem_end < 0 or line[stem_end:] != ".xpm":
        raise MapError("Filename must end with .xpm !")
    return line[3:].lstrip(" \t")


def check_xpm_textures(lines: Sequence[str]) -> dict[str, str]:
    """Check every texture line among the header lines.

    Returns a mapping from texture identifier to its path.
    """
    paths: dict[str, str] = {}
    for line in lines[:HEADER_LINES]:
        if line.startswith(TEXTURE_IDENTIFIERS):
            paths[line[:2]] = check_xpm_path(line)
    return paths


def _check_rgb_value(value: str, kind: str) -> int:
    if any(not is_digit(char) and char not in " \t" for char in value):
        raise ColorError(kind)
    try:
        return parse_channel(value)
    except ValueError:
        raise ColorError(kind) from None


def parse_rgb(lines: Sequence[str], key: str) -> int:
    """Parse the colour line for ``key`` (``"F"`` or ``"C"``) into ``0xRRGGBB``.

    Raises :class:`ColorError` when the line is missing or malformed.
    """
    if key not in ("F", "C"):
        raise ValueError(f"unknown colour identifier: {key!r}")
    prefix = key + " "
    line = next((candidate for candidate in lines if candidate.startswith(prefix)), None)
    if line is None or line.count(",") != 2:
        raise ColorError(key)
    channels = [_check_rgb_value(part, key) for part in split(line[2:], ",")]
    if len(channels) != 3:
        raise ColorError(key)
    red, green, blue = channels
    return (red << 16) + (green << 8) + blue