"""Command line entry point: validate a scene file and print it."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cubparse.errors import MapError
from cubparse.parser import CubMap, parse

VALID_BANNER = "\n-- VALID MAP -- \n"


def format_map(cub_map: CubMap) -> str:
    """Render every line of the scene followed by the validity banner."""
    return "".join(f"{line}\n" for line in cub_map.lines) + VALID_BANNER


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the single scene file named on the command line.

    Returns 0 on success and 1 on a usage or validation error.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    try:
        cub_map = parse(args[0])
    except MapError as error:
        print(error, file=sys.stderr)
        return 1
    sys.stdout.write(format_map(cub_map))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())