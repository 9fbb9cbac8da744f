"""Command that prints the moves sorting its numeric arguments."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import ParseError
from pushswap.sort import push_swap


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line, or ``Error`` when the arguments are invalid."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        moves = push_swap(args)
    except ParseError:
        sys.stdout.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())