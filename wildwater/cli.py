"""Command-line entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Echo the command-line arguments and return 0."""
    args = list(sys.argv[1:] if argv is None else argv)
    print(f"wildwater lancé avec {len(args)} arguments :")
    for index, arg in enumerate(args, start=1):
        print(f"  arg[{index}] = {arg}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())