"""Small demonstration of the circular list operations."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

from circlist.linkedlist import CircularList


def build_demo_list() -> CircularList:
    """Append 5 down to 1, then remove the value 3."""
    demo = CircularList()
    for value in (5, 4, 3, 2, 1):
        demo.push_back(value)
    demo.remove(3)
    return demo


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="circlist-demo",
        description="Build a small circular list and print it.",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the demonstration list and return an exit status."""
    parser = _build_parser()
    parser.parse_args(list(argv) if argv is not None else None)
    demo = build_demo_list()
    print(demo.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())