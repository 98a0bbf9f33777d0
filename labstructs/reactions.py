"""Find every substance obtainable from a starting one through given reactions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Mapping, Sequence

from labstructs.fifo import Queue

_ARROW = "->"


def parse_reaction(text: str) -> tuple[str, str]:
    """Split ``"A->B"`` into its source and product substances."""
    source, arrow, product = text.partition(_ARROW)
    if not arrow:
        raise ValueError(f"reaction {text!r} has no {_ARROW!r}")
    return source, product


def build_reactions(lines: Iterable[str]) -> dict[str, set[str]]:
    """Map each substance to the set of substances it reacts into.

    Each line may hold several whitespace-separated reactions.
    """
    reactions: dict[str, set[str]] = {}
    for line in lines:
        for token in line.split():
            source, product = parse_reaction(token)
            reactions.setdefault(source, set()).add(product)
    return reactions


def reachable(start: str, reactions: Mapping[str, Iterable[str]]) -> list[str]:
    """Return the substances reachable from ``start``, in breadth-first order.

    ``start`` itself is never part of the result. Products of one substance
    are visited in sorted order so that the result is deterministic.
    """
    queue = Queue([start])
    visited = {start}
    found: list[str] = []
    while queue:
        current = queue.remove()
        for product in sorted(reactions.get(current, ())):
            if product not in visited:
                visited.add(product)
                found.append(product)
                queue.insert(product)
    return found


def main(argv: Sequence[str] | None = None) -> int:
    """Read a start substance and reactions, print what can be produced."""
    parser = argparse.ArgumentParser(
        description="List substances reachable from a start substance."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default="-",
        help="file holding the start substance followed by reactions A->B",
    )
    args = parser.parse_args(argv)
    with args.input as stream:
        tokens = stream.read().split()
    if not tokens:
        return 0
    start, *rest = tokens
    try:
        reactions = build_reactions(rest)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    result = reachable(start, reactions)
    sys.stdout.write("".join(f"{substance} " for substance in result) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())