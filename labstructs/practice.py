"""Small exercises: prepending, dictionary lookup and filtering."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from labstructs.linked_list import LinkedList

NOT_FOUND = "Not found"


def prepend_all(values: Iterable[Any]) -> list[Any]:
    """Insert each value at the front in turn; return the resulting order."""
    items = LinkedList()
    for value in values:
        items.insert(value)
    return list(items)


def lookup(
    definitions: Iterable[tuple[str, str]], queries: Iterable[str]
) -> Iterator[str]:
    """Yield the definition of each query, or ``"Not found"``.

    When a word is defined more than once, its first definition wins.
    """
    table: dict[str, str] = {}
    for word, definition in definitions:
        table.setdefault(word, definition)
    for query in queries:
        yield table.get(query, NOT_FOUND)


def below(values: Iterable[Any], threshold: Any) -> list[Any]:
    """Return the values smaller than ``threshold``, keeping their order."""
    return [value for value in values if value < threshold]


class _Tokens:
    """Whitespace-separated tokens read one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def count(self) -> int:
        number = self.integer()
        if number < 0:
            raise ValueError(f"count cannot be negative: {number}")
        return number

    def rest(self) -> list[str]:
        return list(self._tokens)


def _run_prepend(tokens: _Tokens) -> str:
    count = tokens.count()
    values = [tokens.integer() for _ in range(count)]
    return "".join(f"{value} " for value in prepend_all(values)) + "\n"


def _run_lookup(tokens: _Tokens) -> str:
    count = tokens.count()
    definitions = [(tokens.word(), tokens.word()) for _ in range(count)]
    return "".join(f"{answer}\n" for answer in lookup(definitions, tokens.rest()))


def _run_below(tokens: _Tokens) -> str:
    count = tokens.count()
    values = [tokens.integer() for _ in range(count)]
    threshold = tokens.integer()
    return "".join(f"{value} " for value in below(values, threshold))


_COMMANDS = {
    "prepend": (_run_prepend, "read N then N integers; print them front-inserted"),
    "lookup": (_run_lookup, "read N word/definition pairs, then answer queries"),
    "below": (_run_below, "read N then N integers then K; print those below K"),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the exercises on whitespace-separated input."""
    parser = argparse.ArgumentParser(description="Small data exercises.")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, summary) in _COMMANDS.items():
        sub = commands.add_parser(name, help=summary)
        sub.add_argument(
            "input",
            nargs="?",
            type=argparse.FileType("r"),
            default="-",
            help="input file (standard input by default)",
        )
    args = parser.parse_args(argv)
    run, _ = _COMMANDS[args.command]
    with args.input as stream:
        tokens = _Tokens(stream.read())
    try:
        output = run(tokens)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())