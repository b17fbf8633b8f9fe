"""Interactive terminal search over the lines of a text file."""

from __future__ import annotations

import sys
from itertools import islice
from typing import Sequence

from blessed import Terminal

from .lookalikes import all_lookalikes
from .tree import Searcher, SearchTree

PROMPT = "> "
N_LINES = 10

_INTERRUPT = "\x03"


def read_lines(path: str) -> list[str]:
    """Return the lines of the UTF-8 file at ``path`` without line endings.

    Lines are split on ``\\n``; a trailing ``\\r`` is removed from each line.
    """
    with open(path, encoding="utf-8", newline="") as file:
        text = file.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _build_searcher(lines: Sequence[str]) -> Searcher:
    tree = SearchTree.from_items(enumerate(lines))
    return Searcher(tree, all_lookalikes)


def _visible_matches(
    searcher: Searcher, lines: Sequence[str], limit: int = N_LINES
) -> list[str]:
    """Return at most ``limit`` lines that the current input may refer to."""
    return [lines[i] for i in islice(searcher.candidates(), limit)]


def _handle_key(term: Terminal, searcher: Searcher, key) -> bool | None:
    """Apply a keypress; return False to stop, True to redraw, None to ignore."""
    if key.is_sequence:
        if key.code == term.KEY_ESCAPE:
            return False
        if key.code in (term.KEY_BACKSPACE, term.KEY_DELETE):
            searcher.pop()
            return True
        return None
    text = str(key)
    if not text:
        return None
    if text == _INTERRUPT:
        return False
    if text.isprintable():
        searcher.extend(text)
        return True
    return None


def _redraw(term: Terminal, searcher: Searcher, lines: Sequence[str]) -> None:
    shown = _visible_matches(searcher, lines)
    parts = [term.move_x(0), term.clear_eos, PROMPT, searcher.input]
    for line in shown:
        parts.append("\r\n")
        parts.append(line)
    if shown:
        parts.append(term.move_up(len(shown)))
    parts.append(term.move_x(len(PROMPT) + len(searcher.input)))
    print("".join(parts), end="", flush=True)


def _interact(term: Terminal, lines: Sequence[str]) -> None:
    searcher = _build_searcher(lines)
    with term.raw():
        print("\r\n" * (N_LINES + 1), end="")
        print(term.move_up(N_LINES + 1) + term.move_x(0) + PROMPT, end="", flush=True)
        while True:
            key = term.inkey()
            action = _handle_key(term, searcher, key)
            if action is False:
                break
            if action:
                _redraw(term, searcher, lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive search; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide the name of the file to read lines from", file=sys.stderr)
        return 1
    filename = args[0]
    try:
        lines = read_lines(filename)
    except UnicodeDecodeError as exc:
        print(f"Failed to read the contents of {filename!r}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Failed to open {filename!r}: {exc}", file=sys.stderr)
        return 1

    try:
        _interact(Terminal(), lines)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())