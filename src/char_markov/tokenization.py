from __future__ import annotations

from typing import Iterator

from .streams import CharacterSource


def read_window(source: CharacterSource, n: int) -> str:
    """Read up to `n` characters; shorter only when the source runs out."""

    chars: list[str] = []
    while len(chars) < n and source.has_next():
        chars.append(source.read_char())
    return "".join(chars)


def iter_transitions(source: CharacterSource, n: int) -> Iterator[tuple[str, str]]:
    """Slide an `n`-character window over `source`.

    Yields `(context, next_char)` for every character after the first window.
    Yields nothing when the source holds fewer than `n` characters.
    """

    if n <= 0:
        raise ValueError("n must be >= 1")

    window = read_window(source, n)
    if len(window) < n:
        return

    while source.has_next():
        c = source.read_char()
        yield window, c
        window = window[1:] + c

