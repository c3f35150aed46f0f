"""I/O helpers for reading raw puzzle text from streams."""

from typing import TextIO


def read_puzzle_text(stream: TextIO, minimum: int = 81) -> str:
    """
    Read whole lines from `stream` until at least `minimum` non-whitespace
    characters arrived or it ends. Whitespace between symbols does not count.
    """
    chunks = []
    total = 0
    while total < minimum:
        line = stream.readline()
        if not line:
            break
        chunks.append(line)
        total += sum(1 for ch in line if not ch.isspace())
    return "".join(chunks)
