"""Width-limited line splitting.

WidthLineSplitter reads text one source line at a time and yields lines
of at most max_width code points. It wraps at the last ASCII whitespace
that fits and hard-cuts when there is none, which is the only option for
scripts written without spaces.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from svg_text2symbols.exceptions import InvalidWidthError

# WHATWG "ASCII whitespace"; vertical tab is not included.
ASCII_WHITESPACE = " \t\n\f\r"


def split_line(line: str, max_width: int) -> tuple[str, str]:
    """Split one over-long line into (head, remainder).

    The head is at most max_width code points. When a whitespace wrap
    point exists the whitespace is dropped from both sides of the cut;
    a hard cut keeps every character.

    Whitespace at position 0, or whitespace preceded only by other
    whitespace, is not a wrap point: using it would emit an empty line.
    Such lines are hard-cut instead, so leading indentation is kept
    ("   abcdefgh" at width 5 gives "   ab" and "cdefgh").
    """
    if len(line) <= max_width:
        return line, ""

    window = line[:max_width]
    # Position 0 is not a wrap point: it would produce an empty line.
    for idx in range(len(window) - 1, 0, -1):
        if window[idx] in ASCII_WHITESPACE:
            head = window[:idx].rstrip(ASCII_WHITESPACE)
            if head:
                return head, line[idx:].lstrip(ASCII_WHITESPACE)
            break

    return window, line[max_width:]


class WidthLineSplitter:
    """Lazy, single-pass iterator of width-bounded lines.

    Args:
        source: A text stream, any iterable of lines, or a plain string.
        max_width: Maximum code points per output line; must be positive.

    Raises:
        InvalidWidthError: Immediately, before any input is read, when
            max_width is not positive.
    """

    def __init__(self, source: TextIO | Iterable[str] | str, max_width: int) -> None:
        if max_width <= 0:
            raise InvalidWidthError(max_width)
        self.max_width = max_width
        if isinstance(source, str):
            source = io.StringIO(source)
        self._lines: Iterator[str] = iter(source)
        self._pending: str | None = None
        self._exhausted = False

    def __iter__(self) -> WidthLineSplitter:
        return self

    def __next__(self) -> str:
        if self._pending is None:
            if self._exhausted:
                raise StopIteration
            raw = next(self._lines, None)
            if raw is None:
                self._exhausted = True
                raise StopIteration
            self._pending = raw.rstrip("\r\n")

        if len(self._pending) > self.max_width:
            head, rest = split_line(self._pending, self.max_width)
            # A wrap that only left whitespace behind ends the source line.
            self._pending = rest or None
            return head

        line, self._pending = self._pending, None
        return line


def split_text(text: str, max_width: int) -> list[str]:
    """Eagerly split a string; convenience wrapper over WidthLineSplitter."""
    return list(WidthLineSplitter(text, max_width))


def read_lines(path: Path | str, max_width: int | None = None) -> list[str]:
    """Read a text file as lines, width-wrapped when max_width is given.

    Raises:
        FileNotFoundError: If the path is missing or not a regular file.
        InvalidWidthError: If max_width is given and not positive.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"{path}: doesn't exist or is not a regular file")
    if max_width is not None and max_width <= 0:
        raise InvalidWidthError(max_width)

    with path.open(encoding="utf-8", newline="\n") as f:
        if max_width is None:
            return [line.rstrip("\r\n") for line in f]
        return list(WidthLineSplitter(f, max_width))
