"""Console output and keyboard input: cursor moves, colours, key reads."""

from __future__ import annotations

import sys
import time
from enum import IntEnum
from typing import Iterable, Iterator, TextIO


class Color(IntEnum):
    """Console colour indices: bit 0 blue, bit 1 green, bit 2 red, bit 3 bright."""

    BLACK = 0
    AQUA = 3
    RED = 4
    WHITE = 7
    GRAY = 8


def _ansi_code(color: int, base: int) -> int:
    value = int(color)
    if not 0 <= value <= 15:
        raise ValueError(f"colour index must be between 0 and 15, got {color!r}")
    index = (value & 1) << 2 | (value & 2) | (value & 4) >> 2
    return base + index + (60 if value & 8 else 0)


def read_console_key() -> str:
    """Read a single key press from the console without waiting for Enter."""
    if sys.platform == "win32":
        import msvcrt

        return msvcrt.getwch()

    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class Terminal:
    """A text screen addressed by column and row.

    ``keys`` scripts the key presses; without it keys are read from the console.
    """

    def __init__(self, stream: TextIO | None = None, keys: Iterable[str] | None = None):
        self.stream = stream if stream is not None else sys.stdout
        self._keys: Iterator[str] | None = iter(keys) if keys is not None else None

    def goto(self, x: int, y: int) -> None:
        """Move the cursor to column ``x`` and row ``y``, both counted from 0."""
        if x < 0 or y < 0:
            raise ValueError(f"cursor position must not be negative, got ({x}, {y})")
        self.write(f"\x1b[{y + 1};{x + 1}H")

    def set_color(self, background: int, foreground: int) -> None:
        """Select the background and text colours for what is written next."""
        fg = _ansi_code(foreground, 30)
        bg = _ansi_code(background, 40)
        self.write(f"\x1b[{fg};{bg}m")

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def clear(self) -> None:
        """Blank the screen and put the cursor in the top-left corner."""
        self.write("\x1b[2J\x1b[H")

    def read_key(self) -> str:
        """Return the next key press; EOFError when scripted keys run out."""
        if self._keys is None:
            return read_console_key()
        try:
            return next(self._keys)
        except StopIteration:
            raise EOFError("no more keys") from None

    def beep(self) -> None:
        self.write("\a")

    def pause(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("pause length must not be negative")
        if seconds:
            time.sleep(seconds)