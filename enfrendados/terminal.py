"""Console helpers: colours, cursor control, screen clearing and key input."""

from __future__ import annotations

import os
import struct
import sys
import time
from collections.abc import Iterable
from enum import IntEnum
from types import TracebackType

_WINDOWS = sys.platform == "win32"

if _WINDOWS:
    import msvcrt
else:
    import fcntl
    import select
    import termios


class Color(IntEnum):
    """Console colour numbers (Windows / QBasic palette)."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    GREY = 7
    DARKGREY = 8
    LIGHTBLUE = 9
    LIGHTGREEN = 10
    LIGHTCYAN = 11
    LIGHTRED = 12
    LIGHTMAGENTA = 13
    YELLOW = 14
    WHITE = 15


class Key(IntEnum):
    """Key codes returned by :func:`getkey`."""

    ESCAPE = 0
    ENTER = 1
    SPACE = 32

    INSERT = 2
    HOME = 3
    PGUP = 4
    DELETE = 5
    END = 6
    PGDOWN = 7

    UP = 14
    DOWN = 15
    LEFT = 16
    RIGHT = 17

    F1 = 18
    F2 = 19
    F3 = 20
    F4 = 21
    F5 = 22
    F6 = 23
    F7 = 24
    F8 = 25
    F9 = 26
    F10 = 27
    F11 = 28
    F12 = 29

    NUMDEL = 30
    NUMPAD0 = 31
    NUMPAD1 = 127
    NUMPAD2 = 128
    NUMPAD3 = 129
    NUMPAD4 = 130
    NUMPAD5 = 131
    NUMPAD6 = 132
    NUMPAD7 = 133
    NUMPAD8 = 134
    NUMPAD9 = 135


ANSI_CLS = "\033[2J\033[3J"
ANSI_CONSOLE_TITLE_PRE = "\033]0;"
ANSI_CONSOLE_TITLE_POST = "\007"
ANSI_ATTRIBUTE_RESET = "\033[0m"
ANSI_CURSOR_HIDE = "\033[?25l"
ANSI_CURSOR_SHOW = "\033[?25h"
ANSI_CURSOR_HOME = "\033[H"

_FOREGROUND = {
    Color.BLACK: "\033[22;30m",
    Color.RED: "\033[22;31m",
    Color.GREEN: "\033[22;32m",
    Color.BROWN: "\033[22;33m",
    Color.BLUE: "\033[22;34m",
    Color.MAGENTA: "\033[22;35m",
    Color.CYAN: "\033[22;36m",
    Color.GREY: "\033[22;37m",
    Color.DARKGREY: "\033[01;30m",
    Color.LIGHTRED: "\033[01;31m",
    Color.LIGHTGREEN: "\033[01;32m",
    Color.YELLOW: "\033[01;33m",
    Color.LIGHTBLUE: "\033[01;34m",
    Color.LIGHTMAGENTA: "\033[01;35m",
    Color.LIGHTCYAN: "\033[01;36m",
    Color.WHITE: "\033[01;37m",
}

# Only the first eight colours have a background counterpart.
_BACKGROUND = {
    Color.BLACK: "\033[40m",
    Color.RED: "\033[41m",
    Color.GREEN: "\033[42m",
    Color.BROWN: "\033[43m",
    Color.BLUE: "\033[44m",
    Color.MAGENTA: "\033[45m",
    Color.CYAN: "\033[46m",
    Color.GREY: "\033[47m",
}

_NUMPAD_KEYS = {
    71: Key.NUMPAD7,
    72: Key.NUMPAD8,
    73: Key.NUMPAD9,
    75: Key.NUMPAD4,
    77: Key.NUMPAD6,
    79: Key.NUMPAD1,
    80: Key.NUMPAD2,
    81: Key.NUMPAD3,
    82: Key.NUMPAD0,
    83: Key.NUMDEL,
}

_EXTENDED_KEYS = {
    71: Key.HOME,
    72: Key.UP,
    73: Key.PGUP,
    75: Key.LEFT,
    77: Key.RIGHT,
    79: Key.END,
    80: Key.DOWN,
    81: Key.PGDOWN,
    82: Key.INSERT,
    83: Key.DELETE,
}

_ARROW_KEYS = {
    ord("A"): Key.UP,
    ord("B"): Key.DOWN,
    ord("C"): Key.RIGHT,
    ord("D"): Key.LEFT,
}

_ESC = 27
_CSI = 155


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def ansi_color(color: int) -> str:
    """Return the escape sequence for a foreground colour, or "" if unknown."""
    try:
        return _FOREGROUND[Color(color)]
    except ValueError:
        return ""


def ansi_background_color(color: int) -> str:
    """Return the escape sequence for a background colour, or "" if unsupported."""
    try:
        return _BACKGROUND.get(Color(color), "")
    except ValueError:
        return ""


def set_color(color: int) -> None:
    """Change the foreground colour."""
    _write(ansi_color(color))


def set_background_color(color: int) -> None:
    """Change the background colour."""
    _write(ansi_background_color(color))


def reset_color() -> None:
    """Reset all colour attributes to the terminal default."""
    _write(ANSI_ATTRIBUTE_RESET)


def cls() -> None:
    """Clear the screen and move the cursor home."""
    _write(ANSI_CLS + ANSI_CURSOR_HOME)


def locate(x: int, y: int) -> None:
    """Move the cursor to the 1-based column x and row y."""
    _write(f"\033[{y};{x}H")


def set_string(text: str) -> None:
    """Print text without advancing the cursor."""
    _write(f"{text}\033[{len(text)}D")


def set_char(ch: str) -> None:
    """Print one character without advancing the cursor."""
    if len(ch) != 1:
        raise ValueError("set_char expects exactly one character")
    set_string(ch)


def set_cursor_visibility(visible: bool) -> None:
    """Show or hide the cursor."""
    _write(ANSI_CURSOR_SHOW if visible else ANSI_CURSOR_HIDE)


def hide_cursor() -> None:
    """Hide the cursor."""
    set_cursor_visibility(False)


def show_cursor() -> None:
    """Show the cursor."""
    set_cursor_visibility(True)


def set_console_title(title: str) -> None:
    """Set the terminal window title."""
    _write(ANSI_CONSOLE_TITLE_PRE + title + ANSI_CONSOLE_TITLE_POST)


def msleep(ms: int) -> None:
    """Wait the given number of milliseconds."""
    if ms < 0:
        raise ValueError("sleep length must be non-negative")
    time.sleep(ms / 1000)


def _terminal_size() -> os.terminal_size | None:
    for fd in (0, 1):
        try:
            return os.get_terminal_size(fd)
        except (OSError, ValueError):
            continue
    return None


def trows() -> int:
    """Number of rows in the terminal, or -1 if it cannot be determined."""
    size = _terminal_size()
    return size.lines if size is not None else -1


def tcols() -> int:
    """Number of columns in the terminal, or -1 if it cannot be determined."""
    size = _terminal_size()
    return size.columns if size is not None else -1


def _stdin_fd() -> int | None:
    try:
        return sys.stdin.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _is_tty(fd: int | None) -> bool:
    return fd is not None and os.isatty(fd)


def getch() -> int:
    """Read one character code without waiting for Return; -1 at end of input."""
    fd = _stdin_fd()
    if not _is_tty(fd):
        ch = sys.stdin.read(1)
        if not ch:
            return -1
        return ch[0] if isinstance(ch, bytes) else ord(ch)
    if _WINDOWS:
        return msvcrt.getch()[0]
    old = termios.tcgetattr(fd)
    new = list(old)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)
    return data[0] if data else -1


def _pending_bytes(fd: int) -> int:
    try:
        raw = fcntl.ioctl(fd, termios.FIONREAD, b"\0\0\0\0")
        return struct.unpack("i", raw)[0]
    except OSError:
        ready, _, _ = select.select([fd], [], [], 0)
        return 1 if ready else 0


def kbhit() -> int:
    """Return how many characters are waiting to be read (0 if none)."""
    fd = _stdin_fd()
    if fd is None:
        return 0
    if _WINDOWS:
        return int(msvcrt.kbhit()) if _is_tty(fd) else 0
    if not os.isatty(fd):
        return _pending_bytes(fd)
    old = termios.tcgetattr(fd)
    new = list(old)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        count = _pending_bytes(fd)
        select.select([], [], [], 0.0001)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)
    return count


def nb_getch() -> int:
    """Read a character if one is waiting, otherwise return 0."""
    return getch() if kbhit() else 0


def translate_key(codes: Iterable[int]) -> int:
    """Turn the raw character codes of one key press into a key code."""
    seq = list(codes)
    if not seq:
        raise ValueError("no key codes to translate")
    first = seq[0]
    if first in (0, 224):
        if len(seq) < 2:
            raise ValueError("extended key code is missing its second byte")
        second = seq[1]
        if first == 0:
            return _NUMPAD_KEYS.get(second, second - 59 + Key.F1)
        return _EXTENDED_KEYS.get(second, second - 123 + Key.F1)
    if first == 13:
        return Key.ENTER
    if first in (_ESC, _CSI):
        if len(seq) >= 3 and seq[1] == ord("["):
            return _ARROW_KEYS.get(seq[2], seq[2])
        return Key.ESCAPE
    return first


def getkey() -> int:
    """Block until a key is pressed and return its key code."""
    pending = 0 if _WINDOWS else kbhit()
    first = getch()
    if first in (0, 224):
        return translate_key([first, getch()])
    if first in (_ESC, _CSI):
        if _WINDOWS:
            return Key.ESCAPE if first == _ESC else first
        if pending >= 3:
            second = getch()
            if second == ord("["):
                return translate_key([first, second, getch()])
        return Key.ESCAPE
    return translate_key([first])


def anykey(message: str | None = None) -> None:
    """Optionally print a message, then wait for any key."""
    if message:
        _write(message)
    getch()


class CursorHider:
    """Context manager that hides the cursor and shows it again on exit."""

    def __enter__(self) -> CursorHider:
        hide_cursor()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        show_cursor()