"""Cross-platform single-keypress reader for CLI frontends.

Handles arrow keys, WASD, and special keys without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    action = _KEY_MAP.get(ch.lower() if ch.isalpha() else ch)
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


def resolve_escape(rest: str) -> str:
    """Map the bytes that followed an ESC to an action."""
    if not rest:
        return "quit"  # bare Escape
    if rest[0] == "[" and len(rest) > 1:
        return _ARROW_MAP.get(rest[1], "")
    return ""


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            return resolve_escape(ch2 + _getch())
        return resolve_escape("")

    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress, or return ``None`` after *timeout* seconds.

    Uses ``os.read`` (unbuffered) so ``select`` sees the remaining bytes of
    multi-byte escape sequences.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def pending(wait: float) -> str:
        ready, _, _ = select.select([fd], [], [], wait)
        return os.read(fd, 1).decode("utf-8", errors="ignore") if ready else ""

    try:
        tty.setraw(fd)
        ch = pending(timeout)
        if not ch:
            return None
        if ch == "\x1b":
            rest = pending(0.1)
            if rest == "[":
                rest += pending(0.1)
            return resolve_escape(rest)
        return resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
