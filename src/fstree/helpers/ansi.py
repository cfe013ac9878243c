"""ANSI escape sequences for colored terminal output."""

from enum import IntEnum

ESCAPE = "\x1b"


class ANSI(IntEnum):
    """SGR codes for text styling."""

    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47

    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97


def ansi(text: str, *codes: ANSI) -> str:
    """Wrap ``text`` in the given SGR codes followed by a reset.

    Example:
        >>> ansi("src", ANSI.BOLD, ANSI.BG_YELLOW)
        '\\x1b[1;43msrc\\x1b[0m'
    """
    joined = ";".join(str(int(code)) for code in codes)
    return f"{ESCAPE}[{joined}m{text}{ESCAPE}[{int(ANSI.RESET)}m"
