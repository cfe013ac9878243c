"""Tests for ANSI color helpers."""

from fstree.helpers.ansi import ANSI, ansi


def test_single_code():
    assert ansi("file.txt", ANSI.BRIGHT_WHITE) == "\x1b[97mfile.txt\x1b[0m"


def test_multiple_codes():
    assert ansi(" src ", ANSI.BOLD, ANSI.BG_YELLOW) == "\x1b[1;43m src \x1b[0m"


def test_codes_are_sgr_values():
    assert ANSI.RESET == 0
    assert ANSI.BRIGHT_CYAN == 96
    assert ANSI.BG_YELLOW == 43
