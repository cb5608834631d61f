"""Small text and arithmetic helpers shared by the prompts and the commit builder."""

from __future__ import annotations

import re
from collections.abc import Iterator

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def arithmetic_mod(value: int, mod: int) -> int:
    """Return the remainder of value / mod, shifted into range when it is negative."""
    remainder = abs(value) % abs(mod)
    if value < 0:
        remainder = -remainder
    return mod + remainder if remainder < 0 else remainder


def remove_ansi_escape_codes(text: str) -> str:
    """Strip terminal colour and style sequences from text."""
    return _ANSI_ESCAPE.sub("", text)


def _wrap_line(line: str, max_width: int) -> Iterator[str]:
    while len(remove_ansi_escape_codes(line)) > max_width:
        head = line[:max_width]
        breaking_point = head.rfind(" ")
        if breaking_point != -1:
            yield line[:breaking_point]
            line = line[breaking_point + 1 :]
        else:
            yield head
            line = line[max_width:]
    yield line


def wrap_text(text: str, max_width: int) -> str:
    """Wrap every line of text to max_width visible characters.

    Lines are broken at the last space that fits, or hard-split when there is
    none. Every resulting line is terminated by a newline.
    """
    if max_width < 1:
        raise ValueError("max_width must be at least 1")
    return "".join(
        f"{piece}\n"
        for line in text.split("\n")
        for piece in _wrap_line(line, max_width)
    )


def normalize_newlines(text: str) -> str:
    """Collapse any run of three or more newlines into exactly two."""
    while "\n\n\n" in text:
        text = text.replace("\n\n\n", "\n\n")
    return text


def pad_end(text: str, length: int, pad: str) -> str:
    """Pad text on the right with the single character pad up to length."""
    return text.ljust(length, pad)