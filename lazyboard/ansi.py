"""ANSI-aware text measurement helpers.

Info-bar boxes are sized by the number of terminal cells their text occupies,
so widths are measured with escape sequences removed and wide characters
counted twice. Tree labels are escaped before they are painted.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8

_SPECIAL_CHARS = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def decolorise(text: str) -> str:
    """Strip ANSI escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return terminal column width for ANSI-styled text."""
    col = 0
    for ch in decolorise(text):
        col += char_display_width(ch, col)
    return col


def escape_special_chars(text: str) -> str:
    """Escape control characters so a label always paints on one line."""
    out: list[str] = []
    for ch in text:
        replacement = _SPECIAL_CHARS.get(ch)
        if replacement is not None:
            out.append(replacement)
            continue
        code = ord(ch)
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    # Keep trailing style resets so clipped lines never bleed colour.
    while i < n:
        match = ANSI_ESCAPE_RE.match(text, i) if text[i] == "\x1b" else None
        if match is None:
            i += 1
            continue
        out.append(match.group(0))
        i = match.end()

    return "".join(out)


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "clip_ansi_line",
    "decolorise",
    "display_width",
    "escape_special_chars",
]
