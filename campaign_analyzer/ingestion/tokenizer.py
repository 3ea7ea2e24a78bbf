"""Line splitting, delimiter detection and quote-aware field tokenizing."""
from __future__ import annotations

import re
from typing import List

_LINE_BREAK = re.compile(r"\r?\n")
_QUOTE = '"'

TAB = "\t"
COMMA = ","
SEMICOLON = ";"


def split_lines(raw_text: str) -> List[str]:
    """Split *raw_text* on ``\\n`` / ``\\r\\n`` and drop blank lines."""

    if not raw_text:
        return []
    return [line for line in _LINE_BREAK.split(raw_text) if line.strip()]


def detect_delimiter(line: str) -> str:
    """Pick the field separator used by a header line.

    Tabs win only when they outnumber both commas and semicolons, semicolons
    win over commas, and a comma is returned when nothing else applies.
    """

    commas = line.count(COMMA)
    semicolons = line.count(SEMICOLON)
    tabs = line.count(TAB)

    if tabs > commas and tabs > semicolons:
        return TAB
    if semicolons > commas:
        return SEMICOLON
    return COMMA


def split_line(line: str, delimiter: str) -> List[str]:
    """Split one line into fields, honouring double-quote escaping.

    ``""`` inside a quoted section is a literal quote; a lone ``"`` toggles
    quoting. Delimiters only separate fields outside quotes, so the result
    always holds one more field than there are unquoted delimiters.

    An unterminated quote is not an error: the rest of the line is consumed
    into the last field. Lines are split before tokenizing, so a quoted
    value containing a line break ends up spread over two rows.
    """

    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    index = 0
    length = len(line)

    while index < length:
        char = line[index]
        if char == _QUOTE and in_quotes and index + 1 < length and line[index + 1] == _QUOTE:
            current.append(_QUOTE)
            index += 2
            continue
        if char == _QUOTE:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1

    fields.append("".join(current))
    return [_clean_field(field) for field in fields]


def _clean_field(field: str) -> str:
    text = field.strip()
    if len(text) >= 2 and text.startswith(_QUOTE) and text.endswith(_QUOTE):
        return text[1:-1]
    return text


__all__ = ["detect_delimiter", "split_line", "split_lines", "TAB", "COMMA", "SEMICOLON"]
