"""Parsing of free-form numeric cells written in US or BR/EU notation."""
from __future__ import annotations

import re
from typing import Optional

_NON_NUMERIC = re.compile(r"[^0-9,.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_number(value: Optional[str]) -> float:
    """Convert a report cell into a float, never failing.

    Currency symbols, spaces and other noise are discarded first. When the
    last comma comes after the last period the value is read as BR/EU
    (``1.234,56``), otherwise as US (``1,234.56``). Anything that does not
    start with a number yields ``0.0``.

    Examples:
        "R$ 1.000,00" -> 1000.0
        "1,234.56"    -> 1234.56
        "100,5"       -> 100.5
        ""            -> 0.0
    """

    if not value:
        return 0.0

    clean = _NON_NUMERIC.sub("", str(value))
    if clean.rfind(",") > clean.rfind("."):
        clean = clean.replace(".", "").replace(",", ".", 1)
    else:
        clean = clean.replace(",", "")

    match = _LEADING_NUMBER.match(clean)
    if match is None:
        return 0.0
    # -0.0 is falsy, so this also normalises negative zero
    return float(match.group(0)) or 0.0


__all__ = ["parse_number"]
