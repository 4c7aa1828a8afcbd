"""idShort normalization for names taken from spreadsheet cells."""

from __future__ import annotations

import re

FALLBACK_ID_SHORT = "Unnamed"

_UNDERSCORE_RUNS = re.compile(r"_{2,}")


def normalize_id_short(raw: str | None) -> str:
    """Turn free text into an idShort-safe name.

    Example:
        >>> normalize_id_short(" 2nd motor (rev. B) ")
        '_2nd_motor_rev_B'
        >>> normalize_id_short("--")
        'Unnamed'
    """
    if raw is None or not raw.strip():
        return FALLBACK_ID_SHORT

    replaced = "".join(ch if ch.isalpha() or ch.isdecimal() else "_" for ch in raw.strip())
    normalized = _UNDERSCORE_RUNS.sub("_", replaced).strip("_")
    if not normalized:
        return FALLBACK_ID_SHORT
    if normalized[0].isdecimal():
        normalized = "_" + normalized
    return normalized
