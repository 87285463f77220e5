from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import unquote_plus


def _split_pair(segment: str) -> list[str]:
    # Trailing empty parts are discarded: "a=" -> ["a"], "=b" -> ["", "b"].
    if segment.count("=") != 1:
        return []
    parts = segment.split("=")
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def parse_query(query: Optional[str]) -> Dict[str, str]:
    """Decode an ``&``-joined ``key=value`` string into a dict.

    Only segments with exactly one key and one value are kept; both are
    percent-decoded as UTF-8 (``+`` means space). Last value wins on repeats.
    """
    result: Dict[str, str] = {}
    if not query:
        return result

    for segment in query.split("&"):
        parts = _split_pair(segment)
        if len(parts) == 2:
            key, value = parts
            result[unquote_plus(key, encoding="utf-8")] = unquote_plus(value, encoding="utf-8")
    return result
