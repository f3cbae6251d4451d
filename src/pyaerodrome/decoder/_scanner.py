"""Primitive scanners shared by the METAR group recognizers.

The report is held in a normalized buffer and walked with an integer offset.
None of these functions mutate anything: they are handed ``(buf, pos)`` and
return the new offset (and whatever was scanned) on success, or ``None`` when
the text at ``pos`` does not match, in which case the caller keeps its old
offset.
"""

from typing import Dict, Optional, Tuple

SENTINEL = "\0"


def normalize(text: str) -> str:
    """Collapse whitespace and append a trailing space plus sentinel.

    The trailing space lets every group end on a boundary, so recognizers
    never need to tell the end of the buffer from the end of a token.
    """
    return " ".join(text.split()) + " " + SENTINEL


def peek(buf: str, pos: int, length: int = 1) -> str:
    """Return the next ``length`` characters, padded with the sentinel."""
    res = buf[pos : pos + length]
    return res + SENTINEL * (length - len(res))


def at_end(buf: str, pos: int) -> bool:
    """Is the cursor sitting on the sentinel?"""
    return peek(buf, pos) == SENTINEL


def scan_number(
    buf: str, pos: int, mindigits: int, maxdigits: Optional[int] = None
) -> Optional[Tuple[int, int]]:
    """Greedily scan between ``mindigits`` and ``maxdigits`` ASCII digits.

    Returns:
      (value, pos) or None when fewer than ``mindigits`` digits are present
    """
    if maxdigits is None:
        maxdigits = mindigits
    end = pos
    while end - pos < maxdigits and "0" <= peek(buf, end) <= "9":
        end += 1
    if end - pos < mindigits:
        return None
    return int(buf[pos:end]), end


def scan_boundary(buf: str, pos: int) -> Optional[int]:
    """Check for the end of a token and skip the whitespace that follows."""
    char = peek(buf, pos)
    if char != SENTINEL and not char.isspace():
        return None
    while peek(buf, pos).isspace():
        pos += 1
    return pos


def scan_token(
    buf: str, pos: int, table: Dict[str, str]
) -> Optional[Tuple[str, str, int]]:
    """Find the longest table code that prefixes the buffer at ``pos``.

    Returns:
      (code, text, pos) or None
    """
    best = None
    for code, text in table.items():
        if buf.startswith(code, pos) and (
            best is None or len(code) > len(best[0])
        ):
            best = (code, text)
    if best is None:
        return None
    return best[0], best[1], pos + len(best[0])
