"""
Place-string algebra.

A place string is a digit string read as a positional number, most
significant digit first.  Numbers in the centillion range have hundreds of
digits, so the parser never promotes them to integers: it overlays and
shifts place strings instead.

    merge_places("83", "12000")  -> "12083"
    shift_places(3, "12")        -> "12000"
"""

from __future__ import annotations

from .exceptions import OverlappingPlaces


def merge_places(source: str, target: str) -> str:
    """Overlay `source` onto `target`, aligned at the right end.

    A zero digit always loses against a non-zero one; two non-zero digits at
    the same position are an error.  The result is widened on the left to fit
    the longer operand.

    Raises:
        OverlappingPlaces: If both strings carry a non-zero digit at one position.
    """
    if not target:
        return source

    width = max(len(source), len(target))
    merged: list[str] = []
    for position, (s, t) in enumerate(zip(reversed(source.rjust(width, "0")), reversed(target.rjust(width, "0")))):
        if s != "0" and t != "0":
            raise OverlappingPlaces(target, source, position)
        merged.append(t if s == "0" else s)
    return "".join(reversed(merged))


def shift_places(n: int, target: str) -> str:
    """Multiply a place string by 10^n."""
    return target + "0" * n


def add_thousands_separators(digits: str, separator: str) -> str:
    """Insert `separator` every three digits from the right: "1234567" -> "1,234,567".

    Strings that already contain the separator are returned unchanged.
    """
    if separator in digits:
        return digits
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return separator.join(groups)


def strip_thousands_separators(number: str, separator: str) -> str:
    return number.replace(separator, "")
