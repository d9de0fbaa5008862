"""
Convert digit strings to English numerals.

    "-56"          -> "negative fifty-six"
    "12,083,056"   -> "twelve million eighty-three thousand fifty-six"
    "1.23e6"       -> "one million two hundred thirty thousand"
    "0.0625"       -> "zero point zero six two five"

The integral part is emitted group by group (three digits each), naming
each non-zero group by its magnitude.  Magnitude names beyond the direct
Latin roots are composed from a prefix and a tens root, up to centillion.
"""

from __future__ import annotations

import logging
import re

from .classifier import NumberParts, extract_parts
from .exceptions import EmptyInput, InvalidNumber, UnsupportedMagnitude
from .models import ConversionOptions
from .vocabulary import (
    NEGATIVE,
    POINT,
    SHIFT_TO_TERM,
    VALUE_TO_TERM,
    magnitude_for_position,
    root_for_factor,
)

logger = logging.getLogger(__name__)

_HUNDRED = SHIFT_TO_TERM[2]
_THOUSAND = SHIFT_TO_TERM[3]


def to_numeral(number: str, options: ConversionOptions, pattern: re.Pattern[str] | None = None) -> str:
    """Convert a number to its English numeral.

    Args:
        number: Digits with optional sign, separators, decimal part and exponent.
        pattern: Precompiled number pattern for the configured separators.

    Raises:
        EmptyInput: If `number` is empty.
        InvalidNumber: If `number` is not a number under the configured separators,
            or its exponent moves the point beyond any spellable place.
        UnsupportedMagnitude: If the number needs a name beyond centillion.
    """
    if not number:
        raise EmptyInput("Empty number cannot be converted to a numeral")

    parts = extract_parts(number, options, resolve_exponent=True, pattern=pattern)
    if parts is None:
        raise InvalidNumber(f"{number!r} is not a valid number", {"number": number})

    words: list[str] = []
    if parts.negative:
        words.append(NEGATIVE)
    if _emits_integral(parts, options.force_leading_zero):
        words.append(integral_numeral(parts.integral, options))
    if parts.fractional:
        words.append(POINT)
        words.append(fractional_numeral(parts.fractional))

    numeral = " ".join(words)
    if options.debug_output:
        logger.debug("number %r -> numeral %r", number, numeral)
    return numeral


def integral_numeral(digits: str, options: ConversionOptions) -> str:
    """Spell out a string of integral digits: "1900" -> "one thousand nine hundred"."""
    if not digits.strip("0"):
        return VALUE_TO_TERM["0"]

    width = -(-len(digits) // 3) * 3
    padded = digits.rjust(width, "0")
    words: list[str] = []

    for offset in range(0, width, 3):
        group = padded[offset:offset + 3]
        if group == "000":
            continue
        position = width - offset - 3
        words.extend(_group_words(group))
        if position:
            words.append(magnitude_name(position, options))
        if options.debug_output:
            logger.debug("group %s at 10^%d -> %s", group, position, words)

    return " ".join(words)


def fractional_numeral(digits: str) -> str:
    """Spell out fractional digits one by one: "0625" -> "zero six two five"."""
    return " ".join(VALUE_TO_TERM[digit] for digit in digits)


def magnitude_name(position: int, options: ConversionOptions) -> str:
    """Name of the power of ten that starts a group.

    Short scale: 10^(3f+3) = <root f>illion.  Long scale: 10^(6f) =
    <root f>illion, 10^(6f+3) = <root f>illiard.

    Raises:
        UnsupportedMagnitude: If the Latin factor exceeds 100.
    """
    if position == 3:
        return _THOUSAND

    factor, suffix = magnitude_for_position(position, options.is_long_scale)
    root = root_for_factor(factor)
    if root is None:
        raise UnsupportedMagnitude(factor, position)
    return root + suffix


# ─── Internal Helpers ────────────────────────────────────────────────


def _emits_integral(parts: NumberParts, force_leading_zero: bool) -> bool:
    """The integral part is spelled unless it is zero, a fraction follows and no leading zero is forced."""
    if parts.integral.strip("0"):
        return True
    return force_leading_zero or not parts.fractional


def _group_words(group: str) -> list[str]:
    """Words for one three-digit group: "021" -> ["twenty-one"], "900" -> ["nine", "hundred"]."""
    hundreds, tens, ones = group
    words: list[str] = []

    if hundreds != "0":
        words.extend((VALUE_TO_TERM[hundreds], _HUNDRED))

    if tens == "0" and ones == "0":
        return words
    if tens == "0":
        words.append(VALUE_TO_TERM[ones])
    elif tens == "1" or ones == "0":
        words.append(VALUE_TO_TERM[tens + ones if tens == "1" else tens + "0"])
    else:
        words.append(f"{VALUE_TO_TERM[tens + '0']}-{VALUE_TO_TERM[ones]}")
    return words
