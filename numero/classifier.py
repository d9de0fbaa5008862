"""
Classify inputs as numbers or numerals and decompose numbers into parts.

A number has the shape

    [-] ( d{1,3} (T d{3})* | d+ ) ( D d+ )? ( e -? d+ )?

where T is the thousands separator and D the decimal separator, and at
least one of the integral or fractional digits is present.  The pattern
depends on both separators, so it is built per separator pair (the
Converter facade caches the compiled patterns).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .exceptions import InvalidNumber, SeparatorConflict, UnsupportedMagnitude
from .models import ConversionOptions
from .places import strip_thousands_separators
from .vocabulary import SIGN_TERMS, magnitude_for_position

logger = logging.getLogger(__name__)

# Exponents beyond this many significant digits move the point past any nameable place.
_MAX_EXPONENT_DIGITS = 9

_NUMERAL_PATTERN = re.compile(r"(?:[a-z]+|[0-9]+)(?:[\s-]+(?:[a-z]+|[0-9]+))*")


# ─── Data Structures ────────────────────────────────────────────────


@dataclass
class NumberParts:
    """Structural decomposition of a number string."""

    negative: bool
    integral: str  # digits only, may be empty
    fractional: str  # may be empty
    exponent: int = 0  # 0 once resolved


# ─── Public API ──────────────────────────────────────────────────────


def build_number_pattern(thousands_separator: str, decimal_separator: str) -> re.Pattern[str]:
    """Compile the number pattern for one separator pair.

    Raises:
        SeparatorConflict: If both separators are the same character.
    """
    if thousands_separator == decimal_separator:
        raise SeparatorConflict(thousands_separator)

    t = re.escape(thousands_separator)
    d = re.escape(decimal_separator)
    return re.compile(
        rf"(?P<sign>-)?"
        rf"(?P<integral>[0-9]{{1,3}}(?:{t}[0-9]{{3}})+|[0-9]+)?"
        rf"(?:{d}(?P<fractional>[0-9]+))?"
        rf"(?:[eE](?P<exponent>-?[0-9]+))?"
    )


def is_number(text: str, options: ConversionOptions, pattern: re.Pattern[str] | None = None) -> bool:
    """True if `text` is a number under the configured separators.

    Examples:
        "1,000", "-6.25e-2", ".75"  -> True
        "-", "1-e3", "1,00,000"     -> False
    """
    return _match_number(text, options, pattern) is not None


def is_numeral(text: str) -> bool:
    """True if `text` looks like a numeral: lowercase words or digit runs
    separated by whitespace or hyphens, but not a lone sign word."""
    stripped = text.strip()
    if not stripped or stripped in SIGN_TERMS:
        return False
    return _NUMERAL_PATTERN.fullmatch(stripped) is not None


def extract_parts(
    number: str,
    options: ConversionOptions,
    resolve_exponent: bool = True,
    pattern: re.Pattern[str] | None = None,
) -> NumberParts | None:
    """Split a number into sign, integral digits, fractional digits and exponent.

    Args:
        number: e.g. "-1,234.5e2"
        resolve_exponent: Move the decimal point by the exponent and reset it to 0.

    Returns:
        NumberParts, or None if `number` is not a number.

    Raises:
        InvalidNumber: If the exponent moves the point beyond any spellable place.
        UnsupportedMagnitude: If the resolved integral part is too wide to name.
    """
    match = _match_number(number, options, pattern)
    if match is None:
        return None

    exponent = match["exponent"] or "0"
    if len(exponent.lstrip("-").lstrip("0")) > _MAX_EXPONENT_DIGITS:
        raise InvalidNumber(f"The exponent of {number!r} is out of range", {"number": number})

    parts = NumberParts(
        negative=match["sign"] is not None,
        integral=strip_thousands_separators(match["integral"] or "", options.thousands_separator_symbol),
        fractional=match["fractional"] or "",
        exponent=int(exponent),
    )
    if resolve_exponent and parts.exponent:
        parts = _resolve_exponent(parts, options)

    if options.debug_output:
        logger.debug("extracted parts of %r: %s", number, parts)
    return parts


# ─── Internal Helpers ────────────────────────────────────────────────


def _match_number(text: str, options: ConversionOptions, pattern: re.Pattern[str] | None) -> re.Match[str] | None:
    if pattern is None:
        pattern = build_number_pattern(options.thousands_separator_symbol, options.decimal_separator_symbol)
    match = pattern.fullmatch(text)
    if match is None or (match["integral"] is None and match["fractional"] is None):
        return None
    return match


def _resolve_exponent(parts: NumberParts, options: ConversionOptions) -> NumberParts:
    """Shift the decimal point by the exponent.

    Zero padding never exceeds the widest integral part the naming system
    can spell, in either direction.

    Example:
        1.23e6   -> integral "1230000", fractional ""
        6.25e-2  -> integral "0" (or ""), fractional "0625"
    """
    all_digits = parts.integral + parts.fractional
    digits = all_digits.lstrip("0")
    if not digits:
        return NumberParts(negative=parts.negative, integral="0", fractional="")
    point = len(parts.integral) + parts.exponent - (len(all_digits) - len(digits))

    limit = options.max_integral_places
    if point > limit:
        position = (point - 1) // 3 * 3
        factor, _ = magnitude_for_position(position, options.is_long_scale)
        raise UnsupportedMagnitude(factor, position)
    if -point > limit:
        raise InvalidNumber(
            f"Exponent {parts.exponent} moves the point more than {limit} places to the left",
            {"exponent": parts.exponent},
        )

    if point >= len(digits):
        integral, fractional = digits + "0" * (point - len(digits)), ""
    elif point <= 0:
        integral, fractional = ("0" if options.force_leading_zero else ""), "0" * -point + digits
    else:
        integral, fractional = digits[:point], digits[point:]

    return NumberParts(negative=parts.negative, integral=integral, fractional=fractional)
