"""
Convert English numerals to digit strings.

Supported patterns:
    "twenty-one"                                     -> "21"
    "twelve million eighty-three thousand fifty-six" -> "12,083,056"
    "nineteen hundred"                               -> "1,900"
    "a hundred", "hundred"                           -> "100"
    "one thousand million"                           -> "1,000,000,000"
    "twenty-three trevigintillion"                   -> "23" + 23 x ",000"
    "negative three point one four"                  -> "-3.14"

The numeral is never evaluated as an integer.  Each term is either
additive (a base term or a digit run, merged into the accumulator as a
place string) or multiplicative (hundred, thousand, myriad, -illion,
-illiard: shifts the accumulator left).  A multiplicative term of a
thousand or more closes a sub-numeral ("group"); groups must appear in
strictly decreasing magnitude and are finally merged right-aligned.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from .exceptions import (
    DuplicateMagnitude,
    EmptyNumeral,
    InvalidNumeral,
    InvalidPlacement,
    OutOfOrderMagnitude,
    UnknownTerm,
    UnsupportedScale,
)
from .models import ConversionOptions, NamingSystem
from .places import add_thousands_separators, merge_places, shift_places
from .vocabulary import (
    ARTICLE,
    GROUP_SHIFT,
    ILLIARD,
    ILLION,
    POINT,
    SIGN_TERMS,
    TERM_TO_SHIFT,
    TERM_TO_VALUE,
    factor_for_root,
)

logger = logging.getLogger(__name__)

_TOKEN_SEPARATOR = re.compile(r"[\s-]+")
_POINT_SEPARATOR = re.compile(rf"(?:^|\s+){POINT}(?:\s+|$)")
_DIGITS = re.compile(r"[0-9]+")


# ─── Term Classifiers ────────────────────────────────────────────────


def find_additive_value(term: str, max_digits: int = 3, allow_big_numbers: bool = False) -> str | None:
    """Digit string of an additive term, or None if the term is not additive.

    Args:
        term: A base term ("seven", "fourty") or a digit run ("42").
        max_digits: Widest value the term may have at its place.
        allow_big_numbers: Accept digit runs wider than `max_digits`.

    Raises:
        InvalidPlacement: If the term is wider than `max_digits`.
    """
    if _DIGITS.fullmatch(term):
        if len(term) > max_digits and not allow_big_numbers:
            raise InvalidPlacement(
                f"{term!r} has more than {max_digits} digit(s) and cannot be placed here",
                {"term": term, "max_digits": max_digits},
            )
        return term

    value = TERM_TO_VALUE.get(term)
    if value is not None and len(value) > max_digits:
        raise InvalidPlacement(
            f"{term!r} has more than {max_digits} digit(s) and cannot be placed here",
            {"term": term, "max_digits": max_digits},
        )
    return value


def find_multiplicative_shift(term: str, options: ConversionOptions) -> int | None:
    """Power of ten a multiplicative term stands for, or None.

    Short scale: m-illion = 10^(3*f+3).  Long scale: m-illion = 10^(6*f),
    m-illiard = 10^(6*f+3).

    Raises:
        UnsupportedScale: For an -illiard term outside the long scale.
    """
    if term in TERM_TO_SHIFT:
        return TERM_TO_SHIFT[term]

    for suffix in (ILLION, ILLIARD):
        if not term.endswith(suffix):
            continue
        factor = factor_for_root(term[: -len(suffix)])
        if factor is None:
            return None
        if suffix == ILLIARD:
            if options.naming_system != NamingSystem.LONG_SCALE:
                raise UnsupportedScale(term, options.naming_system.value)
            return 6 * factor + 3
        return 6 * factor if options.is_long_scale else 3 * factor + 3
    return None


# ─── Integral Parser ─────────────────────────────────────────────────


class ParserState(Enum):
    START = "start"
    AFTER_SIGN = "after sign"
    AFTER_ARTICLE = "after article"
    AFTER_ADDITIVE = "after additive"
    AFTER_MULTIPLICATIVE = "after multiplicative"


class _IntegralParser:
    """Folds the terms of an integral numeral into groups of place strings."""

    def __init__(self, source: str, options: ConversionOptions):
        self.source = source
        self.options = options
        self.state = ParserState.START
        self.negative = False

        self.groups: list[str] = []
        self.last_group_total_shift: int | None = None

        self.current_group = ""
        self.current_group_total_shift = 0
        self.last_multiplicative_shift = 0
        self.last_additive_width: int | None = None
        self.last_term: str | None = None

    def feed(self, term: str) -> None:
        if not self.groups and not self.current_group:
            if term in SIGN_TERMS:
                if self.state != ParserState.START:
                    raise InvalidNumeral(f"{term!r} may only appear once, at the start of {self.source!r}")
                self.negative = True
                self._advance(term, ParserState.AFTER_SIGN)
                return
            if term == ARTICLE:
                self.current_group = "1"
                self.last_additive_width = 1
                self._advance(term, ParserState.AFTER_ARTICLE)
                return

        if self.current_group == "0":
            raise InvalidNumeral(
                f"'zero' cannot be combined with {term!r} in {self.source!r}",
                {"term": term},
            )

        at_start = not self.groups and not self.current_group
        value = find_additive_value(term, allow_big_numbers=at_start)
        shift = find_multiplicative_shift(term, self.options) if value is None else None

        if value is not None:
            self._add(term, value.lstrip("0") or "0")
        elif shift is not None:
            self._multiply(term, shift)
        else:
            raise UnknownTerm(term, f"{term!r} is not a valid numeral term in {self.source!r}")

    def finish(self) -> tuple[bool, str]:
        """Close the last group and merge all groups into one digit string."""
        if self.current_group:
            self._close_group()

        digits = ""
        for group in self.groups:
            digits = merge_places(group, digits)
        return self.negative, digits

    # ─── Transitions ────────────────────────────────────────────────

    def _add(self, term: str, value: str) -> None:
        if value == "0" and (self.groups or self.current_group):
            raise InvalidNumeral(f"'zero' must stand alone in {self.source!r}", {"term": term})

        if self.state == ParserState.AFTER_MULTIPLICATIVE and self.last_multiplicative_shift >= GROUP_SHIFT:
            self._close_group()

        if self.last_additive_width is not None and len(value) > self.last_additive_width:
            raise InvalidPlacement(
                f"{term!r} cannot follow {self.last_term!r} in {self.source!r}",
                {"term": term, "previous": self.last_term},
            )

        self.current_group = merge_places(value, self.current_group)
        self.last_additive_width = len(value)
        self._advance(term, ParserState.AFTER_ADDITIVE)

    def _multiply(self, term: str, shift: int) -> None:
        if shift < self.last_multiplicative_shift:
            raise InvalidPlacement(
                f"{term!r} cannot follow the larger {self.last_term!r} in {self.source!r}",
                {"term": term, "previous": self.last_term},
            )

        if not self.current_group:
            self.current_group = "1"

        self.current_group = shift_places(shift, self.current_group)
        self.current_group_total_shift += shift
        self.last_multiplicative_shift = shift
        self.last_additive_width = None
        self._advance(term, ParserState.AFTER_MULTIPLICATIVE)

    def _close_group(self) -> None:
        total = self.current_group_total_shift
        previous = self.last_group_total_shift
        if previous is not None:
            if total == previous:
                raise DuplicateMagnitude(
                    f"Magnitude 10^{total} is used twice in {self.source!r}",
                    {"magnitude": total},
                )
            if total > previous:
                raise OutOfOrderMagnitude(
                    f"Magnitude 10^{total} follows the smaller magnitude 10^{previous} in {self.source!r}",
                    {"magnitude": total, "previous_magnitude": previous},
                )

        self.groups.append(self.current_group)
        self.last_group_total_shift = total
        self.current_group = ""
        self.current_group_total_shift = 0
        self.last_multiplicative_shift = 0
        self.last_additive_width = None

    def _advance(self, term: str, state: ParserState) -> None:
        self.last_term = term
        self.state = state
        if self.options.debug_output:
            logger.debug(
                "term %r -> %s | groups=%s current=%r shift=%d",
                term, state.value, self.groups, self.current_group, self.current_group_total_shift,
            )


# ─── Main Converter ─────────────────────────────────────────────────


def to_number(numeral: str, options: ConversionOptions) -> str:
    """Convert an English numeral to a digit string.

    Args:
        numeral: e.g. "twelve million eighty-three thousand fifty-six"

    Returns:
        "12,083,056" (separators according to `options`)

    Raises:
        EmptyNumeral: If the numeral is empty.
        UnknownTerm: If a word is not part of the vocabulary.
        UnsupportedScale: If an -illiard word is used outside the long scale.
        InvalidNumeral: If the numeral breaks the grammar (see subclasses).
    """
    text = numeral.strip().lower()
    if not text:
        raise EmptyNumeral()

    halves = _POINT_SEPARATOR.split(text)
    if len(halves) > 2:
        raise InvalidNumeral(f"'point' appears more than once in {numeral!r}")

    negative, integral = _parse_integral(halves[0], options)
    has_fraction = len(halves) == 2

    if not integral and not has_fraction:
        raise InvalidNumeral(f"{numeral!r} has no value terms")

    result = integral
    if result and options.use_thousands_separators:
        result = add_thousands_separators(result, options.thousands_separator_symbol)

    if has_fraction:
        fractional = _parse_fractional(halves[1], options)
        result = (result or "0") + options.decimal_separator_symbol + (fractional or "0")

    if negative:
        result = "-" + result

    if options.debug_output:
        logger.debug("numeral %r -> number %r", numeral, result)
    return result


def _tokenize(text: str) -> list[str]:
    return [term for term in _TOKEN_SEPARATOR.split(text) if term]


def _parse_integral(text: str, options: ConversionOptions) -> tuple[bool, str]:
    parser = _IntegralParser(text, options)
    for term in _tokenize(text):
        parser.feed(term)
    return parser.finish()


def _parse_fractional(text: str, options: ConversionOptions) -> str:
    """Each term of the fractional part is a single digit: "zero six two five" -> "0625"."""
    digits: list[str] = []
    for term in _tokenize(text):
        value = find_additive_value(term, max_digits=1, allow_big_numbers=True)
        if value is None:
            if find_multiplicative_shift(term, options) is not None:
                raise InvalidPlacement(f"{term!r} cannot appear after 'point'", {"term": term})
            raise UnknownTerm(term)
        digits.append(value)
    return "".join(digits)
