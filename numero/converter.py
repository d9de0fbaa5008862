"""
Converter facade: dispatches each input to the right engine.

Flow:
  ┌─────────┐
  │  Input  │
  └────┬────┘
       │
  ┌────▼─────┐
  │ is_number│   ← separator-aware pattern (cached per separator pair)
  └────┬─────┘
       │
   yes │ no
  ┌────▼────────┐     ┌──────────────┐
  │ to_numeral  │     │  to_number   │
  │ parts →     │     │ tokens →     │
  │ group words │     │ place merges │
  └─────────────┘     └──────────────┘

Design principles:
  - Every operation is a pure function of (input, options snapshot).
  - The options object may be replaced or mutated between calls; each
    method also accepts an explicit snapshot overriding it.
  - The compiled-pattern cache is the only shared mutable state and is
    guarded by a lock, so one Converter can serve many threads as long as
    its options are not mutated concurrently.
"""

from __future__ import annotations

import logging
import re
import threading

from . import classifier
from .classifier import NumberParts
from .models import ConversionOptions
from .number_to_word import to_numeral as _to_numeral
from .word_to_number import to_number as _to_number

logger = logging.getLogger(__name__)


class Converter:
    """Converts between numbers and English numerals.

    Usage:
        converter = Converter()
        converter.convert("1,000,000,000")    # "one billion"
        converter.convert("twenty-one")       # "21"

        converter.options.force_leading_zero = False
        converter.to_numeral("0.0625")        # "point zero six two five"
    """

    def __init__(self, options: ConversionOptions | None = None):
        self.options = options if options is not None else ConversionOptions()
        self._patterns: dict[tuple[str, str], re.Pattern[str]] = {}
        self._lock = threading.Lock()

    def number_pattern(self, options: ConversionOptions | None = None) -> re.Pattern[str]:
        """Compiled number pattern for the options' separator pair."""
        options = self.options if options is None else options
        key = (options.thousands_separator_symbol, options.decimal_separator_symbol)
        with self._lock:
            pattern = self._patterns.get(key)
            if pattern is None:
                logger.debug("compiling number pattern for separators %r", key)
                pattern = self._patterns[key] = classifier.build_number_pattern(*key)
            return pattern

    def is_number(self, text: str, options: ConversionOptions | None = None) -> bool:
        options = self.options if options is None else options
        return classifier.is_number(text, options, self.number_pattern(options))

    @staticmethod
    def is_numeral(text: str) -> bool:
        return classifier.is_numeral(text)

    def extract_parts(
        self, number: str, options: ConversionOptions | None = None, resolve_exponent: bool = True
    ) -> NumberParts | None:
        options = self.options if options is None else options
        return classifier.extract_parts(number, options, resolve_exponent, self.number_pattern(options))

    def to_number(self, numeral: str, options: ConversionOptions | None = None) -> str:
        """Convert an English numeral to a number; see word_to_number.to_number."""
        return _to_number(numeral, self.options if options is None else options)

    def to_numeral(self, number: str, options: ConversionOptions | None = None) -> str:
        """Convert a number to an English numeral; see number_to_word.to_numeral."""
        options = self.options if options is None else options
        return _to_numeral(number, options, self.number_pattern(options))

    def convert(self, text: str, options: ConversionOptions | None = None) -> str:
        """Numbers become numerals; everything else is parsed as a numeral."""
        options = self.options if options is None else options
        if self.is_number(text, options):
            return self.to_numeral(text, options)
        return self.to_number(text, options)


# ─── Module-level API ────────────────────────────────────────────────
# Stateless functions over explicit options, sharing one pattern cache.

_default_converter = Converter()


def is_number(text: str, options: ConversionOptions | None = None) -> bool:
    return _default_converter.is_number(text, options)


def is_numeral(text: str) -> bool:
    return classifier.is_numeral(text)


def to_number(numeral: str, options: ConversionOptions | None = None) -> str:
    return _default_converter.to_number(numeral, options)


def to_numeral(number: str, options: ConversionOptions | None = None) -> str:
    return _default_converter.to_numeral(number, options)


def convert(text: str, options: ConversionOptions | None = None) -> str:
    return _default_converter.convert(text, options)
