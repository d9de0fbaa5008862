"""
Custom exception hierarchy for number/numeral conversion.

Each exception type maps to one category of user-input failure, so callers
(the batch driver, the CLI, the HTTP service) can report precise, machine
readable error codes per input and carry on with the next one.

Every grammar violation of a numeral derives from InvalidNumeral, and every
failure of any kind derives from ConversionError.
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


# ─── Input Shape ─────────────────────────────────────────────────────


class EmptyInput(ConversionError):
    """Nothing to convert."""

    def __init__(self, message: str = "Empty input cannot be converted", details: dict | None = None):
        super().__init__("EMPTY_INPUT", message, details)


class EmptyNumeral(EmptyInput):
    """An empty string was passed where a numeral was expected."""

    def __init__(self, message: str = "Empty numeral cannot be converted to a number"):
        super().__init__(message)
        self.code = "EMPTY_NUMERAL"


class InvalidNumber(ConversionError):
    """The input does not have the shape of a number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER", message, details)


class SeparatorConflict(ConversionError):
    """Thousands and decimal separators must differ."""

    def __init__(self, symbol: str):
        super().__init__(
            "SEPARATOR_CONFLICT",
            f"Thousands and decimal separators have to be different (both are {symbol!r})",
            {"symbol": symbol},
        )


# ─── Vocabulary ──────────────────────────────────────────────────────


class UnknownTerm(ConversionError):
    """A word is neither an additive nor a multiplicative term."""

    def __init__(self, term: str, message: str | None = None):
        super().__init__(
            "UNKNOWN_TERM",
            message or f"{term!r} is not a valid numeral term",
            {"term": term},
        )


class UnsupportedScale(ConversionError):
    """A long-scale word (-illiard) was used outside the long-scale naming system."""

    def __init__(self, term: str, naming_system: str):
        super().__init__(
            "UNSUPPORTED_SCALE",
            f"{term!r} is a long scale term but the naming system is {naming_system!r}",
            {"term": term, "naming_system": naming_system},
        )


class UnsupportedMagnitude(ConversionError):
    """The number needs a Latin root beyond centillion."""

    def __init__(self, factor: int, position: int):
        super().__init__(
            "UNSUPPORTED_MAGNITUDE",
            f"Magnitude 10^{position} needs Latin factor {factor}, the largest supported factor is 100",
            {"factor": factor, "position": position},
        )


# ─── Grammar ─────────────────────────────────────────────────────────


class InvalidNumeral(ConversionError):
    """The numeral violates the grammar of English numerals."""

    def __init__(self, message: str, details: dict | None = None, code: str = "INVALID_NUMERAL"):
        super().__init__(code, message, details)


class InvalidPlacement(InvalidNumeral):
    """A term appears at a place it cannot occupy."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, details, code="INVALID_PLACEMENT")


class OverlappingPlaces(InvalidPlacement):
    """Two place strings both carry a non-zero digit at the same position."""

    def __init__(self, target: str, source: str, position: int):
        super().__init__(
            f"Cannot merge {source!r} into {target!r}: both occupy place 10^{position} (overlap)",
            {"target": target, "source": source, "position": position},
        )
        self.target = target
        self.source = source
        self.position = position


class DuplicateMagnitude(InvalidNumeral):
    """Two sub-numerals share the same magnitude."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, details, code="DUPLICATE_MAGNITUDE")


class OutOfOrderMagnitude(InvalidNumeral):
    """A sub-numeral has a greater magnitude than one before it."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, details, code="OUT_OF_ORDER_MAGNITUDE")
