"""
Pydantic models for conversion options and results.

ConversionOptions is a plain value object: callers may mutate it between
calls, and every assignment is validated again, so a converter never sees
options that would make its number pattern ambiguous.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .exceptions import SeparatorConflict
from .vocabulary import integral_width_limit

# Characters with a meaning of their own inside a number.
_RESERVED_SYMBOLS = frozenset("0123456789eE-")


# ─── Enumerations ────────────────────────────────────────────────────


class NamingSystem(str, Enum):
    """Naming convention for magnitudes beyond a million."""

    SHORT_SCALE = "short_scale"  # billion = 10^9
    LONG_SCALE = "long_scale"  # milliard = 10^9, billion = 10^12
    UNDEFINED = "undefined"  # treated like short scale


class ConversionDirection(str, Enum):
    """Which way a single input was converted."""

    TO_NUMERAL = "to_numeral"  # number -> numeral
    TO_NUMBER = "to_number"  # numeral -> number


# ─── Options ─────────────────────────────────────────────────────────


class ConversionOptions(BaseModel):
    """Options that guide conversion between numbers and numerals."""

    model_config = ConfigDict(validate_assignment=True)

    naming_system: NamingSystem = NamingSystem.SHORT_SCALE
    language: str = "en-us"  # only en-us is effective
    use_scientific_notation: bool = False  # reserved for number emission
    use_thousands_separators: bool = True
    force_leading_zero: bool = True
    thousands_separator_symbol: str = Field(default=",", min_length=1, max_length=1)
    decimal_separator_symbol: str = Field(default=".", min_length=1, max_length=1)
    debug_output: bool = False

    @field_validator("thousands_separator_symbol", "decimal_separator_symbol")
    @classmethod
    def _check_symbol(cls, value: str) -> str:
        if value in _RESERVED_SYMBOLS:
            raise ValueError(f"{value!r} cannot be used as a separator symbol")
        return value

    @model_validator(mode="before")
    @classmethod
    def _imply_decimal_comma(cls, data: Any) -> Any:
        """A '.' thousands separator implies a ',' decimal separator unless one is given."""
        if (
            isinstance(data, dict)
            and data.get("thousands_separator_symbol") == "."
            and "decimal_separator_symbol" not in data
        ):
            return {**data, "decimal_separator_symbol": ","}
        return data

    @model_validator(mode="after")
    def _check_separators(self) -> "ConversionOptions":
        if self.thousands_separator_symbol == self.decimal_separator_symbol:
            raise SeparatorConflict(self.thousands_separator_symbol)
        return self

    @property
    def is_long_scale(self) -> bool:
        return self.naming_system == NamingSystem.LONG_SCALE

    @property
    def max_integral_places(self) -> int:
        """Most integral digits the naming system can spell out."""
        return integral_width_limit(self.is_long_scale)

    @classmethod
    def build(cls, **values: Any) -> "ConversionOptions":
        """Construct options, raising SeparatorConflict itself rather than wrapped in a ValidationError."""
        try:
            return cls(**values)
        except ValidationError as e:
            for error in e.errors():
                cause = error.get("ctx", {}).get("error")
                if isinstance(cause, SeparatorConflict):
                    raise cause from None
            raise


# ─── Results ─────────────────────────────────────────────────────────


class ConversionResult(BaseModel):
    """Outcome of converting one input of a batch."""

    input: str
    direction: Optional[ConversionDirection] = None  # None if neither number nor numeral
    output: str = ""  # converted value, or the error message
    error: bool = False
    code: Optional[str] = None  # Machine-readable error code, e.g. "UNKNOWN_TERM"
    duration_us: int = 0  # Only measured for timed batches

    @property
    def input_is_number(self) -> bool:
        return self.direction == ConversionDirection.TO_NUMERAL
