"""
Random numbers and numerals, for exercising the converter.

The place count of each number is drawn uniformly between the bounds, and
the digits are drawn one by one, so numbers in the centillion range are as
cheap to produce as small ones.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterator

from .converter import Converter
from .models import ConversionOptions, NamingSystem

# Largest place counts the naming systems can spell out.
MAX_PLACES: dict[NamingSystem, int] = {
    NamingSystem.SHORT_SCALE: 303,
    NamingSystem.LONG_SCALE: 600,
    NamingSystem.UNDEFINED: 303,
}


class GenerationMode(str, Enum):
    NUMBERS = "numbers"
    NUMERALS = "numerals"


def max_places_for(naming_system: NamingSystem) -> int:
    return MAX_PLACES[naming_system]


def random_number(rng: random.Random, min_places: int, max_places: int) -> str:
    """A random digit string with between `min_places` and `max_places` digits.

    Only the single-digit number may start with a zero.
    """
    places = rng.randint(min_places, max_places)
    if places == 1:
        return str(rng.randint(0, 9))
    return str(rng.randint(1, 9)) + "".join(str(rng.randint(0, 9)) for _ in range(places - 1))


def generate(
    count: int,
    mode: GenerationMode = GenerationMode.NUMBERS,
    options: ConversionOptions | None = None,
    min_places: int = 1,
    max_places: int = 12,
    rng: random.Random | None = None,
) -> Iterator[str]:
    """Yield `count` random numbers, or their numerals in NUMERALS mode.

    Raises:
        ValueError: If the count or the place bounds are out of range.
    """
    options = options if options is not None else ConversionOptions()
    if count < 1:
        raise ValueError("count must not be zero or less")
    if min_places < 1:
        raise ValueError("'min-places' must at least be '1'")
    if max_places < min_places:
        raise ValueError("'max-places' must not be less than 'min-places'")
    upper = max_places_for(options.naming_system)
    if max_places > upper:
        raise ValueError(
            f"'max-places' must at most be '{upper}' in the '{options.naming_system.value}' naming system"
        )

    return _generate(count, mode, Converter(options), min_places, max_places, rng or random.Random())


def _generate(
    count: int, mode: GenerationMode, converter: Converter, min_places: int, max_places: int, rng: random.Random
) -> Iterator[str]:
    for _ in range(count):
        number = random_number(rng, min_places, max_places)
        yield number if mode == GenerationMode.NUMBERS else converter.to_numeral(number)
