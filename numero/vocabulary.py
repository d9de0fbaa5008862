"""
Static vocabulary shared by both conversion directions.

Every table is declared once as a literal and inverted at import time, so
the value -> word and word -> value views can never drift apart.

Standard dictionary numbers beyond a thousand are built from an optional
Latin prefix, a Latin root and the suffix "-illion" (or "-illiard" in long
scale):

    trevigintillion = tre (3) + vigint (20) + illion  ->  factor 23
    short scale: 10^(3*23+3)        long scale: 10^(6*23)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ─── Base Terms ──────────────────────────────────────────────────────
# Values are digit strings; the parser merges them as place strings.

BASE_TERMS: tuple[tuple[str, str], ...] = (
    ("0", "zero"),
    ("1", "one"),
    ("2", "two"),
    ("3", "three"),
    ("4", "four"),
    ("5", "five"),
    ("6", "six"),
    ("7", "seven"),
    ("8", "eight"),
    ("9", "nine"),
    ("10", "ten"),
    ("11", "eleven"),
    ("12", "twelve"),
    ("13", "thirteen"),
    ("14", "fourteen"),
    ("15", "fifteen"),
    ("16", "sixteen"),
    ("17", "seventeen"),
    ("18", "eighteen"),
    ("19", "nineteen"),
    ("20", "twenty"),
    ("30", "thirty"),
    ("40", "fourty"),
    ("50", "fifty"),
    ("60", "sixty"),
    ("70", "seventy"),
    ("80", "eighty"),
    ("90", "ninety"),
)

# Accepted when parsing, never emitted.
TERM_ALIASES: Mapping[str, str] = MappingProxyType({"forty": "40"})

VALUE_TO_TERM: Mapping[str, str] = MappingProxyType(dict(BASE_TERMS))
TERM_TO_VALUE: Mapping[str, str] = MappingProxyType(
    {**{term: value for value, term in BASE_TERMS}, **TERM_ALIASES}
)

# ─── Latin Prefixes ──────────────────────────────────────────────────

VALUE_TO_PREFIX: Mapping[int, str] = MappingProxyType({
    1: "un",
    2: "duo",
    3: "tre",
    4: "quattuor",
    5: "quin",
    6: "sex",
    7: "septen",
    8: "octo",
    9: "novem",
})
PREFIX_TO_VALUE: Mapping[str, int] = MappingProxyType({p: v for v, p in VALUE_TO_PREFIX.items()})

# ─── Latin Roots ─────────────────────────────────────────────────────
# Stored without the "-illion"/"-illiard" suffix.

FACTOR_TO_ROOT: Mapping[int, str] = MappingProxyType({
    1: "m",
    2: "b",
    3: "tr",
    4: "quadr",
    5: "quint",
    6: "sext",
    7: "sept",
    8: "oct",
    9: "non",
    10: "dec",
    20: "vigint",
    30: "trigint",
    40: "quadragint",
    50: "quinquagint",
    60: "sexagint",
    70: "septuagint",
    80: "octogint",
    90: "nonagint",
    100: "cent",
})
ROOT_TO_FACTOR: Mapping[str, int] = MappingProxyType({r: f for f, r in FACTOR_TO_ROOT.items()})

MAX_FACTOR = 100

ILLION = "illion"
ILLIARD = "illiard"

# ─── Multiplicative Shifts ───────────────────────────────────────────
# Powers of ten with a word of their own below a million.

SHIFT_TO_TERM: Mapping[int, str] = MappingProxyType({
    2: "hundred",
    3: "thousand",
    4: "myriad",
})
TERM_TO_SHIFT: Mapping[str, int] = MappingProxyType({t: s for s, t in SHIFT_TO_TERM.items()})

# Shifts at or above this close a sub-numeral ("group").
GROUP_SHIFT = 3

# ─── Articles ────────────────────────────────────────────────────────

SIGN_TERMS: frozenset[str] = frozenset({"negative", "minus"})
ARTICLE = "a"
POINT = "point"
NEGATIVE = "negative"


def root_for_factor(factor: int) -> str | None:
    """Build the Latin root for a factor, composing prefix + root past the direct entries.

    Example:
        23 -> "tre" + "vigint" = "trevigint"
    """
    if factor in FACTOR_TO_ROOT:
        return FACTOR_TO_ROOT[factor]
    if not 10 < factor < MAX_FACTOR:
        return None
    prefix, base = factor % 10, factor - factor % 10
    return VALUE_TO_PREFIX[prefix] + FACTOR_TO_ROOT[base]


def factor_for_root(root: str) -> int | None:
    """Inverse of root_for_factor: "trevigint" -> 23, "gaz" -> None."""
    if root in ROOT_TO_FACTOR:
        return ROOT_TO_FACTOR[root]
    for prefix, value in PREFIX_TO_VALUE.items():
        if not root.startswith(prefix):
            continue
        base = ROOT_TO_FACTOR.get(root[len(prefix):])
        # Prefixes only combine with the tens roots (dec .. nonagint).
        if base is not None and 10 <= base < MAX_FACTOR:
            return base + value
    return None


def magnitude_for_position(position: int, long_scale: bool) -> tuple[int, str]:
    """Latin factor and suffix naming the group that starts at 10^position (position >= 6).

    Example:
        72 -> (23, "illion") in short scale, (12, "illion") in long scale
    """
    if long_scale:
        return position // 6, ILLIARD if position % 6 == 3 else ILLION
    return (position - 3) // 3, ILLION


def integral_width_limit(long_scale: bool) -> int:
    """Digits in the largest integral part the naming system can spell out (306 short, 606 long)."""
    if long_scale:
        return 6 * MAX_FACTOR + 6
    return 3 * MAX_FACTOR + 6
