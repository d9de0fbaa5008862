#!/usr/bin/env python3
"""
Numero — Random Number / Numeral Generator
===========================================

Prints random numbers (or their numerals), one per line, e.g. to feed the
converter in bulk:

    python generate.py -c 1000 -M 30 | python main.py -j 8 -o suppress --timing-mode total
    python generate.py -c 5 -g numerals -s long -M 600
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Sequence

from main import naming_system
from numero.generator import GenerationMode, generate
from numero.models import ConversionOptions, NamingSystem

_RED = "\033[31m"
_RESET = "\033[0m"


def generation_mode(value: str) -> GenerationMode:
    try:
        return GenerationMode(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f'"{value}" is not a valid generation mode. Supported generation modes are \'numbers\' and \'numerals\'.'
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numero-generator", usage="numero-generator [options]")
    parser.add_argument("-c", "--count", type=int, required=True,
                        help="Count of numbers or numerals to be generated")
    parser.add_argument("-g", "--generation-mode", type=generation_mode, default=GenerationMode.NUMBERS,
                        help="Either 'numbers' or 'numerals'")
    parser.add_argument("-s", "--naming-system", type=naming_system, default=NamingSystem.SHORT_SCALE,
                        help="Number naming system; either 'short-scale' ('SS') or 'long-scale' ('LS')")
    parser.add_argument("-m", "--min-places", type=int, default=1,
                        help="Minimum number of places the generated random numbers shall have")
    parser.add_argument("-M", "--max-places", type=int, default=12,
                        help="Maximum number of places the generated random numbers shall have; at most 303 "
                             "in the 'short-scale' and 600 in the 'long-scale' naming system")
    parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    parser.add_argument("--debug-output", action="store_true", help=argparse.SUPPRESS)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug_output else logging.WARNING)

    options = ConversionOptions(naming_system=args.naming_system, debug_output=args.debug_output)
    try:
        lines = generate(
            args.count,
            args.generation_mode,
            options,
            min_places=args.min_places,
            max_places=args.max_places,
            rng=random.Random(args.seed),
        )
        for line in lines:
            print(line)
    except ValueError as e:
        print(f"{_RED}Error: {e}{_RESET}\n", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
