#!/usr/bin/env python3
"""
Numero — Command Line Converter
================================

Converts numbers to English numerals and numerals to numbers.

Usage:
    python main.py 1,234.56                         # Number -> numeral
    python main.py "twelve million eighty-three thousand fifty-six"
    python main.py -s long "one milliard"           # Long scale
    printf '1\\n2\\n\\n' | python main.py -j 4      # One input per stdin line

Exit status:
    0 if every input converted, 1 on usage errors, otherwise the number of
    failed conversions (at most 255).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from typing import Sequence, TextIO

from pydantic import ValidationError

from numero.batch import convert_batch, count_failures, jobs_for
from numero.converter import Converter
from numero.exceptions import SeparatorConflict
from numero.models import ConversionOptions, ConversionResult, NamingSystem

# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[31m"
_YELLOW = "\033[33m"
_BLUE = "\033[34m"
_GREY = "\033[37m"
_RESET = "\033[0m"

_MAX_EXIT_CODE = 255


# ─── Option Values ──────────────────────────────────────────────────

NAMING_SYSTEM_ALIASES: dict[str, NamingSystem] = {
    "short-scale": NamingSystem.SHORT_SCALE,
    "short": NamingSystem.SHORT_SCALE,
    "ss": NamingSystem.SHORT_SCALE,
    "SS": NamingSystem.SHORT_SCALE,
    "long-scale": NamingSystem.LONG_SCALE,
    "long": NamingSystem.LONG_SCALE,
    "ls": NamingSystem.LONG_SCALE,
    "LS": NamingSystem.LONG_SCALE,
}

OUTPUT_MODES: dict[str, str] = {
    "descriptive": "descriptive", "d": "descriptive",
    "associative": "associative", "a": "associative",
    "bare": "bare", "b": "bare",
    "suppress": "suppress", "s": "suppress",
}

TIMING_MODES: dict[str, str] = {
    "total": "total", "t": "total",
    "single": "single", "s": "single",
    "all": "all", "a": "all",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def naming_system(value: str) -> NamingSystem:
    # argparse also passes string defaults through the type function
    if isinstance(value, NamingSystem):
        return value
    try:
        return NAMING_SYSTEM_ALIASES[value]
    except KeyError:
        raise argparse.ArgumentTypeError(
            f'"{value}" is not a valid number naming system. '
            "Supported naming systems are 'short-scale' and 'long-scale'."
        ) from None


def output_mode(value: str) -> str:
    if value not in OUTPUT_MODES:
        raise argparse.ArgumentTypeError(
            f'"{value}" is not a valid output mode. '
            "Supported output modes are 'descriptive', 'associative', 'bare' and 'suppress'."
        )
    return OUTPUT_MODES[value]


def timing_mode(value: str) -> str:
    if value not in TIMING_MODES:
        raise argparse.ArgumentTypeError(
            f'"{value}" is not a valid timing mode. Supported timing modes are \'total\', \'single\' and \'all\'.'
        )
    return TIMING_MODES[value]


def boolean(value: str) -> bool:
    if value.lower() in _TRUE:
        return True
    if value.lower() in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f'"{value}" is not a boolean value')


def symbol(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f'"{value}" is not a single character')
    return value


# ─── Argument Parsing ───────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numero",
        usage='numero [options] <input-1> [<input-2>] ["<input-3 with spaces>"]',
        description="Converts numbers to English numerals and vice versa.",
    )
    parser.add_argument("inputs", nargs="*", metavar="input", help="Input value (either number or numeral)")
    parser.add_argument("-i", "--input", dest="extra_inputs", nargs="+", action="extend", default=[],
                        metavar="INPUT", help="Input value (either number or numeral)")
    parser.add_argument("-j", "--jobs-count", type=int, default=1,
                        help="Maximum number of parallel jobs for conversion")
    parser.add_argument("-o", "--output-mode", type=output_mode,
                        help="Either 'descriptive', 'associative', 'bare' or 'suppress'")
    parser.add_argument("-s", "--naming-system", type=naming_system, default=NamingSystem.SHORT_SCALE,
                        help="Number naming system; either 'short-scale' ('SS') or 'long-scale' ('LS')")
    parser.add_argument("-l", "--language", default="en-us",
                        help="ISO 639-1 standard language code for conversion to numerals")
    parser.add_argument("--use-scientific-notation", type=boolean, nargs="?", const=True,
                        help="Uses scientific notation if applicable in conversion to numbers")
    parser.add_argument("-t", "--use-thousands-separator", type=boolean, nargs="?", const=True,
                        help="Uses thousands separators in conversion to numbers")
    parser.add_argument("-z", "--force-leading-zero", type=boolean, nargs="?", const=True,
                        help="Forces a leading zero in conversion to decimal numbers if the integral part "
                             "of a number is effectively zero")
    parser.add_argument("-T", "--thousands-separator-symbol", type=symbol, help="Thousands separator symbol")
    parser.add_argument("-D", "--decimal-separator-symbol", type=symbol, help="Decimal separator symbol")
    parser.add_argument("--debug-output", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--timing-mode", type=timing_mode, help=argparse.SUPPRESS)
    return parser


def options_from_args(args: argparse.Namespace) -> ConversionOptions:
    """Build conversion options from parsed arguments; only given options override defaults.

    Raises:
        SeparatorConflict: If the separators are the same.
        pydantic.ValidationError: If a separator is not a single permitted character.
    """
    values: dict[str, object] = {
        "naming_system": args.naming_system,
        "language": args.language,
        "debug_output": args.debug_output,
    }
    optional = {
        "use_scientific_notation": args.use_scientific_notation,
        "use_thousands_separators": args.use_thousands_separator,
        "force_leading_zero": args.force_leading_zero,
        "thousands_separator_symbol": args.thousands_separator_symbol,
        "decimal_separator_symbol": args.decimal_separator_symbol,
    }
    values.update({k: v for k, v in optional.items() if v is not None})
    return ConversionOptions.build(**values)


def read_stdin_inputs(stream: TextIO) -> list[str]:
    """Read one input per line until the first blank line."""
    inputs: list[str] = []
    for line in stream:
        line = line.rstrip("\r\n")
        if not line:
            break
        inputs.append(line)
    return inputs


# ─── Pretty Printer ─────────────────────────────────────────────────


def _scale_label(options: ConversionOptions) -> str:
    if options.naming_system == NamingSystem.SHORT_SCALE:
        return "short scale"
    if options.naming_system == NamingSystem.LONG_SCALE:
        return "long scale"
    return "undefined scale"


def _print_descriptive(result: ConversionResult, scale: str) -> None:
    if result.input_is_number:
        print(f"Number:  {_BLUE}{result.input}{_RESET}")
    else:
        print(f"Numeral: {_BLUE}{result.input} {_GREY}({scale}){_RESET}")

    if result.error:
        print(f"{_RED}Error: {result.output}{_RESET}", file=sys.stderr)
    elif result.input_is_number:
        print(f"Numeral: {_YELLOW}{result.output} {_GREY}({scale}){_RESET}")
    else:
        print(f"Number:  {_YELLOW}{result.output}{_RESET}")


def _print_associative(result: ConversionResult) -> None:
    if result.error:
        print(f"{_BLUE}{result.input}{_RESET} = {_RED}Error: {result.output}{_RESET}", file=sys.stderr)
    else:
        print(f"{_BLUE}{result.input}{_RESET} = {_YELLOW}{result.output}{_RESET}")


def _print_bare(result: ConversionResult) -> None:
    if result.error:
        print(f"{_RED}Error: {result.output}{_RESET}", file=sys.stderr)
    else:
        print(f"{_YELLOW}{result.output}{_RESET}")


def print_results(
    results: Sequence[ConversionResult],
    options: ConversionOptions,
    mode: str,
    timing: str | None = None,
) -> None:
    """Print each result in the chosen output mode, with per-input timings if requested."""
    scale = _scale_label(options)
    for result in results:
        if mode == "descriptive":
            _print_descriptive(result, scale)
        elif mode == "associative":
            _print_associative(result)
        elif mode == "bare":
            _print_bare(result)

        if timing in ("single", "all"):
            print(f"   - took {result.duration_us} us")
        if mode == "descriptive":
            print()


def print_timing_totals(results: Sequence[ConversionResult], jobs: int, parallel_us: int) -> None:
    total_us = sum(r.duration_us for r in results)
    print(f"   - took {total_us} us in absolute total ({total_us // len(results)} us on average)")
    if jobs > 1:
        print(
            f"   - took {parallel_us} us in parallel total ({parallel_us // len(results)} us on average) "
            f"using {jobs} jobs"
        )


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, convert every input and print the results.

    Returns:
        The process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug_output else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = options_from_args(args)
    except SeparatorConflict as e:
        print(f"{_RED}Error: {e}{_RESET}\n", file=sys.stderr)
        return 1
    except ValidationError as e:
        message = "; ".join(err["msg"] for err in e.errors())
        print(f"{_RED}Error: {message}{_RESET}\n", file=sys.stderr)
        return 1

    cmdline_inputs = list(args.inputs) + list(args.extra_inputs)
    stdin_inputs = [] if cmdline_inputs else read_stdin_inputs(sys.stdin)
    inputs = stdin_inputs or cmdline_inputs
    if not inputs:
        parser.print_help()
        return 1

    mode = args.output_mode or ("associative" if stdin_inputs else "descriptive")
    jobs_count = max(1, min(args.jobs_count, os.cpu_count() or 1))
    timed = args.timing_mode is not None

    converter = Converter(options)
    started = time.perf_counter()
    results = convert_batch(inputs, converter, jobs_count=jobs_count, timed=timed)
    parallel_us = int((time.perf_counter() - started) * 1_000_000)

    print_results(results, options, mode, args.timing_mode)
    if args.timing_mode in ("total", "all"):
        print_timing_totals(results, jobs_for(len(inputs), jobs_count), parallel_us)

    return min(count_failures(results), _MAX_EXIT_CODE)


if __name__ == "__main__":
    sys.exit(main())
