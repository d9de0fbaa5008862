"""
Batch conversion with optional worker threads.

Results always come back in input order, whatever order the workers finish
in.  A failed input never aborts the batch: its ConversionResult carries the
error message and code instead of a converted value.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from .converter import Converter
from .exceptions import ConversionError
from .models import ConversionDirection, ConversionResult

logger = logging.getLogger(__name__)

# Fewer inputs than this per worker are not worth a thread.
INPUTS_PER_JOB = 10


def jobs_for(inputs_count: int, jobs_count: int) -> int:
    """Number of workers actually used for a batch."""
    return max(1, min(inputs_count // INPUTS_PER_JOB, jobs_count))


def convert_one(text: str, converter: Converter, timed: bool = False) -> ConversionResult:
    """Classify and convert a single input, capturing conversion errors."""
    if converter.is_number(text):
        direction = ConversionDirection.TO_NUMERAL
    elif converter.is_numeral(text):
        direction = ConversionDirection.TO_NUMBER
    else:
        return ConversionResult(
            input=text,
            output=f'"{text}" is neither number nor numeral.',
            error=True,
            code="NOT_CONVERTIBLE",
        )

    started = time.perf_counter() if timed else 0.0
    try:
        if direction == ConversionDirection.TO_NUMERAL:
            output = converter.to_numeral(text)
        else:
            output = converter.to_number(text)
    except ConversionError as e:
        logger.debug("conversion of %r failed: %s", text, e)
        return ConversionResult(input=text, direction=direction, output=str(e), error=True, code=e.code)

    duration_us = int((time.perf_counter() - started) * 1_000_000) if timed else 0
    return ConversionResult(input=text, direction=direction, output=output, duration_us=duration_us)


def convert_batch(
    inputs: Sequence[str],
    converter: Converter,
    jobs_count: int = 1,
    timed: bool = False,
) -> list[ConversionResult]:
    """Convert every input, in parallel if `jobs_count` allows.

    Args:
        inputs: Numbers and/or numerals.
        converter: Shared converter; its options must not change during the batch.
        jobs_count: Upper bound on worker threads.
        timed: Measure each conversion in microseconds.

    Returns:
        One ConversionResult per input, in input order.
    """
    workers = jobs_for(len(inputs), jobs_count)
    if workers == 1:
        return [convert_one(text, converter, timed) for text in inputs]

    logger.info("Converting %d inputs using %d jobs", len(inputs), workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda text: convert_one(text, converter, timed), inputs))


def count_failures(results: Sequence[ConversionResult]) -> int:
    return sum(1 for r in results if r.error)
