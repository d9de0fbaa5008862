"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from numero.converter import Converter  # noqa: E402
from numero.models import ConversionOptions, NamingSystem  # noqa: E402


@pytest.fixture
def converter() -> Converter:
    """Default options: short scale, ',' thousands, '.' decimal, separators on, leading zero forced."""
    return Converter()


@pytest.fixture
def long_scale_converter() -> Converter:
    return Converter(ConversionOptions(naming_system=NamingSystem.LONG_SCALE))


@pytest.fixture
def german_converter() -> Converter:
    return Converter(ConversionOptions(thousands_separator_symbol=".", decimal_separator_symbol=","))
