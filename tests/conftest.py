"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathnorm.config import DEFAULT_PATH

# Sample path data

CUBIC_PATH = "M1 2C3 4 5 6 7 8Z"
CUBIC_OUTPUT = "[[1, 2],\n [3, 4, 5, 6, 7, 8]]"

HORIZONTAL_PATH = "M0 0L10 10H20Z"
HORIZONTAL_OUTPUT = "[[0, 0],\n [10, 10],\n [20, 10]]"

# V/H straight after the M: the M supplies the missing axis
SHORTHAND_AFTER_MOVE_PATH = "M3 4V9H7Z"

# Every command, fractional and exponent values
MIXED_PATH = "M10.4 -3.6 C1e1 2.5E0 -2.5 0.49 11 12 L 5 6 V 7.5 H -8.2 L1 1 Z"

TOO_SHORT_PATH = "M1 2Z"

DEFAULT_OUTPUT = (
    "[[0, 50],\n"
    " [0, 78, 22, 100, 50, 100],\n"
    " [50, 0],\n"
    " [22, 0, 0, 22, 0, 50]]"
)


@pytest.fixture
def default_path() -> str:
    return DEFAULT_PATH
