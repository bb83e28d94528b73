"""Tests for the S3 rounder."""

import numpy as np

from pathnorm.engine.stages.s0_tokenizer import tokenize
from pathnorm.engine.stages.s2_converter import convert
from pathnorm.engine.stages.s3_rounder import round_half_away, round_segments


def test_ties_round_away_from_zero():
    values = np.array([0.5, 1.5, 2.5, -0.5, -1.5, -2.5])
    assert round_half_away(values).tolist() == [1.0, 2.0, 3.0, -1.0, -2.0, -3.0]


def test_round_nearest():
    values = np.array([0.49, 0.51, -0.49, -0.51, 77.6142, 22.3858])
    assert round_half_away(values).tolist() == [0.0, 1.0, 0.0, -1.0, 78.0, 22.0]


def test_tiny_exponent_rounds_to_zero():
    segs = convert(tokenize("M-2.18557e-06 50L1 1Z"))
    round_segments(segs)
    assert segs[0][0] == 0.0


def test_rounds_in_place():
    seg = np.array([1.4, 2.6])
    round_segments([seg])
    assert seg.tolist() == [1.0, 3.0]


def test_idempotent_on_integers():
    segs = [np.array([1.0, -2.0]), np.array([3.0, 4.0, 5.0, 6.0, 7.0, 8.0])]
    before = [s.copy() for s in segs]
    round_segments(segs)
    for a, b in zip(segs, before):
        assert np.array_equal(a, b)
