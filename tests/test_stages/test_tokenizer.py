"""Tests for the S0 tokenizer."""

from pathnorm.engine.stages.s0_tokenizer import tokenize
from tests.conftest import CUBIC_PATH, MIXED_PATH


def test_tokenize_cubic():
    segs = tokenize(CUBIC_PATH)
    assert [s.command for s in segs] == ["M", "C", "Z"]
    assert segs[0].payload == "1 2"
    assert segs[1].payload == "3 4 5 6 7 8"
    assert segs[2].payload == ""


def test_tokenize_indexes_in_order():
    segs = tokenize(MIXED_PATH)
    assert [s.index for s in segs] == list(range(len(segs)))
    assert "".join(s.text for s in segs) == MIXED_PATH


def test_exponent_and_sign_stay_in_payload():
    segs = tokenize("M-2.18557e-06 +5E+2Z")
    assert segs[0].payload == "-2.18557e-06 +5E+2"


def test_no_command_letters_gives_empty():
    assert tokenize("1 2 3 4") == []
    assert tokenize("") == []


def test_leading_text_is_dropped():
    segs = tokenize("  12 M1 2L3 4Z")
    assert segs[0].text == "M1 2"


def test_lowercase_letters_are_payload():
    segs = tokenize("M1 2l3 4Z")
    assert [s.command for s in segs] == ["M", "Z"]
    assert segs[0].payload == "1 2l3 4"
