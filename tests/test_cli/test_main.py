"""Tests for the command-line entry point."""

import json

from pathnorm.main import main
from tests.conftest import CUBIC_OUTPUT, CUBIC_PATH, DEFAULT_OUTPUT, TOO_SHORT_PATH


def test_prints_output(capsys):
    assert main([CUBIC_PATH]) == 0
    out = capsys.readouterr().out
    assert out == CUBIC_OUTPUT + "\n"


def test_default_path_when_no_argument(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == DEFAULT_OUTPUT + "\n"


def test_error_exits_nonzero_without_output(capsys):
    assert main([TOO_SHORT_PATH]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "expected at least 3 segments" in captured.err


def test_json_output(capsys):
    assert main([CUBIC_PATH, "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["segments"] == [[1, 2], [3, 4, 5, 6, 7, 8]]
    assert data["text"] == CUBIC_OUTPUT


def test_json_error(capsys):
    assert main(["M0 0Q1 1 2 2L1 1Z", "--json"]) == 1
    captured = capsys.readouterr()
    data = json.loads(captured.out)
    assert data["error"]["kind"] == "ArityMismatch"
    assert data["segments"] is None


def test_json_out_of_range_number(capsys):
    assert main(["M0 1e999L1 1Z", "--json"]) == 1
    data = json.loads(capsys.readouterr().out)
    assert data["error"]["kind"] == "NumberParseError"
    assert data["error"]["context"]["token"] == "1e999"
    assert data["segments"] is None
