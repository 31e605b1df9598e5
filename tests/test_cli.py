"""Tests for the tiny-qc command-line interface."""

import logging

import pytest

from tiny_qc.cli import main, parse_gate_spec
from tiny_qc.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    """Drop handlers the CLI attaches so later tests do not write to a closed capture stream."""
    logger = logging.getLogger("tiny_qc")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_parse_gate_spec():
    assert parse_gate_spec("h") == ("h", ())
    assert parse_gate_spec("phase_shift:0.5") == ("phase_shift", (0.5,))


def test_sample_deterministic(capsys):
    code = main(["sample", "--width", "2", "--init", "2", "--gate", "cnot",
                 "--shots", "10", "--seed", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert "|3⟩:   10" in out


def test_sample_hadamard(capsys):
    code = main(["sample", "--gate", "h", "--shots", "200", "--seed", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "|0⟩" in out and "|1⟩" in out


def test_deutsch_command(capsys):
    assert main(["deutsch", "--function", "negation", "--seed", "0"]) == 0
    assert "balanced" in capsys.readouterr().out


def test_info_command(capsys):
    assert main(["info"]) == 0
    assert "toffoli" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["sample", "--gate", "warp"],
    ["sample", "--width", "2", "--gate", "x"],
    ["sample", "--width", "1", "--init", "4"],
])
def test_errors_reported(capsys, argv):
    assert main(argv) == 1
    assert "error:" in capsys.readouterr().err


def test_setup_logging_idempotent():
    logger = setup_logging(level="DEBUG")
    count = len(logger.handlers)
    setup_logging(level="INFO")
    assert len(logger.handlers) == count
    assert logger.level == logging.INFO
