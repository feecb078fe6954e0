"""Tests for the command line entry point."""

from __future__ import annotations

import argparse

import pytest

from generate import (
    DEFAULT_NUM_TESTS,
    build_parser,
    main,
    parse_num_tests,
    parse_seed,
    parse_test_type,
)
from problems import Operation


@pytest.mark.parametrize("value, expected", [("1", 1), ("999", 999), ("60", 60)])
def test_num_tests_in_range(value, expected):
    assert parse_num_tests(value) == expected


@pytest.mark.parametrize("value", ["0", "1000", "-3", "2.5", "ten", "", " 0_5 ", "+5", "\u0665"])
def test_num_tests_out_of_range(value):
    with pytest.raises(argparse.ArgumentTypeError, match="between 1 and 999"):
        parse_num_tests(value)


def test_test_type_parsing():
    assert parse_test_type("d") is Operation.DIVISION
    with pytest.raises(argparse.ArgumentTypeError, match="is not one of"):
        parse_test_type("dd")


def test_seed_parsing():
    assert parse_seed("0") == 0
    assert parse_seed("42") == 42
    with pytest.raises(argparse.ArgumentTypeError, match="non-negative"):
        parse_seed("-5")


def test_help_lists_test_types_and_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-h"])

    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert out.startswith("usage: arithmetic-tests")
    for option in ("--num-tests", "--output", "--test-type", "--seed"):
        assert option in out
    for line in ("a - Addition", "m - Multiplication", "s - Subtraction", "d - Division"):
        assert line in out


def test_defaults():
    args = build_parser().parse_args([])

    assert args.num_tests == DEFAULT_NUM_TESTS
    assert args.output == "tests"
    assert args.test_type is Operation.ADDITION
    assert args.seed is None


@pytest.mark.parametrize("argv", [
    ["-n", "0"],
    ["-n", "1000"],
    ["-t", "x"],
    ["-z"],
    ["-n"],
    ["stray"],
    ["--seed", "-5"],
    ["--seed", "abc"],
])
def test_bad_arguments_exit_with_usage(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_writes_tex_file(tmp_path):
    base = tmp_path / "practice"

    assert main(["-n", "1", "-t", "s", "-o", str(base), "--seed", "3", "-q"]) == 0

    output = (tmp_path / "practice.tex").read_text(encoding="utf-8")
    assert output.startswith("\\documentclass")
    assert output.endswith("\\end{document}")
    assert output.count("\\begin{tabular}") == 2


def test_seed_makes_output_reproducible(tmp_path):
    main(["-n", "2", "-o", str(tmp_path / "a"), "--seed", "11", "-q"])
    main(["-n", "2", "-o", str(tmp_path / "b"), "--seed", "11", "-q"])

    assert (tmp_path / "a.tex").read_text() == (tmp_path / "b.tex").read_text()


def test_unwritable_output_fails(tmp_path):
    missing_dir = tmp_path / "does" / "not" / "exist"

    assert main(["-n", "1", "-o", str(missing_dir / "tests"), "-q"]) == 1
    assert not missing_dir.exists()
