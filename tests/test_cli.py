from __future__ import annotations

import pytest

from lonely_tribes.__main__ import main, parse_args


def test_parse_args_defaults() -> None:
    args = parse_args([])

    assert args.seed == 42
    assert (args.width, args.height) == (64, 64)
    assert not args.verbose


def test_prints_preview(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--seed", "42", "--width", "40", "--height", "30"]) == 0

    rows = capsys.readouterr().out.strip("\n").split("\n")
    assert len(rows) == 30
    assert all(len(row) == 40 for row in rows)


def test_invalid_grid_returns_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--width", "10", "--height", "10"]) == 1
    assert capsys.readouterr().out == ""
